# unifyerr/core/errors/chain.py
"""
Structured error interface helpers.

An error's cause is, in order of preference:
1. ``source()`` for boxed and unified errors (other classes may define an
   unrelated ``source`` attribute and are not called)
2. ``__cause__`` (explicit ``raise ... from ...``)
3. ``__context__`` unless suppressed (implicit chaining)
"""

from __future__ import annotations

from typing import Any, Iterator, Optional


def source_of(error: Any) -> Optional[BaseException]:
    """First-level cause of ``error``, or None"""
    from .boxed import BoxedError
    from .unified import UnifiedError

    if isinstance(error, (BoxedError, UnifiedError)):
        return error.source()
    if isinstance(error, BaseException):
        if error.__cause__ is not None:
            return error.__cause__
        if not error.__suppress_context__:
            return error.__context__
    return None


def iter_chain(first: Optional[BaseException]) -> Iterator[BaseException]:
    """
    Walk the cause chain starting at ``first``.

    Stops at the first repeated error so cyclic ``__context__`` links terminate.
    """
    seen = set()
    current = first
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = source_of(current)


__all__ = [
    "source_of",
    "iter_chain",
]
