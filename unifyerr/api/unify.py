# unifyerr/api/unify.py
"""
Construction entry points.

- unify(value): resolve the strategy from the value's type, then build
- from_message / from_error / from_boxed: pick the strategy explicitly

All accept ``sink`` (an ErrorSink, default builds UnifiedError) and
``stacklevel`` (1 = the direct caller, as in warnings.warn).
"""

from __future__ import annotations

from typing import Any, Optional

from unifyerr.core.errors.boxed import BoxedError
from unifyerr.core.errors.exceptions import UnresolvableInputError
from unifyerr.core.errors.unified import UnifiedError
from unifyerr.core.kind.resolver import resolve
from unifyerr.core.kind.tags import ADHOC, BOXED, STRUCTURED_CAUSE
from unifyerr.core.sink import ErrorSink


def unify(value: Any, *, sink: Optional[ErrorSink] = None, stacklevel: int = 1) -> UnifiedError:
    """
    Build a unified error from any supported value.

    Args:
        value: message, exception, or BoxedError
        sink: Error sink to build with
        stacklevel: Which caller to record as the construction site

    Returns:
        UnifiedError

    Raises:
        UnresolvableInputError: value's type is rejected (e.g. None)

    Example:
        >>> err = unify("disk full")
        >>> str(err)
        'disk full'
    """
    tag = resolve(value)
    return tag.new(value, sink=sink, stacklevel=stacklevel + 1)


def from_message(message: Any, *, sink: Optional[ErrorSink] = None, stacklevel: int = 1) -> UnifiedError:
    """Message-only error; display text is ``str(message)``, no cause"""
    if message is None:
        raise UnresolvableInputError(type(None))
    return ADHOC.new(message, sink=sink, stacklevel=stacklevel + 1)


def from_error(error: BaseException, *, sink: Optional[ErrorSink] = None, stacklevel: int = 1) -> UnifiedError:
    """Error that keeps ``error``'s cause chain and traceback"""
    if not isinstance(error, BaseException):
        raise TypeError(f"from_error() needs an exception, got {type(error).__qualname__}")
    return STRUCTURED_CAUSE.new(error, sink=sink, stacklevel=stacklevel + 1)


def from_boxed(error: BaseException, *, sink: Optional[ErrorSink] = None, stacklevel: int = 1) -> UnifiedError:
    """
    Error wrapping a boxed error as-is.

    A bare exception is boxed first.
    """
    if not isinstance(error, BoxedError):
        error = BoxedError(error)
    return BOXED.new(error, sink=sink, stacklevel=stacklevel + 1)


__all__ = [
    "unify",
    "from_message",
    "from_error",
    "from_boxed",
]
