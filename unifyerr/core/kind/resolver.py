# unifyerr/core/kind/resolver.py
"""
Capability Resolver: pick exactly one construction strategy for a value.

Resolution is keyed on the value's type through functools.singledispatch:

    object          -> ADHOC             (displayable)
    BaseException   -> STRUCTURED_CAUSE  (structured error interface)
    BoxedError      -> BOXED             (already type-erased)
    NoneType        -> rejected

Overlaps are settled by the MRO: the most specific registration wins, so
BoxedError (an Exception) resolves to BOXED and a plain exception never
falls back to ADHOC. Types that are not exceptions never reach
STRUCTURED_CAUSE. singledispatch caches the answer per type, so the
choice is made once for each type and never by inspecting the value.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any, Type
import logging

from unifyerr.core.errors.boxed import BoxedError
from unifyerr.core.errors.exceptions import UnresolvableInputError
from .tags import ADHOC, BOXED, STRUCTURED_CAUSE, Kind, tag_for

logger = logging.getLogger(__name__)


@singledispatch
def _classify(value: Any):
    return ADHOC


@_classify.register(BaseException)
def _classify_exception(value: BaseException):
    return STRUCTURED_CAUSE


@_classify.register(BoxedError)
def _classify_boxed(value: BoxedError):
    return BOXED


def _reject(value: Any):
    raise UnresolvableInputError(type(value))


_classify.register(type(None), _reject)


def resolve(value: Any):
    """
    Capability tag for ``value``.

    Raises:
        UnresolvableInputError: the value's type is rejected (None by default)
    """
    return _classify(value)


def resolve_type(cls: Type[Any]):
    """
    Capability tag for instances of ``cls``, without an instance.

    Raises:
        UnresolvableInputError: the type is rejected
    """
    impl = _classify.dispatch(cls)
    if impl is _reject:
        raise UnresolvableInputError(cls)
    return impl(None)


def register_kind(cls: Type[Any], kind) -> None:
    """
    Route instances of ``cls`` (and its subclasses) to a strategy.

    Args:
        cls: Type to register
        kind: Kind, its string value, or a tag instance
    """
    tag = tag_for(getattr(kind, "kind", kind))
    if tag.kind is not Kind.ADHOC and not issubclass(cls, BaseException):
        raise TypeError(
            f"{cls.__qualname__} is not an exception type and cannot use the {tag.kind.value} strategy"
        )
    _classify.register(cls, lambda value, _tag=tag: _tag)
    logger.debug("registered %s -> %s", cls.__qualname__, tag.kind.value)


def reject_kind(cls: Type[Any]) -> None:
    """Refuse to build errors from instances of ``cls``"""
    _classify.register(cls, _reject)
    logger.debug("registered %s -> rejected", cls.__qualname__)


__all__ = [
    "resolve",
    "resolve_type",
    "register_kind",
    "reject_kind",
]
