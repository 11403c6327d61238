# unifyerr/core/kind/tags.py
"""
Capability Tags

Stateless markers, one per construction strategy:

- ADHOC: a displayable value with no structured cause
- STRUCTURED_CAUSE: an exception whose chain and traceback are kept
- BOXED: a BoxedError kept as-is as the wrapped error

Each tag's ``new()`` captures what its strategy needs and calls exactly
one error sink operation.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional
import logging

from unifyerr.core.capture.backtrace import backtrace_if_absent, capture_backtrace
from unifyerr.core.capture.location import caller_location
from unifyerr.core.errors.unified import UnifiedError
from unifyerr.core.sink import DEFAULT_SINK, ErrorSink

logger = logging.getLogger(__name__)


class Kind(str, Enum):
    """
    Construction strategy names.

    Precedence when a type qualifies for several: BOXED > STRUCTURED_CAUSE > ADHOC.
    """
    ADHOC = "adhoc"
    STRUCTURED_CAUSE = "structured_cause"
    BOXED = "boxed"


class _Tag:
    __slots__ = ()
    kind: Kind

    def __repr__(self) -> str:
        return type(self).__name__


class Adhoc(_Tag):
    """Message-only construction: always captures backtrace and location"""
    __slots__ = ()
    kind = Kind.ADHOC

    def new(self, message: Any, *, sink: Optional[ErrorSink] = None, stacklevel: int = 1) -> UnifiedError:
        if sink is None:
            sink = DEFAULT_SINK
        location = caller_location(stacklevel)
        backtrace = capture_backtrace(stacklevel)
        logger.debug("building adhoc error at %s", location)
        return sink.build(message, backtrace, location)


class StructuredCause(_Tag):
    """Exception conversion: keeps the chain, re-stamps location only"""
    __slots__ = ()
    kind = Kind.STRUCTURED_CAUSE

    def new(self, error: BaseException, *, sink: Optional[ErrorSink] = None, stacklevel: int = 1) -> UnifiedError:
        if sink is None:
            sink = DEFAULT_SINK
        location = caller_location(stacklevel)
        logger.debug("converting %s at %s", type(error).__qualname__, location)
        unified = sink.build_from_cause(error, location)
        # Conversion may return an existing UnifiedError carrying an older call site
        if location is not None:
            unified.set_location(location)
        return unified


class Boxed(_Tag):
    """Boxed error: wrapped as-is, backtrace captured only if absent"""
    __slots__ = ()
    kind = Kind.BOXED

    def new(self, error: BaseException, *, sink: Optional[ErrorSink] = None, stacklevel: int = 1) -> UnifiedError:
        if sink is None:
            sink = DEFAULT_SINK
        location = caller_location(stacklevel)
        backtrace = backtrace_if_absent(error, stacklevel)
        logger.debug("wrapping boxed %s at %s", type(error).__qualname__, location)
        return sink.build_from_boxed(error, backtrace, location)


ADHOC = Adhoc()
STRUCTURED_CAUSE = StructuredCause()
BOXED = Boxed()

_TAGS = {tag.kind: tag for tag in (ADHOC, STRUCTURED_CAUSE, BOXED)}


def tag_for(kind) -> _Tag:
    """Tag singleton for a Kind (or its string value)"""
    return _TAGS[Kind(kind)]


__all__ = [
    "Kind",
    "Adhoc",
    "StructuredCause",
    "Boxed",
    "ADHOC",
    "STRUCTURED_CAUSE",
    "BOXED",
    "tag_for",
]
