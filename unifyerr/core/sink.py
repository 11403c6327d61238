# unifyerr/core/sink.py
"""
Error Sink: the unified-error constructor consumed by the construction core.

Each construction strategy calls exactly one of the three operations.
Any object with these methods can stand in for the default sink, e.g.
to build a project-specific UnifiedError subclass.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Type, runtime_checkable

from unifyerr.core.capture.backtrace import Backtrace
from unifyerr.core.capture.location import Location
from unifyerr.core.errors.unified import UnifiedError


@runtime_checkable
class ErrorSink(Protocol):
    def build(
        self,
        message: Any,
        backtrace: Optional[Backtrace],
        location: Optional[Location],
    ) -> UnifiedError: ...

    def build_from_cause(
        self,
        error: BaseException,
        location: Optional[Location],
    ) -> UnifiedError: ...

    def build_from_boxed(
        self,
        error: BaseException,
        backtrace: Optional[Backtrace],
        location: Optional[Location],
    ) -> UnifiedError: ...


class UnifiedErrorSink:
    """Builds ``error_class`` (UnifiedError or a subclass)"""

    def __init__(self, error_class: Type[UnifiedError] = UnifiedError) -> None:
        self.error_class = error_class

    def build(self, message, backtrace, location):
        return self.error_class.from_adhoc(message, backtrace, location)

    def build_from_cause(self, error, location):
        return self.error_class.from_cause(error, location)

    def build_from_boxed(self, error, backtrace, location):
        return self.error_class.from_boxed(error, backtrace, location)

    def __repr__(self) -> str:
        return f"UnifiedErrorSink({self.error_class.__name__})"


DEFAULT_SINK: ErrorSink = UnifiedErrorSink()


__all__ = [
    "ErrorSink",
    "UnifiedErrorSink",
    "DEFAULT_SINK",
]
