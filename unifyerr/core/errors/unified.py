# unifyerr/core/errors/unified.py
from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

from unifyerr.core.capture.backtrace import Backtrace, backtrace_of
from unifyerr.core.capture.location import Location
from .chain import iter_chain, source_of
from .exceptions import _safe_repr, _safe_str
from .report import ErrorReportV1, FrameV1, LocationV1


class UnifiedError(Exception):
    """
    The one opaque error type every construction path produces.

    Wraps either a message (display text only, no cause) or an error
    object whose cause chain and backtrace stay reachable. Which path built
    it is not exposed; callers see display text, causes, backtrace and
    location.
    """

    def __init__(
        self,
        message: Any = None,
        *,
        inner: Optional[BaseException] = None,
        backtrace: Optional[Backtrace] = None,
        location: Optional[Location] = None,
    ) -> None:
        subject = inner if inner is not None else message
        # Message text is fixed at construction, later mutation of the input is not seen
        self._text = _safe_str(subject)
        self._debug = _safe_repr(subject)
        self._inner = inner
        # Read the wrapped backtrace once so every reader sees the same object
        if backtrace is None and inner is not None:
            backtrace = backtrace_of(inner)
        self._backtrace = backtrace
        self._location = location
        super().__init__(self._text)
        source = self.source()
        if isinstance(source, BaseException):
            self.__cause__ = source

    # -------- builders (error sink contract) --------

    @classmethod
    def from_adhoc(
        cls,
        message: Any,
        backtrace: Optional[Backtrace] = None,
        location: Optional[Location] = None,
    ) -> "UnifiedError":
        return cls(message, backtrace=backtrace, location=location)

    @classmethod
    def from_cause(cls, error: BaseException, location: Optional[Location] = None) -> "UnifiedError":
        """
        Convert an exception, keeping its chain and traceback.

        An existing UnifiedError converts to itself.
        """
        if isinstance(error, UnifiedError):
            return error
        return cls(inner=error, location=location)

    @classmethod
    def from_boxed(
        cls,
        error: BaseException,
        backtrace: Optional[Backtrace] = None,
        location: Optional[Location] = None,
    ) -> "UnifiedError":
        return cls(inner=error, backtrace=backtrace, location=location)

    # -------- general interface --------

    @property
    def inner(self) -> Optional[BaseException]:
        """The wrapped error object, or None for message-only errors"""
        return self._inner

    @property
    def backtrace(self) -> Optional[Backtrace]:
        return self._backtrace

    @property
    def location(self) -> Optional[Location]:
        return self._location

    def set_location(self, location: Optional[Location]) -> None:
        self._location = location

    def source(self) -> Optional[BaseException]:
        if self._inner is None:
            return None
        return source_of(self._inner)

    def causes(self) -> Iterator[BaseException]:
        """Cause chain, nearest first; empty for message-only errors"""
        return iter_chain(self.source())

    def root_cause(self) -> Any:
        """Innermost cause, or this error when there is none"""
        root: Any = self
        for cause in self.causes():
            root = cause
        return root

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._debug})"

    def report(self) -> ErrorReportV1:
        backtrace = self.backtrace
        location = self._location
        return ErrorReportV1(
            message=self._text,
            causes=[_safe_str(c) for c in self.causes()],
            location=LocationV1(**location.to_dict()) if location is not None else None,
            backtrace=[FrameV1(**f) for f in backtrace.to_list()] if backtrace is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.report().model_dump(mode="json")


__all__ = ["UnifiedError"]
