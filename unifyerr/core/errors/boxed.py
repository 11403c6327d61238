# unifyerr/core/errors/boxed.py
"""
BoxedError: an owned, type-erased error object.

Boxing hides the concrete type of an exception while keeping it
interrogable at the first level: display text, cause chain and backtrace
all delegate to the wrapped error. Typical producers are worker pools and
plugin boundaries that hand errors across without their types.
"""

from __future__ import annotations

from typing import Optional

from unifyerr.core.capture.backtrace import Backtrace, backtrace_of
from .chain import source_of
from .exceptions import _safe_repr, _safe_str


class BoxedError(Exception):
    """Type-erased holder of an exception"""

    def __init__(self, error: BaseException, backtrace: Optional[Backtrace] = None) -> None:
        if not isinstance(error, BaseException):
            raise TypeError(f"BoxedError wraps exceptions, got {type(error).__qualname__}")
        super().__init__(_safe_str(error))
        self._error = error
        # Read the wrapped traceback once so every reader sees the same object
        self._backtrace = backtrace if backtrace is not None else backtrace_of(error)

    @property
    def error(self) -> BaseException:
        return self._error

    @property
    def backtrace(self) -> Optional[Backtrace]:
        # A box raised after boxing reports its own traceback, read once
        if self._backtrace is None and self.__traceback__ is not None:
            self._backtrace = Backtrace.from_traceback(self.__traceback__)
        return self._backtrace

    def source(self) -> Optional[BaseException]:
        return source_of(self._error)

    def __str__(self) -> str:
        return _safe_str(self._error)

    def __repr__(self) -> str:
        return f"BoxedError({_safe_repr(self._error)})"


__all__ = ["BoxedError"]
