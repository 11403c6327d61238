# unifyerr/core/capture/backtrace.py
"""
Backtrace capture.

A Backtrace is a frozen traceback.StackSummary, oldest frame first.
Two sources:
- an exception's own __traceback__ (or an explicit ``backtrace`` attribute)
- a stack walk at the construction site

Stack walks are the expensive path and only happen when the input
carries nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional
import traceback

from unifyerr.core.runtime.capability import effective_capabilities, frame_at


@dataclass(frozen=True)
class Backtrace:
    """Captured stack trace"""
    frames: traceback.StackSummary

    @classmethod
    def from_traceback(cls, tb, limit: Optional[int] = None) -> "Backtrace":
        return cls(frames=traceback.extract_tb(tb, limit=limit))

    @classmethod
    def from_frame(cls, frame, limit: Optional[int] = None) -> "Backtrace":
        return cls(frames=traceback.extract_stack(frame, limit=limit))

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[traceback.FrameSummary]:
        return iter(self.frames)

    def __str__(self) -> str:
        return "".join(self.frames.format())

    def to_list(self) -> List[Dict[str, Any]]:
        return [
            {
                "file": fs.filename,
                "line": fs.lineno,
                "function": fs.name,
                "code": fs.line or None,
            }
            for fs in self.frames
        ]


def capture_backtrace(stacklevel: int = 1) -> Optional[Backtrace]:
    """
    Walk the stack from the frame ``stacklevel`` levels above the caller.

    Returns None when backtraces are disabled or unavailable.
    """
    if not effective_capabilities().backtrace:
        return None

    from unifyerr.config.loader import get_config

    frame = frame_at(stacklevel + 1)
    if frame is None:
        return None
    try:
        return Backtrace.from_frame(frame, limit=get_config().max_frames)
    finally:
        del frame


def backtrace_of(error: Any) -> Optional[Backtrace]:
    """
    The backtrace an error already reports, if any.

    Checks an explicit ``backtrace`` attribute first, then the traceback
    attached when the exception was raised.
    """
    explicit = getattr(error, "backtrace", None)
    if isinstance(explicit, Backtrace):
        return explicit
    tb = getattr(error, "__traceback__", None)
    if tb is not None:
        return Backtrace.from_traceback(tb)
    return None


def backtrace_if_absent(error: Any, stacklevel: int = 1) -> Optional[Backtrace]:
    """
    Capture a backtrace only when ``error`` reports none.

    Returns None when the error already has one; the consumer reads it
    from the error itself.
    """
    if backtrace_of(error) is not None:
        return None
    return capture_backtrace(stacklevel + 1)


__all__ = [
    "Backtrace",
    "capture_backtrace",
    "backtrace_of",
    "backtrace_if_absent",
]
