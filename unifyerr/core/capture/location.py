# unifyerr/core/capture/location.py
"""
Call-site location capture.

Records where a construction was invoked. The ``stacklevel`` argument
follows warnings.warn: 1 is the direct caller of the function that asks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from unifyerr.core.runtime.capability import effective_capabilities, frame_at


@dataclass(frozen=True)
class Location:
    """File/line of a construction call"""
    file: str
    line: int
    function: str = ""

    @classmethod
    def from_frame(cls, frame) -> "Location":
        code = frame.f_code
        return cls(file=code.co_filename, line=frame.f_lineno, function=code.co_name)

    def to_dict(self) -> Dict[str, Any]:
        return {"file": self.file, "line": self.line, "function": self.function}

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


def caller_location(stacklevel: int = 1) -> Optional[Location]:
    """
    Location of the frame ``stacklevel`` levels above the calling function.

    Returns None when call-site tracking is disabled or the stack is too shallow.
    """
    if not effective_capabilities().track_caller:
        return None
    frame = frame_at(stacklevel + 1)
    if frame is None:
        return None
    try:
        return Location.from_frame(frame)
    finally:
        del frame


__all__ = [
    "Location",
    "caller_location",
]
