# unifyerr/config/capture.py
"""
Capture Configuration

Host-capability flags that gate the optional fields of a unified error.

Design principles:
- Both flags are global and fixed once at startup, never per call
- Disabled means "never populated", not "populated lazily"
- Code defaults are the truth; YAML and environment only override
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CaptureConfig:
    """
    What construction is allowed to record.

    backtrace: capture a stack at the construction site when the input has none
    track_caller: record the file/line of the construction call
    max_frames: keep at most this many of the most recent frames (None = all)
    """

    backtrace: bool = True
    track_caller: bool = True
    max_frames: Optional[int] = None

    @classmethod
    def default(cls) -> "CaptureConfig":
        return cls()

    @classmethod
    def disabled(cls) -> "CaptureConfig":
        """Configuration with both optional fields switched off"""
        return cls(backtrace=False, track_caller=False)

    def merged(self, data: Dict[str, Any]) -> "CaptureConfig":
        """Return a copy with known keys from ``data`` applied"""
        known = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "backtrace": self.backtrace,
            "track_caller": self.track_caller,
            "max_frames": self.max_frames,
        }
