# unifyerr/core/runtime/capability.py
"""
Host Capability Descriptor

Read-only view of what the interpreter lets construction record.

Two binary flags:
- backtrace: the host can walk the current stack
- track_caller: the host can identify the frame that called into the library

Effective capabilities combine the host view with the active CaptureConfig.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional
import inspect
import sys


@dataclass(frozen=True)
class HostCapabilities:
    """Which optional fields a unified error may carry"""
    backtrace: bool
    track_caller: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "backtrace": self.backtrace,
            "track_caller": self.track_caller,
        }

    def __str__(self) -> str:
        lines = ["Host Capabilities:"]
        for name, enabled in [
            ("Backtrace", self.backtrace),
            ("Call-site tracking", self.track_caller),
        ]:
            lines.append(f"  {name}: {'enabled' if enabled else 'disabled'}")
        return "\n".join(lines)


@lru_cache(maxsize=1)
def detect_capabilities() -> HostCapabilities:
    """
    Probe the interpreter once.

    Frame introspection is optional for Python implementations;
    inspect.currentframe() returns None where it is missing.
    """
    has_frames = inspect.currentframe() is not None
    return HostCapabilities(
        backtrace=has_frames,
        track_caller=has_frames and hasattr(sys, "_getframe"),
    )


def effective_capabilities(config=None) -> HostCapabilities:
    """
    Host capabilities narrowed by configuration.

    Args:
        config: CaptureConfig to apply (default: the active config)
    """
    if config is None:
        from unifyerr.config.loader import get_config
        config = get_config()

    host = detect_capabilities()
    return HostCapabilities(
        backtrace=host.backtrace and config.backtrace,
        track_caller=host.track_caller and config.track_caller,
    )


def frame_at(depth: int) -> Optional[Any]:
    """
    Return the frame ``depth`` levels above the caller of this function.

    frame_at(0) is the caller itself. Returns None when the stack is
    shallower than requested or frames are unavailable.
    """
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


__all__ = [
    "HostCapabilities",
    "detect_capabilities",
    "effective_capabilities",
    "frame_at",
]
