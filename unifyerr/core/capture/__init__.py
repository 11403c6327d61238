# unifyerr/core/capture/__init__.py
"""
Construction-site capture for unifyerr.

This package defines the components responsible for:
- Capturing backtraces (only when the input carries none)
- Recording call-site locations

Both are gated by the host capability flags. No side effects on import.
"""

from .backtrace import Backtrace, capture_backtrace, backtrace_of, backtrace_if_absent
from .location import Location, caller_location

__all__ = [
    "Backtrace",
    "capture_backtrace",
    "backtrace_of",
    "backtrace_if_absent",
    "Location",
    "caller_location",
]
