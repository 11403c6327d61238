# unifyerr/core/runtime/__init__.py
"""
Runtime (host) introspection for unifyerr.

No side effects on import.
"""

from .capability import HostCapabilities, detect_capabilities, effective_capabilities, frame_at

__all__ = [
    "HostCapabilities",
    "detect_capabilities",
    "effective_capabilities",
    "frame_at",
]
