# unifyerr/core/kind/__init__.py
"""
Capability-based construction dispatch.

This package defines the components responsible for:
- Naming the three construction strategies (capability tags)
- Selecting exactly one strategy per input type (resolver)

No side effects on import.
"""

from .tags import Kind, Adhoc, StructuredCause, Boxed, ADHOC, STRUCTURED_CAUSE, BOXED, tag_for
from .resolver import resolve, resolve_type, register_kind, reject_kind

__all__ = [
    "Kind",
    "Adhoc",
    "StructuredCause",
    "Boxed",
    "ADHOC",
    "STRUCTURED_CAUSE",
    "BOXED",
    "tag_for",
    "resolve",
    "resolve_type",
    "register_kind",
    "reject_kind",
]
