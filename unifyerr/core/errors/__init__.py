# unifyerr/core/errors/__init__.py
"""
Core error types for unifyerr.

This package defines the components responsible for:
- Representing the unified error
- Boxing errors behind a type-erased wrapper
- Walking cause chains through the structured error interface

No side effects on import.
"""

from .exceptions import UnresolvableInputError, ConfigError
from .chain import source_of, iter_chain
from .boxed import BoxedError
from .report import ErrorReportV1, FrameV1, LocationV1
from .unified import UnifiedError

__all__ = [
    "UnresolvableInputError",
    "ConfigError",
    "source_of",
    "iter_chain",
    "BoxedError",
    "ErrorReportV1",
    "FrameV1",
    "LocationV1",
    "UnifiedError",
]
