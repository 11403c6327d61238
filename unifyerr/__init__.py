# unifyerr/__init__.py
"""
unifyerr - one error type for every failure shape

User-facing API (recommended):
- unify(): build a UnifiedError from a message, an exception, or a BoxedError
- from_message / from_error / from_boxed: explicit construction strategies
- UnifiedError: the single error type all of them return
- BoxedError: type-erased wrapper around an exception

Advanced/Internal API (for integrators):
- core.kind: capability tags and the resolver (register_kind, reject_kind)
- core.sink: ErrorSink protocol for custom UnifiedError subclasses
- config: capture flags (backtrace, call-site tracking)

Basic usage:
    >>> from unifyerr import unify
    >>> err = unify("disk full")
    >>> str(err), list(err.causes())
    ('disk full', [])

Wrapping an exception keeps its chain:
    >>> try:
    ...     open("/missing")
    ... except OSError as e:
    ...     err = unify(e)
    >>> err.backtrace is not None
    True

Startup configuration:
    >>> from unifyerr import configure, CaptureConfig
    >>> _ = configure(CaptureConfig(backtrace=False))
"""

__version__ = "0.1.0"

# User-facing API (main entry point)
from .api import unify, from_message, from_error, from_boxed

# Core types
from .core.errors import UnifiedError, BoxedError, UnresolvableInputError, ConfigError, ErrorReportV1
from .core.capture import Backtrace, Location
from .core.kind import (
    Kind,
    Adhoc,
    StructuredCause,
    Boxed,
    ADHOC,
    STRUCTURED_CAUSE,
    BOXED,
    resolve,
    resolve_type,
    register_kind,
    reject_kind,
)
from .core.sink import ErrorSink, UnifiedErrorSink, DEFAULT_SINK

# Configuration
from .config import CaptureConfig, load_config, configure, get_config, HostCapabilities

__all__ = [
    # Version
    "__version__",

    # User-facing API
    "unify",
    "from_message",
    "from_error",
    "from_boxed",

    # Core types
    "UnifiedError",
    "BoxedError",
    "UnresolvableInputError",
    "ConfigError",
    "ErrorReportV1",
    "Backtrace",
    "Location",

    # Capability tags
    "Kind",
    "Adhoc",
    "StructuredCause",
    "Boxed",
    "ADHOC",
    "STRUCTURED_CAUSE",
    "BOXED",
    "resolve",
    "resolve_type",
    "register_kind",
    "reject_kind",

    # Sink
    "ErrorSink",
    "UnifiedErrorSink",
    "DEFAULT_SINK",

    # Configuration
    "CaptureConfig",
    "load_config",
    "configure",
    "get_config",
    "HostCapabilities",
]
