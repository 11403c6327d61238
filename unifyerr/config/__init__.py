# unifyerr/config/__init__.py
"""
unifyerr Configuration

Design principles:
1. Two global flags (backtrace, track_caller) fixed at startup, never per call
2. Effective behavior = host capability AND configuration
3. YAML is input parameters, code has defaults (YAML can be deleted)
"""

from .capture import CaptureConfig
from .validator import validate_config, ConfigIssue
from .loader import (
    DEFAULT_CONFIG_PATH,
    ENV_BACKTRACE,
    ENV_TRACK_CALLER,
    load_config,
    configure,
    get_config,
    reset_config,
)

# Capability (re-export from runtime for convenience)
from unifyerr.core.runtime.capability import HostCapabilities, detect_capabilities, effective_capabilities

__all__ = [
    "CaptureConfig",
    "validate_config",
    "ConfigIssue",
    "DEFAULT_CONFIG_PATH",
    "ENV_BACKTRACE",
    "ENV_TRACK_CALLER",
    "load_config",
    "configure",
    "get_config",
    "reset_config",
    # Capability
    "HostCapabilities",
    "detect_capabilities",
    "effective_capabilities",
]
