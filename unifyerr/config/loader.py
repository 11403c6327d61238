# unifyerr/config/loader.py
"""
Configuration Loader

Loads capture configuration from YAML with code defaults as fallback,
then applies environment overrides.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Environment = last word (UNIFYERR_BACKTRACE, UNIFYERR_TRACK_CALLER)
- The active configuration is resolved once per process
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional
import logging
import os
import threading

import yaml

from .capture import CaptureConfig
from .validator import validate_config
from unifyerr.core.errors.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".unifyerr" / "config.yml"

ENV_BACKTRACE = "UNIFYERR_BACKTRACE"
ENV_TRACK_CALLER = "UNIFYERR_TRACK_CALLER"

_TRUTHY = {"1", "true", "yes", "on", "full"}
_FALSY = {"0", "false", "no", "off", ""}

_active: Optional[CaptureConfig] = None
_active_lock = threading.Lock()
_loading = threading.local()


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """
    Load YAML file, return None if not found (not an error).

    An unreadable default file is logged and ignored; an unreadable
    explicit file raises ConfigError.
    """
    explicit = config_path is not None
    path = Path(config_path) if explicit else DEFAULT_CONFIG_PATH

    if not path.exists():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        if explicit:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return None

    if data is None:
        return None
    if not isinstance(data, dict):
        if explicit:
            raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        logger.warning("Ignoring config file %s: top level is not a mapping", path)
        return None
    return data


def _parse_flag(name: str, raw: str) -> Optional[bool]:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning("Ignoring %s=%r (expected one of 0/1/true/false/yes/no/on/off)", name, raw)
    return None


def _env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for name, key in ((ENV_BACKTRACE, "backtrace"), (ENV_TRACK_CALLER, "track_caller")):
        if name in env:
            flag = _parse_flag(name, env[name])
            if flag is not None:
                overrides[key] = flag
    return overrides


def load_config(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> CaptureConfig:
    """
    Load capture configuration.

    Args:
        config_path: Optional path to YAML file (default ~/.unifyerr/config.yml)
        env: Environment mapping (default os.environ)

    Returns:
        CaptureConfig instance (always has code defaults)

    Raises:
        ConfigError: explicit file unreadable or invalid

    Note:
        Problems in the default file are logged and code defaults are used,
        so construction never fails because of ~/.unifyerr/config.yml.
    """
    explicit = config_path is not None
    overrides = _env_overrides(os.environ if env is None else env)
    config = CaptureConfig.default()

    yaml_data = _load_yaml(config_path)
    if yaml_data and "capture" in yaml_data:
        section = yaml_data["capture"] or {}
        if isinstance(section, dict):
            config = config.merged(section)
        elif explicit:
            raise ConfigError("'capture' section must be a mapping")
        else:
            logger.warning("Ignoring %s: 'capture' section is not a mapping", DEFAULT_CONFIG_PATH)

    if overrides:
        config = config.merged(overrides)

    issues = validate_config(config)
    for issue in issues:
        if issue.level == "warn":
            logger.warning("%s", issue)
    errors = [issue for issue in issues if issue.level == "error"]
    if errors:
        message = "Invalid capture configuration:\n" + "\n".join(str(e) for e in errors)
        if explicit:
            raise ConfigError(message)
        logger.warning("%s\nIgnoring %s, using code defaults", message, DEFAULT_CONFIG_PATH)
        config = CaptureConfig.default().merged(overrides)

    logger.debug("Loaded capture config: %s", config.to_dict())
    return config


def configure(config: CaptureConfig) -> CaptureConfig:
    """
    Install the process-wide capture configuration.

    Call once at startup; construction reads whatever is active.
    """
    global _active
    errors = [issue for issue in validate_config(config) if issue.level == "error"]
    if errors:
        raise ConfigError("Invalid capture configuration:\n" + "\n".join(str(e) for e in errors))
    with _active_lock:
        _active = config
    return config


def get_config() -> CaptureConfig:
    """Return the active configuration, loading it on first use"""
    global _active
    config = _active
    if config is not None:
        return config
    # Load outside the lock: loading logs, and a handler may build errors itself.
    # Errors built from inside that load see code defaults.
    if getattr(_loading, "active", False):
        return CaptureConfig.default()
    _loading.active = True
    try:
        loaded = load_config()
    finally:
        _loading.active = False
    with _active_lock:
        if _active is None:
            _active = loaded
        return _active


def reset_config() -> None:
    """Forget the active configuration (next get_config() reloads)"""
    global _active
    with _active_lock:
        _active = None


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_BACKTRACE",
    "ENV_TRACK_CALLER",
    "load_config",
    "configure",
    "get_config",
    "reset_config",
]
