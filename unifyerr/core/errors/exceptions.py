# unifyerr/core/errors/exceptions.py
from __future__ import annotations

from typing import Any


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _safe_repr(x: Any) -> str:
    try:
        return repr(x)
    except Exception:
        return f"<{type(x).__name__} object (unreprable)>"


class UnresolvableInputError(TypeError):
    """
    Raised when a value matches none of the construction strategies.

    Raised before any error sink is called; no unified error is produced.
    """

    def __init__(self, value_type: type) -> None:
        self.value_type = value_type
        super().__init__(
            f"cannot build an error from a value of type {self.value_type.__qualname__}"
        )


class ConfigError(ValueError):
    """Unreadable or invalid capture configuration"""
