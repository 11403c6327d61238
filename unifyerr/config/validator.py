# unifyerr/config/validator.py
"""
Configuration Validator

Validates capture configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import List, Literal
from dataclasses import dataclass

from .capture import CaptureConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging and error messages.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "capture.max_frames"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(capture: CaptureConfig) -> List[ConfigIssue]:
    """
    Validate capture configuration.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    for name in ("backtrace", "track_caller"):
        if not isinstance(getattr(capture, name), bool):
            issues.append(ConfigIssue(
                level="error",
                path=f"capture.{name}",
                message=f"{name} must be a boolean, got {getattr(capture, name)!r}",
            ))

    max_frames = capture.max_frames
    if max_frames is not None:
        if isinstance(max_frames, bool) or not isinstance(max_frames, int):
            issues.append(ConfigIssue(
                level="error",
                path="capture.max_frames",
                message=f"max_frames must be an integer or null, got {max_frames!r}",
            ))
        elif max_frames <= 0:
            issues.append(ConfigIssue(
                level="error",
                path="capture.max_frames",
                message="max_frames must be positive",
                hint="Use null to keep every frame",
            ))
        elif capture.backtrace is False:
            # max_frames has no effect without backtraces
            issues.append(ConfigIssue(
                level="warn",
                path="capture.max_frames",
                message="max_frames has no effect when backtrace=false",
                hint="Set capture.backtrace=true or drop max_frames",
            ))

    return issues


__all__ = [
    "ConfigIssue",
    "validate_config",
]
