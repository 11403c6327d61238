# unifyerr/core/errors/report.py
"""
ErrorReportV1: serializable snapshot of a unified error (versioned schema).

Design principles:
- Serializable (JSON-compatible)
- Append-only fields (no breaking changes)
- Carries only what the general error interface exposes
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class FrameV1(BaseModel):
    """One backtrace frame"""
    model_config = ConfigDict(extra="forbid", frozen=True)

    file: str = Field(description="Source file path")
    line: Optional[int] = Field(default=None, description="Line number")
    function: str = Field(default="", description="Function name")
    code: Optional[str] = Field(default=None, description="Source line, when available")


class LocationV1(BaseModel):
    """Call site of the construction"""
    model_config = ConfigDict(extra="forbid", frozen=True)

    file: str
    line: int
    function: str = ""


class ErrorReportV1(BaseModel):
    """
    Snapshot of a unified error for logs and API payloads.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    version: Literal["v1"] = "v1"
    message: str = Field(description="Display text of the error")
    causes: List[str] = Field(
        default_factory=list,
        description="Display text of each cause, nearest first",
    )
    location: Optional[LocationV1] = Field(
        default=None,
        description="Where the error was constructed (absent when call-site tracking is off)",
    )
    backtrace: Optional[List[FrameV1]] = Field(
        default=None,
        description="Backtrace frames, oldest first (absent when none was captured)",
    )


__all__ = [
    "FrameV1",
    "LocationV1",
    "ErrorReportV1",
]
