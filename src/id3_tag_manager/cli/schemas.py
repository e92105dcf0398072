"""Pydantic schemas for JSON output.

Every --json output of the CLI is one of these models, so the structure of
the output is validated and documented in one place.
"""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response for all commands."""

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "not_found", "data_error", "write_failed"],
    )
    message: str = Field(description="Human-readable error description")


class ReadSuccessResponse(BaseModel):
    """Decoded tag of a file."""

    status: Literal["success"] = "success"
    path: str
    fields: Dict[str, Any] = Field(description="Values by canonical field name")
    raw: Dict[str, Any] = Field(description="Values by frame identifier")


class TagSpan(BaseModel):
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    length: int = Field(ge=10, description="Header plus declared body size")


class ScanSuccessResponse(BaseModel):
    """Every ID3v2 block found in a file."""

    status: Literal["success"] = "success"
    path: str
    count: int = Field(ge=0)
    tags: List[TagSpan]


class WriteSuccessResponse(BaseModel):
    status: Literal["success"] = "success"
    path: str
    action: Literal["write", "update"]
    fields: List[str] = Field(description="Fields given on the command line")


class RemoveSuccessResponse(BaseModel):
    status: Literal["success"] = "success"
    path: str
    removed: bool = Field(description="False if the file had no tag")


class ConfigResponse(BaseModel):
    status: Literal["success"] = "success"
    path: str = Field(description="Config file location")
    saved: bool = Field(description="True if settings were changed and written")
    settings: Dict[str, Any]
