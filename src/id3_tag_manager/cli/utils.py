"""Utility functions for CLI operations."""

import logging
import sys
from dataclasses import fields, is_dataclass
from enum import IntEnum
from typing import Any, NoReturn

from pydantic import BaseModel
from rich.console import Console

from .schemas import ErrorResponse


class ExitCode(IntEnum):
    SUCCESS = 0
    INVALID_INPUT = 10
    DATA_ERROR = 20
    WRITE_FAILED = 30


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def json_output(response: BaseModel) -> None:
    """Print a response model as JSON, leaving out unset fields."""
    print(response.model_dump_json(exclude_none=True, indent=2))


def fail(console: Console, use_json: bool, code: ExitCode, error: str, message: str) -> NoReturn:
    """Report an error in the active output mode and exit."""
    if use_json:
        json_output(ErrorResponse(error=error, message=message))
    else:
        console.print(f"[red]Error: {message}[/red]")
    sys.exit(code)


def serialize_value(value: Any) -> Any:
    """Turn decoded frame values into JSON friendly data.

    Binary payloads are summarised by their length.
    """
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: serialize_value(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value


def format_value(value: Any, max_length: int) -> str:
    text = str(serialize_value(value))
    if len(text) > max_length:
        text = text[:max_length - 3] + "..."
    return text
