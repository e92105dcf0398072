"""Write command - Replace or update the tag of a file."""

import argparse
import logging
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

from ...directory import FrameDirectory
from ...errors import ID3Error
from ...files import update_file, write_file
from ...structures import AttachedPicture, Comment, UserDefinedText
from ..schemas import WriteSuccessResponse
from ..utils import ExitCode, fail, json_output

logger = logging.getLogger(__name__)


def _split_assignment(item: str):
    key, sep, value = item.partition("=")
    if not sep or not key:
        raise ValueError(f"Expected KEY=VALUE, got: {item!r}")
    return key.strip(), value


def build_tags(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the fields given on the command line into a tag mapping."""
    tags: Dict[str, Any] = {}

    for item in args.set or []:
        key, value = _split_assignment(item)
        spec = FrameDirectory.lookup(key)
        if spec is None or not spec.is_text:
            raise ValueError(f"Unknown text field: {key}")
        tags[spec.name] = value

    if args.txxx:
        tags["user_defined_text"] = [
            UserDefinedText(description=key, value=value)
            for key, value in map(_split_assignment, args.txxx)
        ]

    if args.comment is not None:
        tags["comment"] = Comment(
            language=args.settings.get_comment_language(),
            text=args.comment,
        )

    if args.image is not None:
        image_path = Path(args.image)
        if not image_path.is_file():
            raise ValueError(f"Image not found: {image_path}")
        tags["image"] = AttachedPicture(image_data=image_path.read_bytes())

    return tags


def cmd_write(args: argparse.Namespace) -> None:
    """Write the given fields as an ID3v2.3 tag.

    Args:
        args: Parsed command-line arguments
    """
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)
    path = Path(args.file)

    if not path.is_file():
        fail(console, use_json, ExitCode.INVALID_INPUT, "invalid_input", f"File not found: {path}")

    try:
        tags = build_tags(args)
    except ValueError as e:
        fail(console, use_json, ExitCode.INVALID_INPUT, "invalid_input", str(e))

    if not tags:
        fail(console, use_json, ExitCode.INVALID_INPUT, "invalid_input", "Nothing to write")

    action = "update" if args.update else "write"
    logger.info("%s %d fields to %s", action.capitalize(), len(tags), path)

    try:
        if args.update:
            update_file(tags, path)
        else:
            write_file(tags, path)
    except ID3Error as e:
        fail(console, use_json, ExitCode.DATA_ERROR, "data_error", str(e))
    except OSError as e:
        fail(console, use_json, ExitCode.WRITE_FAILED, "write_failed", str(e))

    if use_json:
        json_output(WriteSuccessResponse(path=str(path), action=action, fields=list(tags)))
    else:
        console.print(f"[green]✓ Tag written to {path}[/green] ({len(tags)} fields)")
