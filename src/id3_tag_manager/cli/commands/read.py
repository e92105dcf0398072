"""Read command - Display the decoded tag of a file."""

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ...directory import FrameDirectory
from ...errors import ID3Error, TagNotFoundError
from ...files import read_file
from ..schemas import ReadSuccessResponse
from ..utils import ExitCode, fail, format_value, json_output, serialize_value

logger = logging.getLogger(__name__)


def cmd_read(args: argparse.Namespace) -> None:
    """Decode and display the ID3v2 tag of a file.

    Args:
        args: Parsed command-line arguments
    """
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)
    settings = args.settings
    path = Path(args.file)

    if not path.is_file():
        fail(console, use_json, ExitCode.INVALID_INPUT, "invalid_input", f"File not found: {path}")

    try:
        tag = read_file(path)
    except TagNotFoundError:
        fail(console, use_json, ExitCode.DATA_ERROR, "not_found", f"No ID3v2 tag in {path}")
    except ID3Error as e:
        fail(console, use_json, ExitCode.DATA_ERROR, "data_error", str(e))

    logger.info("Read %d fields and %d frames from %s", len(tag), len(tag.raw), path)

    if use_json:
        json_output(
            ReadSuccessResponse(
                path=str(path),
                fields=serialize_value(dict(tag)),
                raw=serialize_value(tag.raw),
            )
        )
        return

    max_length = settings.get_max_value_length()

    table = Table(title=f"ID3 tag: {path.name}")
    table.add_column("Field", style="cyan")
    table.add_column("Frame", style="magenta")
    table.add_column("Value")
    for name, value in tag.items():
        spec = FrameDirectory.lookup(name)
        table.add_row(name, spec.frame_id if spec else "", format_value(value, max_length))
    console.print(table)

    if args.raw or settings.get_show_raw():
        raw_table = Table(title="Frames")
        raw_table.add_column("ID", style="magenta")
        raw_table.add_column("Value")
        for frame_id, value in tag.raw.items():
            raw_table.add_row(frame_id, format_value(value, max_length))
        console.print(raw_table)
