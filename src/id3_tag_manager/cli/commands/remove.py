"""Remove command - Strip the ID3v2 tag from a file."""

import argparse
from pathlib import Path

from rich.console import Console

from ...errors import InvalidSizeError
from ...files import remove_tags_from_file
from ..schemas import RemoveSuccessResponse
from ..utils import ExitCode, fail, json_output


def cmd_remove(args: argparse.Namespace) -> None:
    """Remove the leading tag of a file in place.

    Args:
        args: Parsed command-line arguments
    """
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)
    path = Path(args.file)

    if not path.is_file():
        fail(console, use_json, ExitCode.INVALID_INPUT, "invalid_input", f"File not found: {path}")

    try:
        removed = remove_tags_from_file(path)
    except InvalidSizeError as e:
        fail(console, use_json, ExitCode.DATA_ERROR, "data_error", str(e))
    except OSError as e:
        fail(console, use_json, ExitCode.WRITE_FAILED, "write_failed", str(e))

    if use_json:
        json_output(RemoveSuccessResponse(path=str(path), removed=removed))
    elif removed:
        console.print(f"[green]✓ Removed ID3v2 tag from {path}[/green]")
    else:
        console.print(f"[yellow]No ID3v2 tag in {path}[/yellow]")
