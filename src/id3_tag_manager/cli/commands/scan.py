"""Scan command - List every ID3v2 block in a file."""

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ...files import scan_file
from ..schemas import ScanSuccessResponse, TagSpan
from ..utils import ExitCode, fail, json_output


def cmd_scan(args: argparse.Namespace) -> None:
    """Report the start and declared end of every tag header in a file."""
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)
    path = Path(args.file)

    if not path.is_file():
        fail(console, use_json, ExitCode.INVALID_INPUT, "invalid_input", f"File not found: {path}")

    spans = [TagSpan(start=start, end=end, length=end - start) for start, end in scan_file(path)]

    if use_json:
        json_output(ScanSuccessResponse(path=str(path), count=len(spans), tags=spans))
        return

    if not spans:
        console.print(f"[yellow]No ID3v2 tags found in {path}[/yellow]")
        return

    table = Table(title=f"ID3v2 blocks: {path.name}")
    table.add_column("#", justify="right")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Length", justify="right")
    for index, span in enumerate(spans, 1):
        table.add_row(str(index), str(span.start), str(span.end), str(span.length))
    console.print(table)
