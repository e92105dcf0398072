"""Config command - Show and change persistent settings."""

import argparse

from rich.console import Console
from rich.table import Table

from ..schemas import ConfigResponse
from ..utils import ExitCode, fail, json_output


def cmd_config(args: argparse.Namespace) -> None:
    """Apply the given settings, save them and display the result.

    Args:
        args: Parsed command-line arguments
    """
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)
    config = args.settings

    try:
        if args.set_log_level is not None:
            config.set_log_level(args.set_log_level)
        if args.max_value_length is not None:
            config.set_max_value_length(args.max_value_length)
        if args.show_raw is not None:
            config.set_show_raw(args.show_raw)
        if args.comment_language is not None:
            config.set_comment_language(args.comment_language)
    except ValueError as e:
        fail(console, use_json, ExitCode.INVALID_INPUT, "invalid_input", str(e))

    changed = config.is_dirty()
    if changed and not config.save():
        fail(
            console, use_json, ExitCode.WRITE_FAILED, "write_failed",
            f"Could not save config to {config.config_path}",
        )

    if use_json:
        json_output(ConfigResponse(path=str(config.config_path), saved=changed, settings=config.data))
        return

    table = Table(title=f"Settings ({config.config_path})")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for section, values in config.data.items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", repr(value))
    console.print(table)

    if changed:
        console.print(f"[green]✓ Saved to {config.config_path}[/green]")
