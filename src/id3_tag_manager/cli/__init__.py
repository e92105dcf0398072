"""Command-line interface for ID3 Tag Manager (id3tm).

This package provides the 'id3tm' command-line tool with these subcommands:
    read: Decode and display the ID3v2 tag of a file
    scan: List every ID3v2 block found in a file
    write: Replace or update the tag of a file
    remove: Strip the leading ID3v2 tag from a file
    config: Show and change persistent settings

Modules:
    commands/: Command implementations
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from ..config import Config
from .utils import setup_logging
from .commands import cmd_config, cmd_read, cmd_remove, cmd_scan, cmd_write

__all__ = [
    "main",
    "cmd_read",
    "cmd_scan",
    "cmd_write",
    "cmd_remove",
    "cmd_config",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        help="Set logging level (disabled by default)",
    )
    parent_parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to config file (default: ~/.id3tm/config.toml)",
    )

    parser = argparse.ArgumentParser(
        prog="id3tm",
        usage="id3tm <command> [options]",
        description="ID3 Tag Manager - Read, write and strip ID3v2 tags",
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # read
    # ──────────────────────────────
    read_parser = subparsers.add_parser(
        "read",
        help="Display the ID3v2 tag of a file",
        usage="id3tm read <file> [options]",
        description="Decode the first ID3v2 tag of a file and display its frames",
        formatter_class=RichHelpFormatter,
    )
    read_parser.add_argument("file", help="Audio file to read")
    read_parser.add_argument(
        "--raw",
        action="store_true",
        help="Also list frames by identifier",
    )
    read_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format",
    )
    read_parser.set_defaults(func=cmd_read)

    # ──────────────────────────────
    # scan
    # ──────────────────────────────
    scan_parser = subparsers.add_parser(
        "scan",
        help="List every ID3v2 block in a file",
        usage="id3tm scan <file> [options]",
        description="Find all ID3v2 headers in a file and report their declared extents",
        formatter_class=RichHelpFormatter,
    )
    scan_parser.add_argument("file", help="File to scan")
    scan_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format",
    )
    scan_parser.set_defaults(func=cmd_scan)

    # ──────────────────────────────
    # write
    # ──────────────────────────────
    write_parser = subparsers.add_parser(
        "write",
        help="Write tag fields to a file",
        usage="id3tm write <file> [options]",
        description=(
            "Write an ID3v2.3 tag to a file. The existing tag is replaced unless\n"
            "--update is given, in which case the new fields are merged into it."
        ),
        formatter_class=RichRawHelpFormatter,
    )
    write_parser.add_argument("file", help="Audio file to tag")
    write_parser.add_argument(
        "-s",
        "--set",
        action="append",
        metavar="FIELD=VALUE",
        help="Set a text field, by name or frame id (repeatable)",
    )
    write_parser.add_argument(
        "--txxx",
        action="append",
        metavar="DESCRIPTION=VALUE",
        help="Set a user defined text frame (repeatable)",
    )
    write_parser.add_argument(
        "--comment",
        default=None,
        help="Set the comment text",
    )
    write_parser.add_argument(
        "--image",
        default=None,
        metavar="PATH",
        help="Attach a JPEG or PNG file as front cover",
    )
    write_parser.add_argument(
        "-u",
        "--update",
        action="store_true",
        help="Merge into the existing tag instead of replacing it",
    )
    write_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format",
    )
    write_parser.set_defaults(func=cmd_write)

    # ──────────────────────────────
    # remove
    # ──────────────────────────────
    remove_parser = subparsers.add_parser(
        "remove",
        help="Strip the ID3v2 tag from a file",
        usage="id3tm remove <file> [options]",
        description="Remove the leading ID3v2 tag from a file, keeping the audio data",
        formatter_class=RichHelpFormatter,
    )
    remove_parser.add_argument("file", help="Audio file to strip")
    remove_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format",
    )
    remove_parser.set_defaults(func=cmd_remove)

    # ──────────────────────────────
    # config
    # ──────────────────────────────
    config_parser = subparsers.add_parser(
        "config",
        help="Show and change persistent settings",
        usage="id3tm config [options]",
        description="Display the settings file; any option given is saved to it",
        formatter_class=RichHelpFormatter,
    )
    config_parser.add_argument(
        "--set-log-level",
        default=None,
        metavar="LEVEL",
        help="Default logging level when --log-level is not given",
    )
    config_parser.add_argument(
        "--max-value-length",
        type=int,
        default=None,
        metavar="N",
        help="Truncate values longer than N characters in tables",
    )
    config_parser.add_argument(
        "--show-raw",
        dest="show_raw",
        action="store_const",
        const=True,
        default=None,
        help="Always list frames by identifier in read",
    )
    config_parser.add_argument(
        "--hide-raw",
        dest="show_raw",
        action="store_const",
        const=False,
        help="Only list canonical fields in read",
    )
    config_parser.add_argument(
        "--comment-language",
        default=None,
        metavar="CODE",
        help="ISO-639-2 language code for --comment",
    )
    config_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format",
    )
    config_parser.set_defaults(func=cmd_config)

    # Parse args
    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.settings = Config(args.config)

    # Logging setup, command line wins over the config file
    log_level = args.log_level or args.settings.get_log_level()
    try:
        setup_logging(log_level or "critical")
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=log_level == "debug")
        sys.exit(1)


if __name__ == "__main__":
    main()
