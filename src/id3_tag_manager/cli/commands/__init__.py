"""Command implementations for the id3tm CLI."""

from .config import cmd_config
from .read import cmd_read
from .remove import cmd_remove
from .scan import cmd_scan
from .write import cmd_write

__all__ = ["cmd_config", "cmd_read", "cmd_remove", "cmd_scan", "cmd_write"]
