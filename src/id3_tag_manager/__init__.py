"""ID3 Tag Manager.

Reads, writes and updates ID3v2.2, 2.3 and 2.4 tags held in byte buffers
or audio files. Tags are always written as ID3v2.3.0.

Main modules:
    decoder: Read path (buffer -> Tag)
    assembler: Write path (Tag -> tag bytes)
    mutator: Merge, strip, write and update
    files: The same operations on file paths
    cli: Command-line interface (id3tm command)

Core modules:
    codecs: Encoders and decoders for the special frames
    directory: Canonical field names and frame identifiers
    locator: Finding tags in a buffer
    splitter: Splitting a tag body into frames
    utils: Synchsafe integers
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("id3-tag-manager")
except (PackageNotFoundError, ImportError):
    # Package not installed, read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, ValueError):
        __version__ = "unknown"

from .mappings import setup_all_mappings

# Initialize the frame directory
setup_all_mappings()

from .assembler import create
from .decoder import read
from .directory import FrameDirectory, SpecialFrame
from .errors import ID3Error, InvalidSizeError, TagNotFoundError, UnsupportedVersionError
from .files import read_file, remove_tags_from_file, scan_file, update_file, write_file
from .locator import locate, locate_all
from .mutator import merge, remove, strip_tag, update, write
from .structures import (
    AttachedPicture,
    Chapter,
    Comment,
    PictureType,
    Popularimeter,
    PrivateFrame,
    UnsynchronisedLyrics,
    UserDefinedText,
)
from .tag import Tag

__all__ = [
    # Buffer operations
    "read",
    "create",
    "write",
    "update",
    "remove",
    "strip_tag",
    "merge",
    "locate",
    "locate_all",
    # File operations
    "read_file",
    "write_file",
    "update_file",
    "remove_tags_from_file",
    "scan_file",
    # Types
    "Tag",
    "Comment",
    "UnsynchronisedLyrics",
    "UserDefinedText",
    "PictureType",
    "AttachedPicture",
    "Popularimeter",
    "PrivateFrame",
    "Chapter",
    "FrameDirectory",
    "SpecialFrame",
    # Errors
    "ID3Error",
    "TagNotFoundError",
    "InvalidSizeError",
    "UnsupportedVersionError",
]
