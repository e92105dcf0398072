"""File helpers around the in-memory codec.

Each helper reads the whole file, transforms the bytes and writes them back
in one go. The codec work happens before the file is opened for writing,
so a codec error leaves the file untouched.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import List, Tuple, Union

from .decoder import read
from .locator import iter_tag_spans
from .mutator import remove, update, write
from .tag import Tag


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_bytes(path: PathLike) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Audio file not found: {path}") from e
    except PermissionError as e:
        raise PermissionError(f"Permission denied reading audio file: {path}") from e


def _write_bytes(path: PathLike, data: bytes) -> None:
    try:
        with open(path, "wb") as f:
            f.write(data)
    except PermissionError as e:
        raise PermissionError(f"Permission denied writing audio file: {path}") from e


def read_file(path: PathLike) -> Tag:
    """Decode the ID3v2 tag of a file."""
    return read(_read_bytes(path))


def write_file(tags: Mapping, path: PathLike) -> None:
    """Replace the tag of a file."""
    _write_bytes(path, write(tags, _read_bytes(path)))
    logger.info("Wrote tag to %s", path)


def update_file(tags: Mapping, path: PathLike) -> None:
    """Merge tags into the existing tag of a file."""
    _write_bytes(path, update(tags, _read_bytes(path)))
    logger.info("Updated tag of %s", path)


def remove_tags_from_file(path: PathLike) -> bool:
    """Strip the tag from a file.

    Returns:
        True if a tag was removed, False if the file had none

    Raises:
        InvalidSizeError: If the tag size field is malformed
    """
    data = _read_bytes(path)
    stripped = remove(data)
    if len(stripped) == len(data):
        return False

    _write_bytes(path, stripped)
    logger.info("Removed tag from %s", path)
    return True


def scan_file(path: PathLike) -> List[Tuple[int, int]]:
    """(start, end) of every ID3v2 block found anywhere in a file."""
    return list(iter_tag_spans(_read_bytes(path)))
