"""Update path: merging into an existing tag, stripping and rewriting."""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from .assembler import create, normalize_tags
from .decoder import read
from .directory import FrameDirectory
from .errors import InvalidSizeError, TagNotFoundError
from .locator import locate, parse_header


logger = logging.getLogger(__name__)


def _upsert(current: List[Any], incoming: List[Any], key: str) -> List[Any]:
    """Replace entries whose key matches in place, append the rest."""
    merged = list(current)
    positions = {getattr(entry, key): position for position, entry in enumerate(merged)}

    for entry in incoming:
        identity = getattr(entry, key)
        position = positions.get(identity)
        if position is None:
            positions[identity] = len(merged)
            merged.append(entry)
        else:
            merged[position] = entry
    return merged


def merge(existing_raw: Mapping, incoming: Mapping) -> Dict[str, Any]:
    """Merge a partial tag into the raw frames of an existing tag.

    Repeatable frames with an identity key (TXXX by description, CHAP by
    element id) are upserted; every other incoming field replaces the
    existing value, including repeatable frames without a key (PRIV).
    Neither argument is modified.
    """
    merged = normalize_tags(existing_raw)

    for frame_id, value in normalize_tags(incoming).items():
        spec = FrameDirectory.lookup(frame_id)
        current = merged.get(frame_id)
        if spec is not None and spec.multiple and spec.compare_key and current:
            merged[frame_id] = _upsert(current, value, spec.compare_key)
        else:
            merged[frame_id] = value

    return merged


def remove(buffer: bytes) -> bytes:
    """Strip the ID3v2 tag at the start of buffer.

    Anything in front of the tag goes with it. A buffer without a tag is
    returned unchanged.

    Raises:
        InvalidSizeError: If the tag size field is malformed
    """
    offset = locate(buffer)
    if offset == -1:
        return buffer

    header = parse_header(buffer, offset, check_version=False)
    return bytes(buffer[offset + header.total_size:])


def strip_tag(buffer: bytes) -> Optional[bytes]:
    """Return buffer without its leading tag.

    A buffer without a tag comes back unchanged. None means there is a tag
    but its size field is malformed, so the buffer cannot be modified.
    """
    try:
        return remove(buffer)
    except InvalidSizeError as e:
        logger.warning("Existing tag cannot be removed: %s", e)
        return None


def write(tags: Mapping, buffer: bytes) -> bytes:
    """Replace any existing tag in buffer with a new tag built from tags.

    When the existing tag cannot be stripped the original bytes are kept
    behind the new tag.
    """
    tag = create(tags)
    audio = strip_tag(buffer)
    if audio is None:
        audio = buffer
    return tag + bytes(audio)


def update(tags: Mapping, buffer: bytes) -> bytes:
    """Read the existing tag, merge tags into it and write the result."""
    try:
        existing = read(buffer).raw
    except TagNotFoundError:
        logger.debug("No existing tag, writing a new one")
        existing = {}
    return write(merge(existing, tags), buffer)
