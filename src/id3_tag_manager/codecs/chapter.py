"""CHAP frames (ID3v2 Chapter Frame Addendum).

Body: terminated element id, start and end time in milliseconds, start and
end byte offsets (0xFFFFFFFF when unset), then ordinary frames describing
the chapter.
"""

import logging
import struct
from collections.abc import Mapping
from typing import Any, Optional

from ..constants import OFFSET_UNSET, WRITE_VERSION
from ..splitter import split_frames
from ..structures import Chapter
from ..tag import Tag


logger = logging.getLogger(__name__)

TIMING = struct.Struct(">IIII")


def coerce(value: Any) -> Optional[Chapter]:
    if isinstance(value, Chapter):
        return value
    if not isinstance(value, Mapping):
        return None

    required = ("element_id", "start_time_ms", "end_time_ms")
    if not value.get("element_id") or any(value.get(key) is None for key in required):
        logger.debug("Skipping chapter without %s", ", ".join(required))
        return None

    return Chapter(
        element_id=value["element_id"],
        start_time_ms=value["start_time_ms"],
        end_time_ms=value["end_time_ms"],
        start_offset_bytes=value.get("start_offset_bytes"),
        end_offset_bytes=value.get("end_offset_bytes"),
        tags=value.get("tags") or Tag(),
    )


def _u32(value: Any) -> Optional[int]:
    """Whole number that fits the 32 bit timing fields, or None."""
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if 0 <= number <= OFFSET_UNSET else None


def _offset(value: Any) -> int:
    """Out of range offsets are written as unset."""
    number = _u32(value)
    return OFFSET_UNSET if number is None else number


def encode(value: Chapter) -> Optional[bytes]:
    start, end = _u32(value.start_time_ms), _u32(value.end_time_ms)
    if not value.element_id or start is None or end is None:
        logger.debug("Skipping chapter %r with invalid times", value.element_id)
        return None

    from ..assembler import frames_from_tags

    return b"".join([
        value.element_id.encode("latin-1", errors="replace") + b"\x00",
        TIMING.pack(start, end, _offset(value.start_offset_bytes), _offset(value.end_offset_bytes)),
        *frames_from_tags(value.tags or {}),
    ])


def decode(body: bytes, version: int) -> Optional[Chapter]:
    id_end = body.find(b"\x00")
    if id_end == -1 or len(body) - id_end - 1 < TIMING.size:
        return None

    from ..decoder import tags_from_frames

    start, end, start_offset, end_offset = TIMING.unpack_from(body, id_end + 1)
    embedded = body[id_end + 1 + TIMING.size:]

    return Chapter(
        element_id=body[:id_end].decode("latin-1"),
        start_time_ms=start,
        end_time_ms=end,
        start_offset_bytes=None if start_offset == OFFSET_UNSET else start_offset,
        end_offset_bytes=None if end_offset == OFFSET_UNSET else end_offset,
        # Embedded frames always use the v2.3 frame header, whatever the tag version
        tags=tags_from_frames(split_frames(embedded, WRITE_VERSION), WRITE_VERSION) if embedded else Tag(),
    )
