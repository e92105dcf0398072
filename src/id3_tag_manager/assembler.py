"""Write path: Tag -> frame bytes -> complete ID3v2.3 tag."""

import logging
import re
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .codecs import FRAME_CODECS
from .codecs.text import encode_text_frame
from .constants import TAG_MARKER, WRITE_VERSION
from .directory import FrameDirectory, is_text_frame_id
from .tag import Tag
from .utils import encode_frame_size, encode_synchsafe


logger = logging.getLogger(__name__)

FRAME_ID_PATTERN = re.compile(r"^[A-Z0-9]{4}$")


def create_tag_header() -> bytearray:
    """ID3v2.3.0 header with no flags; bytes 6-9 are filled in by create()."""
    return bytearray(TAG_MARKER + bytes([WRITE_VERSION, 0x00, 0x00]) + bytes(4))


def build_frame(frame_id: str, body: bytes) -> bytes:
    """Prefix a frame body with a v2.3 frame header."""
    return frame_id.encode("latin-1") + encode_frame_size(len(body)) + b"\x00\x00" + body


def _normalize_item(key: str, value: Any) -> Optional[Tuple[str, Any]]:
    spec = FrameDirectory.lookup(key)

    if spec is None:
        if FRAME_ID_PATTERN.match(key):
            # Frame without a codec, carried over from a previous read
            return key, list(value) if isinstance(value, list) else value
        logger.debug("Ignoring unknown field %r", key)
        return None

    if spec.is_text:
        return spec.frame_id, value

    codec = FRAME_CODECS[spec.special]
    if spec.multiple:
        entries = value if isinstance(value, (list, tuple)) else [value]
        coerced = [codec.coerce(entry) for entry in entries]
        return spec.frame_id, [entry for entry in coerced if entry is not None]

    coerced = codec.coerce(value)
    if coerced is None:
        logger.debug("Ignoring %s value of type %s", spec.name, type(value).__name__)
        return None
    return spec.frame_id, coerced


def normalize_tags(tags: Mapping) -> Dict[str, Any]:
    """Key tags by the frame identifier the writer emits.

    Accepts canonical names, v2.3/v2.4 identifiers and v2.2 identifiers.
    Special frame values are converted to their structures and repeatable
    frames to lists. For a Tag, canonical fields take precedence over the
    ``raw`` entries of the same frame.
    """
    items = list(tags.raw.items()) if isinstance(tags, Tag) else []
    items.extend(tags.items())

    normalized: Dict[str, Any] = {}
    for key, value in items:
        item = _normalize_item(key, value)
        if item is not None:
            frame_id, value = item
            normalized[frame_id] = value
    return normalized


def _encode_item(frame_id: str, value: Any) -> Iterator[bytes]:
    spec = FrameDirectory.lookup(frame_id)

    if spec is None:
        if is_text_frame_id(frame_id) and isinstance(value, str):
            body = encode_text_frame(value)
            if body is not None:
                yield build_frame(frame_id, body)
            return
        for body in value if isinstance(value, list) else [value]:
            if isinstance(body, (bytes, bytearray)):
                yield build_frame(frame_id, bytes(body))
        return

    if spec.is_text:
        body = encode_text_frame(value)
        if body is not None:
            yield build_frame(frame_id, body)
        return

    encode = FRAME_CODECS[spec.special].encode
    # Repeatable frames are written in input order, one frame per entry
    for entry in value if spec.multiple else [value]:
        body = encode(entry)
        if body is None:
            logger.debug("Skipping %s frame with missing required fields", frame_id)
            continue
        yield build_frame(frame_id, body)


def frames_from_tags(tags: Mapping) -> List[bytes]:
    """Encode every present field as a complete frame (header + body)."""
    frames: List[bytes] = []
    for frame_id, value in normalize_tags(tags).items():
        frames.extend(_encode_item(frame_id, value))
    return frames


def create(tags: Mapping) -> bytes:
    """Build a complete ID3v2.3 tag for tags.

    Raises:
        InvalidSizeError: If the frames do not fit in a synchsafe size
    """
    header = create_tag_header()
    frames = frames_from_tags(tags)

    # The header itself is not counted
    header[6:10] = encode_synchsafe(sum(len(frame) for frame in frames))
    logger.debug("Assembled %d frames", len(frames))
    return bytes(header) + b"".join(frames)
