"""Read path: buffer -> locate -> split frames -> decode frames -> Tag."""

import logging
import struct
from typing import Iterable

from .codecs import FRAME_CODECS
from .codecs.text import decode_text_frame
from .directory import FrameDirectory, is_text_frame_id
from .errors import TagNotFoundError
from .locator import TagHeader, locate, parse_header
from .splitter import Frame, split_frames
from .tag import Tag
from .utils import decode_synchsafe


logger = logging.getLogger(__name__)


def read(buffer: bytes) -> Tag:
    """Decode the ID3v2 tag at the start of buffer.

    Raises:
        TagNotFoundError: If no tag header starts in the first 20 bytes
        InvalidSizeError: If the tag size field is malformed
        UnsupportedVersionError: If the tag is not ID3v2.2, 2.3 or 2.4
    """
    offset = locate(buffer)
    if offset == -1:
        raise TagNotFoundError("Could not find an ID3v2 tag in the first 20 bytes")

    header = parse_header(buffer, offset)
    logger.debug(
        "Found ID3v2.%d.%d tag at offset %d, %d bytes",
        header.version, header.revision, offset, header.size,
    )
    body = read_tag_body(buffer, header)
    return tags_from_frames(split_frames(body, header.version), header.version)


def read_tag_body(buffer: bytes, header: TagHeader) -> bytes:
    """Return the frame area of a tag, undoing tag-level unsynchronisation
    and skipping an extended header."""
    body = bytes(buffer[header.body_offset:header.offset + header.total_size])
    if len(body) < header.size:
        logger.warning("Tag declares %d bytes but the buffer holds %d", header.size, len(body))

    # v2.4 unsynchronises per frame; only whole-tag unsynchronisation is undone
    if header.unsynchronised and header.version < 4:
        body = body.replace(b"\xff\x00", b"\xff")

    if header.has_extended_header:
        if header.version == 2:
            logger.warning("Compressed ID3v2.2 tags are not supported")
            return b""
        if len(body) < 4:
            return b""
        if header.version == 3:
            # Size excludes the size field itself
            skip = 4 + struct.unpack(">I", body[:4])[0]
        else:
            skip = decode_synchsafe(body[:4], strict=False)
        body = body[skip:]

    return body


def _store_unknown(raw: dict, frame: Frame) -> None:
    if frame.id not in raw:
        raw[frame.id] = frame.body
    elif isinstance(raw[frame.id], list):
        raw[frame.id].append(frame.body)
    else:
        raw[frame.id] = [raw[frame.id], frame.body]


def tags_from_frames(frames: Iterable[Frame], version: int) -> Tag:
    """Decode frames into a Tag.

    Text frames (T***) always land in ``raw``; known frames are also filed
    under their canonical name. Frames without a codec are kept in ``raw``
    as their undecoded body. Frames whose body cannot be decoded are
    skipped.
    """
    tag = Tag()

    for frame in frames:
        spec = FrameDirectory.lookup(frame.id)

        if is_text_frame_id(frame.id):
            value = decode_text_frame(frame.body)
            tag.raw[frame.id] = value
            if spec is not None and spec.is_text:
                tag[spec.name] = value
            continue

        if spec is None or spec.is_text:
            _store_unknown(tag.raw, frame)
            continue

        decoded = FRAME_CODECS[spec.special].decode(frame.body, version)
        if decoded is None:
            logger.debug("Skipping malformed %s frame (%d bytes)", frame.id, len(frame.body))
            continue

        if spec.multiple:
            tag.raw.setdefault(frame.id, []).append(decoded)
            tag.setdefault(spec.name, []).append(decoded)
        else:
            tag.raw[frame.id] = decoded
            tag[spec.name] = decoded

    return tag
