"""Splitting a tag body into frames."""

import logging
from typing import Iterator, NamedTuple

from .constants import FRAME_HEADER_SIZE, FRAME_ID_SIZE
from .errors import InvalidSizeError
from .utils import decode_frame_size


logger = logging.getLogger(__name__)


class Frame(NamedTuple):
    id: str
    body: bytes


def split_frames(body: bytes, version: int) -> Iterator[Frame]:
    """Yield the frames of a tag body.

    Splitting stops at padding (a zero byte where a frame id should start),
    at the end of the body, or at the first frame whose declared size does
    not fit in the remaining bytes. Truncated tags are tolerated: whatever
    was parsed before the damage is returned.
    """
    header_size = FRAME_HEADER_SIZE[version]
    id_size = FRAME_ID_SIZE[version]
    position = 0

    while position < len(body) and body[position] != 0x00:
        header = body[position:position + header_size]
        if len(header) < header_size:
            logger.debug("Truncated frame header at offset %d", position)
            break

        try:
            size = decode_frame_size(header[id_size:id_size + 4], version)
        except InvalidSizeError as e:
            logger.warning("Stopping at frame with invalid size at offset %d: %s", position, e)
            break

        start = position + header_size
        if size > len(body) - start:
            logger.warning(
                "Frame at offset %d declares %d bytes but only %d remain",
                position, size, len(body) - start,
            )
            break

        yield Frame(header[:id_size].decode("latin-1"), bytes(body[start:start + size]))
        position = start + size
