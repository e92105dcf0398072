"""Finding ID3v2 tags inside a byte buffer."""

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

from .constants import (
    FLAG_EXTENDED_HEADER,
    FLAG_UNSYNCHRONISATION,
    MAX_MARKER_OFFSET,
    SUPPORTED_VERSIONS,
    TAG_HEADER_SIZE,
    TAG_MARKER,
)
from .errors import InvalidSizeError, UnsupportedVersionError
from .utils import decode_synchsafe


logger = logging.getLogger(__name__)


@dataclass
class TagHeader:
    version: int
    revision: int
    flags: int
    size: int
    offset: int = 0

    @property
    def total_size(self) -> int:
        """Header plus body, as declared by the size field."""
        return TAG_HEADER_SIZE + self.size

    @property
    def body_offset(self) -> int:
        return self.offset + TAG_HEADER_SIZE

    @property
    def unsynchronised(self) -> bool:
        return bool(self.flags & FLAG_UNSYNCHRONISATION)

    @property
    def has_extended_header(self) -> bool:
        return bool(self.flags & FLAG_EXTENDED_HEADER)


def locate(buffer: bytes) -> int:
    """Return the offset of the "ID3" marker, or -1.

    Only markers starting within the first MAX_MARKER_OFFSET bytes count;
    anything further in is assumed to be a coincidence in the audio data.
    """
    return buffer.find(TAG_MARKER, 0, MAX_MARKER_OFFSET + len(TAG_MARKER))


def parse_header(buffer: bytes, offset: int = 0, check_version: bool = True) -> TagHeader:
    """Parse the 10 byte tag header found at offset.

    Raises:
        InvalidSizeError: If the header is truncated or its size field is not
            a valid synchsafe integer
        UnsupportedVersionError: If check_version is set and the major version
            is not 2, 3 or 4
    """
    header = buffer[offset:offset + TAG_HEADER_SIZE]
    if len(header) < TAG_HEADER_SIZE:
        raise InvalidSizeError(
            f"Truncated ID3v2 header at offset {offset}: "
            f"expected {TAG_HEADER_SIZE} bytes, got {len(header)}"
        )

    version, revision, flags = header[3], header[4], header[5]
    if check_version and version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(
            f"Unsupported ID3v2 version 2.{version}.{revision}. "
            f"Supported versions: {', '.join(f'2.{v}' for v in SUPPORTED_VERSIONS)}"
        )

    return TagHeader(version, revision, flags, decode_synchsafe(header[6:10]), offset)


def iter_tag_spans(buffer: bytes) -> Iterator[Tuple[int, int]]:
    """Yield (start, end) of every sequential ID3v2 block in the buffer.

    Unlike locate() this searches the whole buffer, which is how files that
    were tagged several times by legacy taggers are inspected. ``end`` is
    the declared end of the tag and may lie past the end of a truncated
    buffer. Each search resumes at the previous tag's declared end.
    """
    start = buffer.find(TAG_MARKER)
    while start != -1:
        size_field = buffer[start + 6:start + TAG_HEADER_SIZE]
        if len(size_field) < 4:
            logger.debug("Truncated tag header at offset %d", start)
            yield start, len(buffer)
            return

        end = start + TAG_HEADER_SIZE + decode_synchsafe(size_field, strict=False)
        yield start, end
        start = buffer.find(TAG_MARKER, end)


def locate_all(buffer: bytes) -> Iterator[bytes]:
    """Yield the raw bytes of every sequential ID3v2 block in the buffer."""
    for start, end in iter_tag_spans(buffer):
        yield bytes(buffer[start:end])
