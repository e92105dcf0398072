"""String handling shared by every frame codec, and the T*** text frames.

The first byte of most frame bodies selects the encoding of every string
that follows it in the same frame:

    0x00  ISO-8859-1, strings end with 0x00
    0x01  UTF-16 with BOM, strings end with 0x00 0x00
    0x02  UTF-16BE without BOM, strings end with 0x00 0x00
    0x03  UTF-8 (ID3v2.4), strings end with 0x00

Unknown non-zero markers are treated as UTF-16.
"""

from typing import Any, Optional, Tuple

from ..constants import (
    DEFAULT_LANGUAGE,
    ENCODING_LATIN1,
    ENCODING_NAMES,
    ENCODING_UTF16,
    ENCODING_UTF8,
)


def is_double_byte(encoding: int) -> bool:
    return encoding not in (ENCODING_LATIN1, ENCODING_UTF8)


def encoding_name(encoding: int) -> str:
    return ENCODING_NAMES.get(encoding, "utf-16")


def terminator(encoding: int) -> bytes:
    return b"\x00\x00" if is_double_byte(encoding) else b"\x00"


def decode_string(data: bytes, encoding: int) -> str:
    """Decode a string field, dropping terminators and byte order marks."""
    if is_double_byte(encoding):
        data = data[:len(data) - len(data) % 2]
    text = bytes(data).decode(encoding_name(encoding), errors="replace")
    return text.replace("\x00", "").replace("\ufeff", "")


def encode_string(text: str, encoding: int) -> bytes:
    return (text or "").encode(encoding_name(encoding), errors="replace")


def encode_terminated(text: str, encoding: int) -> bytes:
    return encode_string(text, encoding) + terminator(encoding)


def find_terminator(data: bytes, start: int, encoding: int) -> int:
    """Offset of the terminator of the string starting at start, or -1.

    Double-byte strings are scanned in code units aligned to start, so a zero
    high or low byte inside a character is never mistaken for the end.
    """
    if not is_double_byte(encoding):
        return data.find(b"\x00", start)

    for position in range(start, len(data) - 1, 2):
        if data[position] == 0 and data[position + 1] == 0:
            return position
    return -1


def split_terminated(data: bytes, start: int, encoding: int) -> Optional[Tuple[bytes, bytes]]:
    """Split data[start:] into (terminated string, remainder)."""
    end = find_terminator(data, start, encoding)
    if end == -1:
        return None
    return data[start:end], data[end + len(terminator(encoding)):]


def encode_language(language: Optional[str]) -> bytes:
    """3 byte ISO-639-2 code; missing codes default to English."""
    language = (language or DEFAULT_LANGUAGE)[:3]
    return language.encode("latin-1", errors="replace").ljust(3, b"\x00")


def decode_text_frame(body: bytes) -> str:
    if not body:
        return ""
    return decode_string(body[1:], body[0])


def encode_text_frame(value: Any) -> Optional[bytes]:
    """Body of a text frame. Text is always written as UTF-16 with BOM.

    Empty or falsy values (None, "", 0) produce no frame.
    """
    if not value:
        return None
    return bytes([ENCODING_UTF16]) + encode_string(str(value), ENCODING_UTF16)
