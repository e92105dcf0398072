"""COMM and USLT frames.

Body: encoding byte, 3 byte language, terminated short description,
unterminated text.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Type

from ..constants import DEFAULT_LANGUAGE, ENCODING_UTF16
from ..structures import Comment, UnsynchronisedLyrics
from .text import (
    decode_string,
    encode_language,
    encode_string,
    encode_terminated,
    split_terminated,
)


logger = logging.getLogger(__name__)


def _coerce(value: Any, cls: Type[Comment]) -> Optional[Comment]:
    if isinstance(value, cls):
        return value
    if isinstance(value, Comment):
        return cls(value.language, value.short_text, value.text)
    if isinstance(value, str):
        return cls(text=value)
    if isinstance(value, Mapping):
        return cls(
            language=value.get("language") or DEFAULT_LANGUAGE,
            short_text=value.get("short_text") or "",
            text=value.get("text") or "",
        )
    return None


def _decode(body: bytes, cls: Type[Comment]) -> Optional[Comment]:
    if len(body) < 4:
        return None

    encoding = body[0]
    parts = split_terminated(body, 4, encoding)
    if parts is None:
        logger.debug("%s frame without a terminated description", cls.__name__)
        return None

    short_text, text = parts
    return cls(
        language=body[1:4].decode("latin-1").replace("\x00", ""),
        short_text=decode_string(short_text, encoding),
        text=decode_string(text, encoding),
    )


def coerce_comment(value: Any) -> Optional[Comment]:
    return _coerce(value, Comment)


def coerce_lyrics(value: Any) -> Optional[Comment]:
    return _coerce(value, UnsynchronisedLyrics)


def decode_comment(body: bytes, version: int) -> Optional[Comment]:
    return _decode(body, Comment)


def decode_lyrics(body: bytes, version: int) -> Optional[Comment]:
    return _decode(body, UnsynchronisedLyrics)


def encode(value: Comment) -> Optional[bytes]:
    """Shared by COMM and USLT; frames without text are not written."""
    if not value.text:
        return None

    return b"".join([
        bytes([ENCODING_UTF16]),
        encode_language(value.language),
        encode_terminated(value.short_text, ENCODING_UTF16),
        encode_string(value.text, ENCODING_UTF16),
    ])
