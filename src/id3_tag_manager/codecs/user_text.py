"""TXXX frames: encoding byte, terminated description, unterminated value."""

from collections.abc import Mapping
from typing import Any, Optional

from ..constants import ENCODING_UTF16
from ..structures import UserDefinedText
from .text import decode_string, encode_string, encode_terminated, split_terminated


def coerce(value: Any) -> Optional[UserDefinedText]:
    if isinstance(value, UserDefinedText):
        return value
    if isinstance(value, Mapping) and value.get("description"):
        value_text = value.get("value")
        return UserDefinedText(value["description"], "" if value_text is None else str(value_text))
    return None


def encode(value: UserDefinedText) -> Optional[bytes]:
    if not value.description:
        return None

    return b"".join([
        bytes([ENCODING_UTF16]),
        encode_terminated(value.description, ENCODING_UTF16),
        encode_string(value.value, ENCODING_UTF16),
    ])


def decode(body: bytes, version: int) -> Optional[UserDefinedText]:
    if not body:
        return None

    encoding = body[0]
    parts = split_terminated(body, 1, encoding)
    if parts is None:
        return None

    description, value = parts
    return UserDefinedText(decode_string(description, encoding), decode_string(value, encoding))
