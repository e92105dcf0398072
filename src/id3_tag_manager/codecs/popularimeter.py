"""POPM frames: terminated e-mail, rating byte, 4 byte play counter."""

import struct
from collections.abc import Mapping
from typing import Any, Optional

from ..structures import Popularimeter


def _clamp(value: Any, upper: int) -> int:
    """Whole number in [0, upper]; anything else becomes 0."""
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return number if 0 <= number <= upper else 0


def coerce(value: Any) -> Optional[Popularimeter]:
    if isinstance(value, Popularimeter):
        return value
    if isinstance(value, Mapping) and value.get("email"):
        return Popularimeter(value["email"], value.get("rating", 0), value.get("counter", 0))
    return None


def encode(value: Popularimeter) -> Optional[bytes]:
    if not value.email:
        return None

    return b"".join([
        value.email.encode("latin-1", errors="replace") + b"\x00",
        struct.pack(">BI", _clamp(value.rating, 0xFF), _clamp(value.counter, 0xFFFFFFFF)),
    ])


def decode(body: bytes, version: int) -> Optional[Popularimeter]:
    email_end = body.find(b"\x00")
    if email_end == -1:
        return None

    popularimeter = Popularimeter(body[:email_end].decode("latin-1"))
    rating_offset = email_end + 1
    if rating_offset < len(body):
        popularimeter.rating = body[rating_offset]
        counter = body[rating_offset + 1:rating_offset + 5]
        if len(counter) == 4:
            popularimeter.counter = struct.unpack(">I", counter)[0]
    return popularimeter
