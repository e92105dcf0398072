"""PRIV frames: terminated owner identifier followed by opaque data."""

from collections.abc import Mapping
from typing import Any, Optional

from ..structures import PrivateFrame


def coerce(value: Any) -> Optional[PrivateFrame]:
    if isinstance(value, PrivateFrame):
        return value
    if isinstance(value, Mapping) and value.get("owner_identifier") and value.get("data"):
        return PrivateFrame(value["owner_identifier"], value["data"])
    return None


def encode(value: PrivateFrame) -> Optional[bytes]:
    if not value.owner_identifier or not value.data:
        return None

    data = value.data.encode("utf-8") if isinstance(value.data, str) else bytes(value.data)
    return value.owner_identifier.encode("latin-1", errors="replace") + b"\x00" + data


def decode(body: bytes, version: int) -> Optional[PrivateFrame]:
    owner_end = body.find(b"\x00")
    if owner_end == -1:
        return None
    return PrivateFrame(body[:owner_end].decode("latin-1"), body[owner_end + 1:])
