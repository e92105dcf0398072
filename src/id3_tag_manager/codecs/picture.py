"""APIC (v2.3/v2.4) and PIC (v2.2) frames.

APIC body: encoding byte, terminated ASCII MIME type, picture type byte,
terminated description, image data.
PIC body: encoding byte, 3 character image format, picture type byte,
terminated description, image data.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from ..constants import (
    ENCODING_LATIN1,
    ENCODING_UTF16,
    FRONT_COVER,
    JPEG_MAGIC,
    MIME_JPEG,
    MIME_PNG,
    PIC_FORMATS,
)
from ..structures import AttachedPicture, PictureType
from .text import decode_string, encode_terminated, split_terminated


logger = logging.getLogger(__name__)


def _picture_type(value: Any) -> PictureType:
    if isinstance(value, PictureType):
        return value
    if isinstance(value, Mapping):
        value = value.get("id", FRONT_COVER)
    if isinstance(value, int):
        return PictureType.from_id(value)
    return PictureType.from_id(FRONT_COVER)


def coerce(value: Any) -> Optional[AttachedPicture]:
    if isinstance(value, AttachedPicture):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return AttachedPicture(bytes(value))
    if isinstance(value, Mapping) and value.get("image_data"):
        return AttachedPicture(
            image_data=bytes(value["image_data"]),
            mime=value.get("mime") or "",
            type=_picture_type(value.get("type")),
            description=value.get("description"),
        )
    return None


def sniff_mime(data: bytes) -> str:
    """JPEG is recognised by its magic bytes; everything else is labelled PNG."""
    return MIME_JPEG if data.startswith(JPEG_MAGIC) else MIME_PNG


def encode(value: AttachedPicture) -> Optional[bytes]:
    data = bytes(value.image_data or b"")
    if not data:
        return None

    type_id = value.type.id if value.type is not None else FRONT_COVER
    if not 0 <= type_id <= 0xFF:
        logger.debug("Picture type %r out of range, using front cover", type_id)
        type_id = FRONT_COVER

    encoding = ENCODING_UTF16 if value.description else ENCODING_LATIN1
    return b"".join([
        bytes([encoding]),
        sniff_mime(data).encode("latin-1") + b"\x00",
        bytes([type_id]),
        encode_terminated(value.description or "", encoding),
        data,
    ])


def decode(body: bytes, version: int) -> Optional[AttachedPicture]:
    if not body:
        return None

    encoding = body[0]
    if version == 2:
        image_format = body[1:4].decode("latin-1")
        mime = PIC_FORMATS.get(image_format.upper(), image_format)
        type_offset = 4
    else:
        mime_end = body.find(b"\x00", 1)
        if mime_end == -1:
            logger.debug("APIC frame without a terminated MIME type")
            return None
        mime = body[1:mime_end].decode("latin-1")
        type_offset = mime_end + 1

    if type_offset >= len(body):
        return None

    parts = split_terminated(body, type_offset + 1, encoding)
    if parts is None:
        logger.debug("Picture frame without a terminated description")
        return None

    description, image_data = parts
    return AttachedPicture(
        image_data=image_data,
        mime=mime,
        type=PictureType.from_id(body[type_offset]),
        description=decode_string(description, encoding) or None,
    )
