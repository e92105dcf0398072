"""Typed values of the special (non plain-text) frames."""

from dataclasses import dataclass, field
from typing import Optional, Union

from .constants import DEFAULT_LANGUAGE, FRONT_COVER, PICTURE_TYPES
from .tag import Tag


@dataclass
class Comment:
    language: str = DEFAULT_LANGUAGE
    short_text: str = ""
    text: str = ""


@dataclass
class UnsynchronisedLyrics(Comment):
    pass


@dataclass
class UserDefinedText:
    description: str
    value: str = ""


@dataclass(frozen=True)
class PictureType:
    id: int
    name: Optional[str]

    @classmethod
    def from_id(cls, type_id: int) -> "PictureType":
        """Look up the category name; ids outside the table have no name."""
        name = PICTURE_TYPES[type_id] if 0 <= type_id < len(PICTURE_TYPES) else None
        return cls(type_id, name)


@dataclass
class AttachedPicture:
    image_data: bytes
    mime: str = ""
    type: PictureType = field(default_factory=lambda: PictureType.from_id(FRONT_COVER))
    description: Optional[str] = None


@dataclass
class Popularimeter:
    email: str
    rating: int = 0
    counter: int = 0


@dataclass
class PrivateFrame:
    owner_identifier: str
    data: Union[bytes, str] = b""


@dataclass
class Chapter:
    """
    A CHAP frame. Byte offsets are None when unset; on the wire they are
    written as 0xFFFFFFFF. ``tags`` holds the frames embedded in the chapter.
    """

    element_id: str
    start_time_ms: int
    end_time_ms: int
    start_offset_bytes: Optional[int] = None
    end_offset_bytes: Optional[int] = None
    tags: Tag = field(default_factory=Tag)
