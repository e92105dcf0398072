"""Bidirectional mapping between canonical field names and frame identifiers."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class SpecialFrame(Enum):
    """Frames with their own binary layout (everything but plain text)."""

    COMMENT = "comment"
    IMAGE = "image"
    UNSYNCHRONISED_LYRICS = "unsynchronised_lyrics"
    USER_DEFINED_TEXT = "user_defined_text"
    POPULARIMETER = "popularimeter"
    PRIVATE = "private"
    CHAPTER = "chapter"


@dataclass(frozen=True)
class FrameSpec:
    name: str
    frame_id: str
    v22_id: Optional[str] = None
    special: Optional[SpecialFrame] = None
    multiple: bool = False
    compare_key: Optional[str] = None

    @property
    def is_text(self) -> bool:
        return self.special is None


class FrameDirectory:
    """
    Registry of known frames. A spec can be found by canonical name, by its
    v2.3/v2.4 identifier or by its v2.2 identifier; all three resolve to the
    same FrameSpec. The writer always uses ``FrameSpec.frame_id``.

    The tables are filled by mappings.setup_all_mappings().
    """

    by_name: Dict[str, FrameSpec] = {}
    by_id: Dict[str, FrameSpec] = {}

    @classmethod
    def register(cls, spec: FrameSpec) -> None:
        cls.by_name[spec.name] = spec
        cls.by_id[spec.frame_id] = spec
        if spec.v22_id:
            cls.by_id[spec.v22_id] = spec

    @classmethod
    def register_text_frame(cls, name: str, frame_id: str, v22_id: Optional[str] = None) -> None:
        cls.register(FrameSpec(name, frame_id, v22_id))

    @classmethod
    def register_special_frame(
        cls,
        name: str,
        special: SpecialFrame,
        frame_id: str,
        v22_id: Optional[str] = None,
        multiple: bool = False,
        compare_key: Optional[str] = None,
    ) -> None:
        cls.register(FrameSpec(name, frame_id, v22_id, special, multiple, compare_key))

    @classmethod
    def lookup(cls, key: str) -> Optional[FrameSpec]:
        """Resolve a canonical name or a literal frame identifier."""
        try:
            return cls.by_name[key]
        except KeyError:
            return cls.by_id.get(key)

    @classmethod
    def text_fields(cls) -> List[FrameSpec]:
        return [spec for spec in cls.by_name.values() if spec.is_text]

    @classmethod
    def special_fields(cls) -> List[FrameSpec]:
        return [spec for spec in cls.by_name.values() if not spec.is_text]


def is_text_frame_id(frame_id: str) -> bool:
    """Text information frames are T*** (T?? in v2.2) except user defined text."""
    return frame_id.startswith("T") and frame_id not in ("TXXX", "TXX")
