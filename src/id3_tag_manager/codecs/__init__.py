"""Encoders and decoders for the special frames.

FRAME_CODECS maps every SpecialFrame to its codec:

    coerce(value) -> structure or None   normalises caller input
    encode(structure) -> bytes or None   frame body, None skips the frame
    decode(body, version) -> structure or None
"""

from typing import Any, Callable, Dict, NamedTuple, Optional

from ..directory import SpecialFrame
from . import chapter, comment, picture, popularimeter, private, user_text


class FrameCodec(NamedTuple):
    coerce: Callable[[Any], Optional[Any]]
    encode: Callable[[Any], Optional[bytes]]
    decode: Callable[[bytes, int], Optional[Any]]


FRAME_CODECS: Dict[SpecialFrame, FrameCodec] = {
    SpecialFrame.COMMENT: FrameCodec(comment.coerce_comment, comment.encode, comment.decode_comment),
    SpecialFrame.IMAGE: FrameCodec(picture.coerce, picture.encode, picture.decode),
    SpecialFrame.UNSYNCHRONISED_LYRICS: FrameCodec(comment.coerce_lyrics, comment.encode, comment.decode_lyrics),
    SpecialFrame.USER_DEFINED_TEXT: FrameCodec(user_text.coerce, user_text.encode, user_text.decode),
    SpecialFrame.POPULARIMETER: FrameCodec(popularimeter.coerce, popularimeter.encode, popularimeter.decode),
    SpecialFrame.PRIVATE: FrameCodec(private.coerce, private.encode, private.decode),
    SpecialFrame.CHAPTER: FrameCodec(chapter.coerce, chapter.encode, chapter.decode),
}


__all__ = ["FrameCodec", "FRAME_CODECS"]
