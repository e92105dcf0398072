"""Frames with a custom body layout."""

from ..directory import FrameDirectory, SpecialFrame


def setup_special_mappings():
    """Register comment, picture, lyrics, TXXX, POPM, PRIV and CHAP."""
    register = FrameDirectory.register_special_frame

    register("comment", SpecialFrame.COMMENT, "COMM", "COM")
    register("image", SpecialFrame.IMAGE, "APIC", "PIC")
    register("unsynchronised_lyrics", SpecialFrame.UNSYNCHRONISED_LYRICS, "USLT", "ULT")
    register(
        "user_defined_text",
        SpecialFrame.USER_DEFINED_TEXT,
        "TXXX",
        "TXX",
        multiple=True,
        compare_key="description",
    )
    register("popularimeter", SpecialFrame.POPULARIMETER, "POPM", "POP")
    # PRIV has no identity; an update replaces every private frame
    register("private", SpecialFrame.PRIVATE, "PRIV", multiple=True)
    register(
        "chapter",
        SpecialFrame.CHAPTER,
        "CHAP",
        multiple=True,
        compare_key="element_id",
    )
