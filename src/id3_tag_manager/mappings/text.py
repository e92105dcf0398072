"""Text information frames (http://id3.org/id3v2.3.0 section 4.2)."""

from ..directory import FrameDirectory

# canonical name: (v2.3/v2.4 id, v2.2 id)
TEXT_FRAMES = {
    "album": ("TALB", "TAL"),
    "bpm": ("TBPM", "TBP"),
    "composer": ("TCOM", "TCM"),
    "genre": ("TCON", "TCO"),
    "copyright": ("TCOP", "TCR"),
    "date": ("TDAT", "TDA"),
    "playlist_delay": ("TDLY", "TDY"),
    "encoded_by": ("TENC", "TEN"),
    "text_writer": ("TEXT", "TXT"),
    "file_type": ("TFLT", "TFT"),
    "time": ("TIME", "TIM"),
    "content_group": ("TIT1", "TT1"),
    "title": ("TIT2", "TT2"),
    "subtitle": ("TIT3", "TT3"),
    "initial_key": ("TKEY", "TKE"),
    "language": ("TLAN", "TLA"),
    "length": ("TLEN", "TLE"),
    "media_type": ("TMED", "TMT"),
    "original_title": ("TOAL", "TOT"),
    "original_filename": ("TOFN", "TOF"),
    "original_textwriter": ("TOLY", "TOL"),
    "original_artist": ("TOPE", "TOA"),
    "original_year": ("TORY", "TOR"),
    "file_owner": ("TOWN", None),
    "artist": ("TPE1", "TP1"),
    "performer_info": ("TPE2", "TP2"),
    "conductor": ("TPE3", "TP3"),
    "remix_artist": ("TPE4", "TP4"),
    "part_of_set": ("TPOS", "TPA"),
    "publisher": ("TPUB", "TPB"),
    "track_number": ("TRCK", "TRK"),
    "recording_dates": ("TRDA", "TRD"),
    "internet_radio_name": ("TRSN", None),
    "internet_radio_owner": ("TRSO", None),
    "size": ("TSIZ", "TSI"),
    "isrc": ("TSRC", "TRC"),
    "encoding_technology": ("TSSE", "TSS"),
    "year": ("TYER", "TYE"),
}


def setup_text_mappings():
    """Register the plain text frames."""
    for name, (frame_id, v22_id) in TEXT_FRAMES.items():
        FrameDirectory.register_text_frame(name, frame_id, v22_id)
