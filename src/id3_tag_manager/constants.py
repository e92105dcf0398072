# Tag header layout (identical for every ID3v2 revision)
TAG_MARKER = b"ID3"
TAG_HEADER_SIZE = 10
# An ID3v2 tag must start at or near the beginning of a buffer; a marker found
# beyond this offset is treated as coincidental audio data.
MAX_MARKER_OFFSET = 20

SUPPORTED_VERSIONS = [2, 3, 4]
# The writer always emits ID3v2.3.0
WRITE_VERSION = 3

# Tag header flags
FLAG_UNSYNCHRONISATION = 0x80
FLAG_EXTENDED_HEADER = 0x40

# Frame header widths: 3 byte id + 3 byte size for v2.2,
# 4 byte id + 4 byte size + 2 flag bytes for v2.3/v2.4
FRAME_HEADER_SIZE = {2: 6, 3: 10, 4: 10}
FRAME_ID_SIZE = {2: 3, 3: 4, 4: 4}

# Text encoding markers
ENCODING_LATIN1 = 0x00
ENCODING_UTF16 = 0x01
ENCODING_UTF16BE = 0x02
ENCODING_UTF8 = 0x03

ENCODING_NAMES = {
    ENCODING_LATIN1: "latin-1",
    ENCODING_UTF16: "utf-16",
    ENCODING_UTF16BE: "utf-16-be",
    ENCODING_UTF8: "utf-8",
}

# Chapter byte offsets use this value for "unset"
OFFSET_UNSET = 0xFFFFFFFF

DEFAULT_LANGUAGE = "eng"

# APIC picture types, indexed by the picture type byte
PICTURE_TYPES = [
    "other",
    "file icon",
    "other file icon",
    "front cover",
    "back cover",
    "leaflet page",
    "media",
    "lead artist",
    "artist",
    "conductor",
    "band",
    "composer",
    "lyricist",
    "recording location",
    "during recording",
    "during performance",
    "video screen capture",
    "a bright coloured fish",
    "illustration",
    "band logotype",
    "publisher logotype",
]

FRONT_COVER = 3

MIME_JPEG = "image/jpeg"
MIME_PNG = "image/png"
JPEG_MAGIC = b"\xff\xd8\xff"

# v2.2 PIC frames carry a 3 character image format instead of a MIME type
PIC_FORMATS = {
    "JPG": MIME_JPEG,
    "PNG": MIME_PNG,
}
