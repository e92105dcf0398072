"""Exceptions raised by the ID3v2 codec.

Everything derives from ValueError so callers that only care about
"bad data" can keep catching the built-in type.
"""


class ID3Error(ValueError):
    """Base class for ID3v2 codec errors."""


class TagNotFoundError(ID3Error):
    """No ID3v2 tag header was found near the start of the buffer."""


class InvalidSizeError(ID3Error):
    """A synchsafe or frame size field is malformed."""


class UnsupportedVersionError(ID3Error):
    """The tag header declares a major version other than 2, 3 or 4."""
