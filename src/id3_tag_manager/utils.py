from .errors import InvalidSizeError


def decode_synchsafe(data: bytes, strict: bool = True) -> int:
    """Convert a 4 byte synchsafe integer to its 28 bit value.

    Args:
        data: The four size bytes
        strict: Reject bytes with the eighth bit set

    Returns:
        The decoded size

    Raises:
        InvalidSizeError: If fewer than 4 bytes are given, or (strict only)
            a byte has its most significant bit set
    """
    if len(data) < 4:
        raise InvalidSizeError(f"Synchsafe integer needs 4 bytes, got {len(data)}")

    b0, b1, b2, b3 = data[:4]
    if strict and (b0 | b1 | b2 | b3) & 0x80:
        raise InvalidSizeError(
            f"Invalid synchsafe integer {bytes(data[:4]).hex()}: msb must be 0"
        )
    return (b0 << 21) + (b1 << 14) + (b2 << 7) + b3


def encode_synchsafe(size: int) -> bytes:
    """Convert a 28 bit value to a 4 byte synchsafe integer.

    Raises:
        InvalidSizeError: If size is negative or does not fit in 28 bits
    """
    if size < 0 or size >= (1 << 28):
        raise InvalidSizeError(f"Size {size} cannot be stored as a synchsafe integer")

    return bytes([
        (size >> 21) & 0x7F,
        (size >> 14) & 0x7F,
        (size >> 7) & 0x7F,
        size & 0x7F,
    ])


def decode_frame_size(data: bytes, version: int) -> int:
    """Read the size field of a frame header.

    v2.2 stores 3 plain big-endian bytes, v2.3 stores 4, and v2.4 stores
    a synchsafe integer.
    """
    if version == 4:
        return decode_synchsafe(data)
    width = 3 if version == 2 else 4
    return int.from_bytes(data[:width], "big")


def encode_frame_size(size: int) -> bytes:
    """Size field for a v2.3 frame header."""
    return size.to_bytes(4, "big")
