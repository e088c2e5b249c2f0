"""UTF-8 encoding and validation helpers working on raw bytes."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = [
    "Utf8Error",
    "utf8_encode",
    "utf8_check_first",
    "utf8_check_full",
    "utf8_iterate",
    "utf8_check_string",
]

_MAX_CODEPOINT = 0x10FFFF


class Utf8Error(ValueError):
    """Raised when a byte sequence is not valid UTF-8."""

    def __init__(self, position: int) -> None:
        super().__init__(f"invalid UTF-8 sequence at byte {position}")
        self.position = position


def utf8_encode(codepoint: int) -> bytes:
    """Encode a code point as UTF-8 bytes.

    Surrogate code points are encoded like any other value below 0x10000.
    Raises ValueError for negative values and values above 0x10FFFF.
    """
    if codepoint < 0 or codepoint > _MAX_CODEPOINT:
        raise ValueError(f"code point out of range: {codepoint}")
    if codepoint < 0x80:
        return bytes((codepoint,))
    if codepoint < 0x800:
        return bytes((
            0xC0 + ((codepoint & 0x7C0) >> 6),
            0x80 + (codepoint & 0x03F),
        ))
    if codepoint < 0x10000:
        return bytes((
            0xE0 + ((codepoint & 0xF000) >> 12),
            0x80 + ((codepoint & 0x0FC0) >> 6),
            0x80 + (codepoint & 0x003F),
        ))
    return bytes((
        0xF0 + ((codepoint & 0x1C0000) >> 18),
        0x80 + ((codepoint & 0x03F000) >> 12),
        0x80 + ((codepoint & 0x000FC0) >> 6),
        0x80 + (codepoint & 0x00003F),
    ))


def utf8_check_first(byte: int) -> int:
    """Return the length of the sequence a lead byte starts, or 0 if invalid."""
    u = byte & 0xFF
    if u < 0x80:
        return 1
    if u <= 0xBF:
        # continuation byte
        return 0
    if u in (0xC0, 0xC1):
        # overlong encoding of an ASCII byte
        return 0
    if u <= 0xDF:
        return 2
    if u <= 0xEF:
        return 3
    if u <= 0xF4:
        return 4
    # restricted or invalid lead byte
    return 0


def utf8_check_full(buffer: bytes) -> int | None:
    """Decode one complete multi-byte sequence.

    The whole buffer must be the sequence (2 to 4 bytes). Returns the code
    point, or None if the sequence is invalid, overlong, a surrogate or
    outside the Unicode range.
    """
    size = len(buffer)
    if size == 2:
        value = buffer[0] & 0x1F
    elif size == 3:
        value = buffer[0] & 0x0F
    elif size == 4:
        value = buffer[0] & 0x07
    else:
        return None

    for u in buffer[1:]:
        if u < 0x80 or u > 0xBF:
            return None
        value = (value << 6) + (u & 0x3F)

    if value > _MAX_CODEPOINT:
        return None
    if 0xD800 <= value <= 0xDFFF:
        return None
    if (size == 2 and value < 0x80) or (size == 3 and value < 0x800) or (
        size == 4 and value < 0x10000
    ):
        return None
    return value


def utf8_iterate(buffer: bytes) -> Iterator[int]:
    """Yield the code points of a UTF-8 byte string.

    Raises Utf8Error at the first invalid or truncated sequence.
    """
    pos = 0
    size = len(buffer)
    while pos < size:
        count = utf8_check_first(buffer[pos])
        if count == 0:
            raise Utf8Error(pos)
        if count == 1:
            value = buffer[pos]
        else:
            if count > size - pos:
                raise Utf8Error(pos)
            decoded = utf8_check_full(buffer[pos:pos + count])
            if decoded is None:
                raise Utf8Error(pos)
            value = decoded
        yield value
        pos += count


def utf8_check_string(data: bytes) -> bool:
    """Return True if the bytes are valid UTF-8."""
    try:
        for _ in utf8_iterate(data):
            pass
    except Utf8Error:
        return False
    return True