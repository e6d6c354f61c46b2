"""UTF-8 codepoint decoding over byte buffers."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


class InvalidEncoding(ValueError):
    """Raised when no valid UTF-8 codepoint starts at the given offset."""

    def __init__(self, offset: int, reason: str) -> None:
        super().__init__(f"invalid UTF-8 at byte {offset}: {reason}")
        self.offset = offset
        self.reason = reason


def _sequence_length(lead: int) -> int:
    """Return the encoded length announced by *lead*, or 0 if it cannot start a sequence."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def decode_codepoint(buffer: Buffer, offset: int) -> tuple[int, int]:
    """Decode the codepoint starting at *offset* in *buffer*.

    Returns ``(codepoint, next_offset)``.  Raises :class:`InvalidEncoding`
    when *offset* is outside ``[0, len(buffer))`` or when the bytes there are
    not a well-formed UTF-8 sequence (bad lead byte, truncated sequence,
    overlong form, surrogate).
    """
    if offset < 0 or offset >= len(buffer):
        raise InvalidEncoding(offset, "offset out of range")

    length = _sequence_length(buffer[offset])
    if length == 0:
        raise InvalidEncoding(offset, "not a lead byte")

    end = offset + length
    if end > len(buffer):
        raise InvalidEncoding(offset, "truncated sequence")

    try:
        char = bytes(buffer[offset:end]).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncoding(offset, exc.reason) from exc

    return ord(char), end


def is_control(codepoint: int) -> bool:
    """Return ``True`` for C0/C1 control codes and DEL."""
    return codepoint < 0x20 or 0x7F <= codepoint <= 0x9F
