"""Packed binary-coded decimal encoding of digit strings."""

from __future__ import annotations

_DIGITS = frozenset("0123456789")


class BCDError(ValueError):
    """Raised when data cannot be encoded or decoded as BCD."""


def encoded_length(digits: int) -> int:
    """Return the number of bytes needed to hold *digits* BCD digits."""
    return (digits + 1) // 2


def encode(digits: str | bytes) -> bytes:
    """Pack decimal *digits* two to a byte, left-padding an odd count with 0."""
    text = digits.decode("latin-1") if isinstance(digits, (bytes, bytearray)) else digits
    if not _DIGITS.issuperset(text):
        raise BCDError(f"invalid BCD input: {text!r}")
    if len(text) % 2:
        text = "0" + text
    return bytes.fromhex(text)


def decode(data: bytes, length: int) -> tuple[bytes, int]:
    """Unpack *length* digits from *data*; return the digits and bytes read."""
    read = encoded_length(length)
    if len(data) < read:
        raise BCDError(
            f"not enough data to decode. expected len {read}, got {len(data)}"
        )
    text = bytes(data[:read]).hex()
    if not _DIGITS.issuperset(text):
        raise BCDError(f"invalid BCD data: {text.upper()}")
    if length % 2:
        text = text[1:]
    return text.encode("ascii"), read