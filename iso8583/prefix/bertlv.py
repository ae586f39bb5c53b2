"""Lengths of BER-TLV values in short or long form."""

from __future__ import annotations

from dataclasses import dataclass

from iso8583.prefix.base import PrefixError, Prefixer

_MSB = 0x80


@dataclass(frozen=True)
class BerTLVPrefixer(Prefixer):
    """BER-TLV length: one byte up to 127, else a count byte and big-endian bytes.

    The maximum length argument is ignored, as lengths are sized dynamically.
    """

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        magnitude = abs(data_len)
        buf = magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big")
        if data_len <= 127:
            return buf
        return bytes([(len(buf) | _MSB) & 0xFF]) + buf

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        if not data:
            raise PrefixError("failed to decode TLV length: EOF")
        first = data[0]
        if not first & _MSB:
            return first, 1
        count = first & ~_MSB & 0xFF
        length = bytes(data[1 : 1 + count])
        if len(length) < count:
            reason = "EOF" if not length else "unexpected EOF"
            raise PrefixError(f"failed to read long form TLV length: {reason}")
        return int.from_bytes(length, "big"), 1 + count

    def inspect(self) -> str:
        return "BerTLV"


BER_TLV = BerTLVPrefixer()