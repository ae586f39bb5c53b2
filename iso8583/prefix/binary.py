"""Lengths written as big-endian unsigned binary integers."""

from __future__ import annotations

from dataclasses import dataclass

from iso8583.prefix.base import (
    PrefixError,
    Prefixer,
    Prefixers,
    _check_fits,
    _check_fixed,
    _check_maximum,
    _check_not_above,
    _take_prefix,
)


@dataclass(frozen=True)
class BinaryFixedPrefixer(Prefixer):
    """Fixed length: nothing is written, the length must match exactly."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        return _check_fixed(data_len, max_len)

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "Binary.Fixed"


@dataclass(frozen=True)
class BinaryVarPrefixer(Prefixer):
    """Variable length written in a fixed number of big-endian bytes."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        _check_not_above(max_len, data_len)
        if data_len < 0:
            raise PrefixError(f"encode length: negative number: {data_len}")
        needed = (data_len.bit_length() + 7) // 8
        _check_fits(needed <= self.digits, data_len, self.digits)
        return data_len.to_bytes(self.digits, "big")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        raw = _take_prefix(
            data, self.digits, "not enough data length: {have} to read: {want} bytes"
        )
        value = int.from_bytes(raw, "big")
        _check_maximum(
            value, max_len, "data length: {data_len} is larger than maximum {max_len}"
        )
        return value, self.digits

    def inspect(self) -> str:
        return f"Binary.{'L' * self.digits}"


BINARY = Prefixers.family(BinaryFixedPrefixer(), BinaryVarPrefixer)