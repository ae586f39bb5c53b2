"""Lengths written as ASCII decimal digits."""

from __future__ import annotations

from dataclasses import dataclass

from iso8583.prefix.base import (
    PrefixError,
    Prefixer,
    Prefixers,
    _atoi,
    _check_fits,
    _check_fixed,
    _check_maximum,
    _check_not_above,
    _take_prefix,
)


@dataclass(frozen=True)
class AsciiVarPrefixer(Prefixer):
    """Variable length written as a fixed number of ASCII digits."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        _check_not_above(max_len, data_len)
        _check_fits(len(str(data_len)) <= self.digits, data_len, self.digits)
        return f"{data_len:0{self.digits}d}".encode("ascii")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        raw = _take_prefix(
            data,
            self.digits,
            "not enough data length: {have} to read: {want} byte digits",
        )
        value = _atoi(raw.decode("latin-1"))
        if value < 0:
            raise PrefixError(f"invalid length: {value}")
        _check_maximum(
            value, max_len, "data length: {data_len} is larger than maximum {max_len}"
        )
        return value, self.digits

    def inspect(self) -> str:
        return f"ASCII.{'L' * self.digits}"


@dataclass(frozen=True)
class AsciiFixedPrefixer(Prefixer):
    """Fixed length: nothing is written, the length must match exactly."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        return _check_fixed(data_len, max_len)

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "ASCII.Fixed"


ASCII = Prefixers.family(AsciiFixedPrefixer(), AsciiVarPrefixer)