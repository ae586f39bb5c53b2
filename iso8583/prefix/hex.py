"""Lengths written as ASCII hexadecimal digits."""

from __future__ import annotations

import re
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

_HEX = re.compile(r"[+-]?[0-9A-Fa-f]+")


@dataclass(frozen=True)
class HexFixedPrefixer(Prefixer):
    """Fixed length of ASCII hex data: two characters per byte."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        return _check_fixed(data_len, max_len * 2)

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "Hex.Fixed"


@dataclass(frozen=True)
class HexVarPrefixer(Prefixer):
    """Variable length written as upper-case hex, two characters per byte."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        _check_not_above(max_len, data_len)
        _check_fits(
            data_len <= (1 << (self.digits * 8)) - 1, data_len, self.digits
        )
        return f"{data_len:X}".rjust(self.digits * 2, "0").encode("ascii")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        width = self.digits * 2
        text = _take_prefix(data, width).decode("latin-1")
        if not _HEX.fullmatch(text):
            raise PrefixError(f'parsing "{text}": invalid syntax')
        value = int(text, 16)
        half = 1 << (self.digits * 8 - 1)
        if not -half <= value < half:
            raise PrefixError(f'parsing "{text}": value out of range')
        _check_maximum(value, max_len)
        return value, width

    def inspect(self) -> str:
        return f"Hex.{'L' * self.digits}"


HEX = Prefixers.family(HexFixedPrefixer(), HexVarPrefixer)