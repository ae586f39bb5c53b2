"""Lengths written as packed binary-coded decimal digits."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from iso8583 import bcd as _bcd
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


@contextmanager
def _as_prefix_error() -> Iterator[None]:
    try:
        yield
    except _bcd.BCDError as exc:
        raise PrefixError(str(exc)) from exc


@dataclass(frozen=True)
class BCDVarPrefixer(Prefixer):
    """Variable length written as BCD, two digits to a byte."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        _check_not_above(max_len, data_len)
        _check_fits(len(str(data_len)) <= self.digits, data_len, self.digits)
        with _as_prefix_error():
            return _bcd.encode(f"{data_len:0{self.digits}d}")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        width = _bcd.encoded_length(self.digits)
        raw = _take_prefix(data, width)
        with _as_prefix_error():
            digits, _ = _bcd.decode(raw, self.digits)
        value = _atoi(digits.decode("ascii"))
        _check_maximum(value, max_len)
        return value, width

    def inspect(self) -> str:
        return f"BCD.{'L' * self.digits}"


@dataclass(frozen=True)
class BCDFixedPrefixer(Prefixer):
    """Fixed length: nothing is written; the data may not exceed the length."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        return _check_fixed(data_len, max_len, exact=False)

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "BCD.Fixed"


BCD = Prefixers.family(BCDFixedPrefixer(), BCDVarPrefixer)