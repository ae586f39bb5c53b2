"""Common interface of field length prefixers and their shared checks."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

_DECIMAL = re.compile(r"[+-]?[0-9]+")

_TOO_LARGE = "field length: {data_len} is larger than maximum: {max_len}"
_TOO_MANY_DIGITS = "number of digits in length: {data_len} exceeds: {digits}"
_SHORT_DATA = "length mismatch: want to read {want} bytes, get only {have}"
_OVER_MAXIMUM = "data length {data_len} is larger than maximum {max_len}"
_NOT_FIXED = "field length: {data_len} should be fixed: {fixed}"


class PrefixError(ValueError):
    """Raised when a field length cannot be encoded or decoded."""


class Prefixer(ABC):
    """Encodes and decodes the length that precedes a field's data."""

    @abstractmethod
    def encode_length(self, max_len: int, data_len: int) -> bytes:
        """Return *data_len* encoded as a length prefix."""

    @abstractmethod
    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        """Return the field size and the number of bytes the prefix took."""

    @abstractmethod
    def inspect(self) -> str:
        """Return a name such as ``ASCII.LL`` or ``Hex.Fixed``."""


@dataclass(frozen=True)
class Prefixers:
    """A family of prefixers: fixed length and one to four length digits."""

    fixed: Prefixer
    l: Prefixer | None = None  # noqa: E741
    ll: Prefixer | None = None
    lll: Prefixer | None = None
    llll: Prefixer | None = None

    @classmethod
    def family(
        cls, fixed: Prefixer, variable: Callable[[int], Prefixer]
    ) -> Prefixers:
        """Build a family whose variable members use one to four digits."""
        return cls(fixed, *(variable(digits) for digits in range(1, 5)))


def _atoi(text: str) -> int:
    """Parse a signed decimal integer, rejecting anything but ASCII digits."""
    if not _DECIMAL.fullmatch(text):
        raise PrefixError(f'parsing "{text}": invalid syntax')
    return int(text)


def _check_not_above(max_len: int, data_len: int, template: str = _TOO_LARGE) -> None:
    """Refuse to encode a length above the field's maximum."""
    if data_len > max_len:
        raise PrefixError(template.format(data_len=data_len, max_len=max_len))


def _check_fits(
    fits: bool, data_len: int, digits: int, template: str = _TOO_MANY_DIGITS
) -> None:
    """Refuse to encode a length the prefix has no room for."""
    if not fits:
        raise PrefixError(template.format(data_len=data_len, digits=digits))


def _take_prefix(data: bytes, width: int, template: str = _SHORT_DATA) -> bytes:
    """Return the first *width* bytes of *data*, which must be there."""
    if len(data) < width:
        raise PrefixError(template.format(want=width, have=len(data)))
    return bytes(data[:width])


def _check_maximum(
    data_len: int, max_len: int, template: str = _OVER_MAXIMUM
) -> None:
    """Refuse a decoded length above the field's maximum."""
    if data_len > max_len:
        raise PrefixError(template.format(data_len=data_len, max_len=max_len))


def _check_fixed(
    data_len: int, fixed: int, *, exact: bool = True, template: str = _NOT_FIXED
) -> bytes:
    """Check a fixed-length field's data length; nothing is written."""
    if data_len > fixed or (exact and data_len != fixed):
        raise PrefixError(template.format(data_len=data_len, fixed=fixed))
    return b""