"""Lengths written as EBCDIC decimal digits (code pages 037 and 1047)."""

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


class _CodePage:
    """A single-byte code page given by its decoding table."""

    __slots__ = ("_name", "_decode", "_encode")

    def __init__(self, name: str, table: str) -> None:
        self._name = name
        self._decode = table
        self._encode = {char: code for code, char in enumerate(table)}

    def encode(self, text: str) -> bytes:
        try:
            return bytes(self._encode[char] for char in text)
        except KeyError as exc:
            raise PrefixError(
                f"encoding {text!r} as {self._name}: no mapping"
            ) from exc

    def decode(self, raw: bytes) -> str:
        return "".join(self._decode[code] for code in raw)


def _cp1047_table(cp037: str) -> str:
    table = list(cp037)
    # Code page 1047 differs from 037 by these swapped positions.
    for a, b in ((0x15, 0x25), (0x5F, 0xB0), (0xAD, 0xBA), (0xBD, 0xBB)):
        table[a], table[b] = table[b], table[a]
    return "".join(table)


_CP037_TABLE = bytes(range(256)).decode("cp037")
_CP037 = _CodePage("EBCDIC", _CP037_TABLE)
_CP1047 = _CodePage("EBCDIC 1047", _cp1047_table(_CP037_TABLE))


@dataclass(frozen=True)
class EBCDICVarPrefixer(Prefixer):
    """Variable length written as EBCDIC (code page 037) decimal digits."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        _check_not_above(max_len, data_len)
        _check_fits(len(str(data_len)) <= self.digits, data_len, self.digits)
        return _CP037.encode(f"{data_len:0{self.digits}d}")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        raw = _take_prefix(data, self.digits)
        value = _atoi(_CP037.decode(raw))
        _check_maximum(value, max_len)
        return value, self.digits

    def inspect(self) -> str:
        return f"EBCDIC.{'L' * self.digits}"


@dataclass(frozen=True)
class EBCDICFixedPrefixer(Prefixer):
    """Fixed length: nothing is written; the data may not exceed the length."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        return _check_fixed(data_len, max_len, exact=False)

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "EBCDIC.Fixed"


@dataclass(frozen=True)
class EBCDIC1047Prefixer(Prefixer):
    """Variable length written as EBCDIC (code page 1047) decimal digits."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        _check_not_above(
            max_len,
            data_len,
            "field length [{data_len}] is larger than maximum [{max_len}]",
        )
        _check_fits(
            len(str(data_len)) <= self.digits,
            data_len,
            self.digits,
            "number of digits in data [{data_len}] exceeds its maximum "
            "indicator [{digits}]",
        )
        return _CP1047.encode(f"{data_len:0{self.digits}d}")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        raw = _take_prefix(
            data,
            self.digits,
            "not enough data length [{have}] to read [{want}] byte digits",
        )
        text = _CP1047.decode(raw)
        try:
            value = _atoi(text)
        except PrefixError as exc:
            raise PrefixError(
                f"length [{text}] is not a valid integer length field"
            ) from exc
        _check_maximum(
            value, max_len, "data length [{data_len}] is larger than maximum [{max_len}]"
        )
        return value, self.digits

    def inspect(self) -> str:
        return f"EBCDIC.{'L' * self.digits}"


@dataclass(frozen=True)
class EBCDIC1047FixedPrefixer(Prefixer):
    """Fixed length: nothing is written, the length must match exactly."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        return _check_fixed(
            data_len,
            max_len,
            template="field length [{data_len}] should be fixed [{fixed}]",
        )

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "EBCDIC.Fixed"


EBCDIC = Prefixers.family(EBCDICFixedPrefixer(), EBCDICVarPrefixer)
EBCDIC1047 = Prefixers.family(EBCDIC1047FixedPrefixer(), EBCDIC1047Prefixer)