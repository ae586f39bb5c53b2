"""Header of two bytes of BCD."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from iso8583 import bcd as _bcd
from iso8583.network.ascii4 import _parse_length
from iso8583.network.header import Header, HeaderError


@dataclass
class BCD2BytesHeader(Header):
    """Message length as four BCD digits in two bytes."""

    length: int = 0

    def write_to(self, stream: BinaryIO) -> int:
        try:
            encoded = _bcd.encode(f"{self.length:04d}")
        except _bcd.BCDError as exc:
            raise HeaderError(str(exc)) from exc
        stream.write(encoded)
        return len(encoded)

    def read_from(self, stream: BinaryIO) -> int:
        raw = self._read_exact(stream, 2)
        try:
            digits, _ = _bcd.decode(raw, 4)
        except _bcd.BCDError as exc:
            raise HeaderError(str(exc)) from exc
        self.length = _parse_length(digits.decode("ascii"), "converting string to int")
        return len(raw)