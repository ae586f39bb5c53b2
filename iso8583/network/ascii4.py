"""Header of four ASCII decimal digits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from iso8583.network.header import Header, HeaderError
from iso8583.prefix.base import PrefixError, _atoi


def _parse_length(text: str, context: str) -> int:
    """Parse the decimal digits of a header into a length."""
    try:
        return _atoi(text)
    except PrefixError as exc:
        raise HeaderError(f"{context}: {exc}") from exc


@dataclass
class ASCII4BytesHeader(Header):
    """Message length as four zero-padded ASCII digits."""

    length: int = 0

    def write_to(self, stream: BinaryIO) -> int:
        encoded = f"{self.length:04d}".encode("ascii")
        stream.write(encoded)
        return len(encoded)

    def read_from(self, stream: BinaryIO) -> int:
        raw = self._read_exact(stream, 4)
        self.length = _parse_length(raw.decode("latin-1"), "converting header to int")
        return len(raw)