"""A prefixer that writes nothing and takes all remaining data."""

from __future__ import annotations

from dataclasses import dataclass

from iso8583.prefix.base import Prefixer, Prefixers


@dataclass(frozen=True)
class NonePrefixer(Prefixer):
    """Writes no length; the field spans all data that is left."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return len(data), 0

    def inspect(self) -> str:
        return "None.Fixed"


NONE = Prefixers(fixed=NonePrefixer())