"""Header of a two-byte big-endian binary length."""

from __future__ import annotations

import struct
from typing import BinaryIO

from iso8583.network.header import Header, _check_uint16

_UINT16 = struct.Struct(">H")


class _UInt16LengthHeader(Header):
    """A header whose length must fit an unsigned 16-bit integer."""

    __slots__ = ("_length",)

    def __init__(self, length: int = 0) -> None:
        self._length = 0
        self.length = length

    @property
    def length(self) -> int:
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        self._length = _check_uint16(value)

    def _state(self) -> dict[str, object]:
        return {"length": self._length}

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._state() == other._state()  # type: ignore[attr-defined]
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self), tuple(self._state().values())))

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in self._state().items())
        return f"{type(self).__name__}({fields})"


class Binary2BytesHeader(_UInt16LengthHeader):
    """Message length as an unsigned 16-bit big-endian integer."""

    __slots__ = ()

    def write_to(self, stream: BinaryIO) -> int:
        stream.write(_UINT16.pack(self._length))
        return _UINT16.size

    def read_from(self, stream: BinaryIO) -> int:
        raw = self._read_exact(stream, _UINT16.size, "reading uint16 from reader")
        (self._length,) = _UINT16.unpack(raw)
        return _UINT16.size