"""Visa message length header."""

from __future__ import annotations

from typing import BinaryIO

from iso8583 import bcd as _bcd
from iso8583.network.binary2 import _UINT16, _UInt16LengthHeader
from iso8583.network.header import HeaderError

MAX_MESSAGE_LENGTH = 2048

_SESSION_CONTROL_INDICATOR = ord("2")
_RESERVED = b"\x00\x00"


class VMLHeader(_UInt16LengthHeader):
    """Two-byte big-endian length, a reserved byte and an indicator byte.

    ``is_session_control`` is set when the indicator marks a session control
    message (heartbeat or idle time) sent when there was no traffic.
    """

    __slots__ = ("is_session_control",)

    def __init__(self, length: int = 0, is_session_control: bool = False) -> None:
        super().__init__(length)
        self.is_session_control = is_session_control

    def _state(self) -> dict[str, object]:
        return {**super()._state(), "is_session_control": self.is_session_control}

    def _ensure_within_limit(self) -> None:
        if self._length > MAX_MESSAGE_LENGTH:
            raise HeaderError(
                f"length {self._length} exceeds max length {MAX_MESSAGE_LENGTH}"
            )

    def write_to(self, stream: BinaryIO) -> int:
        self._ensure_within_limit()
        encoded = _UINT16.pack(self._length) + _RESERVED
        stream.write(encoded)
        return len(encoded)

    def read_from(self, stream: BinaryIO) -> int:
        raw = self._read_exact(stream, 4, "reading 4 bytes from reader")
        (self._length,) = _UINT16.unpack(raw[:2])
        self._ensure_within_limit()
        try:
            indicators, _ = _bcd.decode(raw[3:], 2)
        except _bcd.BCDError as exc:
            raise HeaderError(f"decoding indicators: {exc}") from exc
        self.is_session_control = indicators[0] == _SESSION_CONTROL_INDICATOR
        return len(raw)