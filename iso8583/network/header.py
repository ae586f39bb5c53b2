"""Network headers that carry the length of the message that follows."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO

MAX_UINT16 = 0xFFFF


class HeaderError(ValueError):
    """Raised when a header cannot be written or read."""


class Header(ABC):
    """Writes and reads the encoded message length in front of a message.

    ``length`` holds the length of the message.
    """

    length: int

    @abstractmethod
    def write_to(self, stream: BinaryIO) -> int:
        """Write the encoded length to *stream*; return the bytes written."""

    @abstractmethod
    def read_from(self, stream: BinaryIO) -> int:
        """Read the header from *stream*; return the bytes read."""

    @staticmethod
    def _read_exact(stream: BinaryIO, size: int, context: str = "reading header") -> bytes:
        """Read exactly *size* bytes from *stream* or raise HeaderError."""
        buf = bytearray()
        while len(buf) < size:
            chunk = stream.read(size - len(buf))
            if not chunk:
                reason = "unexpected EOF" if buf else "EOF"
                raise HeaderError(f"{context}: {reason}")
            buf += chunk
        return bytes(buf)


def _check_uint16(length: int) -> int:
    """Return *length* if it fits a two-byte header, else raise HeaderError."""
    if length > MAX_UINT16:
        raise HeaderError(
            f"length {length} exceeds max length for 2 bytes header {MAX_UINT16}"
        )
    if length < 0:
        raise HeaderError(f"negative length {length}")
    return length