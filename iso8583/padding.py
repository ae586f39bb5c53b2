"""Padding of field values up to a fixed length."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import ClassVar


class Padder(ABC):
    """Adds padding to a field value and removes it again."""

    @abstractmethod
    def pad(self, data: bytes, length: int) -> bytes:
        """Return *data* padded up to *length* bytes."""

    @abstractmethod
    def unpad(self, data: bytes) -> bytes:
        """Return *data* with its padding removed."""

    @abstractmethod
    def inspect(self) -> bytes | None:
        """Return the encoded padding character, or None if there is none."""


class _CharPadder(Padder, ABC):
    """A padder that repeats one character on one side of the value."""

    __slots__ = ("_pad", "_run")

    # Pattern template matching the run of padding on the padded side.
    _edge: ClassVar[bytes]

    def __init__(self, pad: str) -> None:
        if not isinstance(pad, str) or len(pad) != 1:
            raise ValueError(f"padding must be a single character, got {pad!r}")
        self._pad = pad.encode("utf-8")
        self._run = re.compile(self._edge % re.escape(self._pad))

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._pad == other._pad  # type: ignore[attr-defined]
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._pad))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pad.decode('utf-8')!r})"


class LeftPadder(_CharPadder):
    """Pads on the left, for right-justified values."""

    __slots__ = ()
    _edge = rb"\A(?:%s)+"

    def pad(self, data: bytes, length: int) -> bytes:
        data = bytes(data)
        return self._pad * max(0, length - len(data)) + data

    def unpad(self, data: bytes) -> bytes:
        return self._run.sub(b"", bytes(data), count=1)

    def inspect(self) -> bytes:
        return bytes(self._pad)


class RightPadder(_CharPadder):
    """Pads on the right, for left-justified values."""

    __slots__ = ()
    _edge = rb"(?:%s)+\Z"

    def pad(self, data: bytes, length: int) -> bytes:
        data = bytes(data)
        return data + self._pad * max(0, length - len(data))

    def unpad(self, data: bytes) -> bytes:
        return self._run.sub(b"", bytes(data), count=1)

    def inspect(self) -> bytes:
        return bytes(self._pad)


class NonePadder(Padder):
    """Leaves values untouched."""

    def pad(self, data: bytes, length: int) -> bytes:
        return bytes(data)

    def unpad(self, data: bytes) -> bytes:
        return bytes(data)

    def inspect(self) -> None:
        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NonePadder)

    def __hash__(self) -> int:
        return hash(NonePadder)

    def __repr__(self) -> str:
        return "NonePadder()"


NONE = NonePadder()


def left(pad: str) -> LeftPadder:
    """Return a padder that pads on the left with *pad*."""
    return LeftPadder(pad)


def right(pad: str) -> RightPadder:
    """Return a padder that pads on the right with *pad*."""
    return RightPadder(pad)