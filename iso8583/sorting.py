"""Orderings for subfield tags."""

from __future__ import annotations

import re

_HEX = re.compile(r"(?:[0-9A-Fa-f]{2})*")


def strings(x: list[str]) -> None:
    """Sort *x* in place in lexical order."""
    x.sort()


def _int_key(value: str) -> int:
    if not re.fullmatch(r"[+-]?[0-9]+", value):
        raise ValueError(
            "failed to sort strings by int: failed to convert string to int"
        )
    return int(value)


def strings_by_int(x: list[str]) -> None:
    """Sort *x* in place by the integer each string holds.

    Raises ValueError if an element is not an integer.
    """
    x.sort(key=_int_key)


def _hex_key(value: str) -> int:
    if not _HEX.fullmatch(value):
        raise ValueError(f"failed to encode ascii hex {value} to bytes")
    return int.from_bytes(bytes.fromhex(value), "big")


def strings_by_hex(x: list[str]) -> None:
    """Sort *x* in place by the big-endian value of each even-length hex string.

    Raises ValueError if an element is not valid hex of even length.
    """
    x.sort(key=_hex_key)