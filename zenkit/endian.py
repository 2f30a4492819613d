"""Byte-order helpers."""

from __future__ import annotations

import sys
from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF
_BIG_ENDIAN_HOST = sys.byteorder == "big"


def endian_swap32(num: int) -> int:
    """Swap the byte order of a 32-bit value."""
    num &= _MASK32
    return (
        ((num & 0xFF) << 24)
        | ((num & 0xFF00) << 8)
        | ((num & 0xFF0000) >> 8)
        | ((num & 0xFF000000) >> 24)
    )


def endian_swap16(num: int) -> int:
    """Swap the byte order of a 16-bit value."""
    num &= 0xFFFF
    return ((num & 0xFF) << 8) | ((num & 0xFF00) >> 8)


def host_net32(num: int) -> int:
    """Convert a 32-bit value between host order and network (big-endian) order."""
    return num & _MASK32 if _BIG_ENDIAN_HOST else endian_swap32(num)


def host_net16(num: int) -> int:
    """Convert a 16-bit value between host order and network (big-endian) order."""
    return num & 0xFFFF if _BIG_ENDIAN_HOST else endian_swap16(num)


@dataclass
class Byte4:
    """A 32-bit value that can also be viewed as its four host-order bytes."""

    value: int = 0

    def __post_init__(self) -> None:
        self.value &= _MASK32

    @classmethod
    def from_bytes(cls, b0, b1, b2, b3) -> "Byte4":
        raw = bytes((b0 & 0xFF, b1 & 0xFF, b2 & 0xFF, b3 & 0xFF))
        return cls(int.from_bytes(raw, sys.byteorder))

    @property
    def bytes(self) -> bytes:
        return self.value.to_bytes(4, sys.byteorder)

    def set_with_be(self, value) -> None:
        value &= _MASK32
        self.value = value if _BIG_ENDIAN_HOST else endian_swap32(value)

    def set_with_le(self, value) -> None:
        value &= _MASK32
        self.value = endian_swap32(value) if _BIG_ENDIAN_HOST else value

    def be_value(self) -> int:
        return self.value if _BIG_ENDIAN_HOST else endian_swap32(self.value)

    def le_value(self) -> int:
        return endian_swap32(self.value) if _BIG_ENDIAN_HOST else self.value