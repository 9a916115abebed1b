"""Little-endian field readers and the common parameter group header."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .special_values import check_valid

_I16 = struct.Struct("<h")
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


def read_i16(data: bytes, offset: int = 0) -> int:
    """Signed 16-bit little-endian value at offset."""
    return _I16.unpack_from(data, offset)[0]


def read_u16(data: bytes, offset: int = 0) -> int:
    """Unsigned 16-bit little-endian value at offset."""
    return _U16.unpack_from(data, offset)[0]


def read_u32(data: bytes, offset: int = 0) -> int:
    """Unsigned 32-bit little-endian value at offset."""
    return _U32.unpack_from(data, offset)[0]


def read_valid_i16(data: bytes, offset: int = 0) -> int | None:
    """Signed 16-bit value at offset, or None if it is a special invalid value."""
    return check_valid(read_i16(data, offset))


@dataclass(frozen=True)
class GroupHeader:
    """Status word and label that start most parameter groups."""

    status: int
    label: int

    @classmethod
    def parse(cls, data: bytes) -> GroupHeader:
        """Read the 6-byte header: 4 bytes status, 2 bytes label."""
        if len(data) < 6:
            raise ValueError("Group header data too short")
        return cls(status=read_u32(data, 0), label=read_u16(data, 4))

    def exists(self) -> bool:
        """True if the measuring module exists."""
        return bool(self.status & 0x01)

    def active(self) -> bool:
        """True if the measuring module is active."""
        return bool(self.status & 0x02)

    def get_bit(self, bit: int) -> bool:
        """One status bit; bits past 31 read as False."""
        if bit >= 32:
            return False
        return bool(self.status & (1 << bit))

    def get_bits(self, start: int, end: int) -> int:
        """Status bits start..end inclusive, shifted down; 0 for a bad range."""
        if start >= 32 or end >= 32 or start > end:
            return 0
        mask = (1 << (end - start + 1)) - 1
        return (self.status >> start) & mask


def extract_label_bits(label: int, start: int, end: int) -> int:
    """Label bits start..end inclusive, shifted down; 0 for a bad range."""
    if start >= 16 or end >= 16 or start > end:
        return 0
    mask = (1 << (end - start + 1)) - 1
    return (label >> start) & mask