"""Frame checksum: the sum of all bytes modulo 256."""

from __future__ import annotations


def calculate_checksum(data: bytes) -> int:
    """Sum of the bytes, wrapped to one byte."""
    return sum(data) & 0xFF


def validate_checksum(data: bytes) -> bool:
    """True if the last byte is the checksum of the bytes before it."""
    if not data:
        return False
    return data[-1] == calculate_checksum(data[:-1])