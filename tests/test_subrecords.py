import struct

import pytest

from drirecord.subrecords import (
    GroupHeader,
    extract_label_bits,
    read_i16,
    read_u16,
    read_u32,
    read_valid_i16,
)


def test_read_i16():
    data = bytes([0x34, 0x12, 0xFF, 0xFF])
    assert read_i16(data, 0) == 0x1234
    assert read_i16(data, 2) == -1


def test_read_unsigned():
    data = bytes([0x34, 0x12, 0xFF, 0xFF])
    assert read_u16(data, 2) == 0xFFFF
    assert read_u32(data) == 0xFFFF1234


def test_read_short_data_raises():
    with pytest.raises(struct.error):
        read_i16(bytes([0x01]))


def test_read_valid_i16():
    assert read_valid_i16(struct.pack("<h", 9800)) == 9800
    assert read_valid_i16(struct.pack("<h", -32767)) is None


def test_group_header():
    header = GroupHeader(status=0b11, label=0)
    assert header.exists()
    assert header.active()


def test_group_header_flags_off():
    header = GroupHeader(status=0, label=0)
    assert not header.exists()
    assert not header.active()


def test_get_bits():
    header = GroupHeader(status=0b11110000, label=0)
    assert header.get_bits(4, 7) == 0b1111


def test_get_bits_bad_range():
    header = GroupHeader(status=0xFFFFFFFF, label=0)
    assert header.get_bits(7, 4) == 0
    assert header.get_bits(0, 32) == 0
    assert header.get_bits(0, 31) == 0xFFFFFFFF


def test_get_bit():
    header = GroupHeader(status=0b100, label=0)
    assert header.get_bit(2)
    assert not header.get_bit(1)
    assert not header.get_bit(40)


def test_parse_round_trip():
    data = struct.pack("<IH", 0x00010203, 0x0405)
    header = GroupHeader.parse(data)
    assert header == GroupHeader(status=0x00010203, label=0x0405)


def test_parse_too_short():
    with pytest.raises(ValueError):
        GroupHeader.parse(bytes(5))


def test_extract_label_bits():
    assert extract_label_bits(0x0321, 0, 3) == 0x1
    assert extract_label_bits(0x0321, 4, 7) == 0x2
    assert extract_label_bits(0x0321, 8, 11) == 0x3
    assert extract_label_bits(0xFFFF, 0, 16) == 0
    assert extract_label_bits(0xFFFF, 5, 2) == 0