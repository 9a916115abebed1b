from drirecord.checksum import calculate_checksum, validate_checksum


def test_checksum_calculation():
    assert calculate_checksum(bytes([0x01, 0x02, 0x03, 0x04])) == 0x0A


def test_checksum_wrapping():
    assert calculate_checksum(bytes([0xFF, 0xFF, 0xFF])) == 0xFD


def test_validate_checksum_valid():
    data = bytearray([0x01, 0x02, 0x03, 0x04])
    data.append(calculate_checksum(data))
    assert validate_checksum(bytes(data))


def test_validate_checksum_invalid():
    assert not validate_checksum(bytes([0x01, 0x02, 0x03, 0x04, 0xFF]))


def test_validate_empty_is_false():
    assert validate_checksum(b"") is False


def test_empty_checksum_is_zero_and_single_zero_validates():
    assert calculate_checksum(b"") == 0
    assert validate_checksum(b"\x00")