import pytest

from drirecord.constants import (
    DriLevel,
    DriMainType,
    PhdbClass,
    PhdbSubrecordType,
)


def test_dri_level_from_raw_byte():
    assert DriLevel(8) is DriLevel.LEVEL_02
    assert DriLevel(2) is DriLevel.LEVEL_95


@pytest.mark.parametrize("raw", [0, 1, 11, 255])
def test_dri_level_unknown_raises(raw):
    with pytest.raises(ValueError):
        DriLevel(raw)


def test_year_strings():
    assert DriLevel.LEVEL_02.year_str() == "'03"
    assert DriLevel.LEVEL_00.year_str() == "'01"
    assert DriLevel.LEVEL_04.year_str() == "'09"


def test_every_level_has_year():
    years = [DriLevel(raw).year_str() for raw in range(2, 11)]
    assert years == ["'95", "'97", "'98", "'99", "'01", "'02", "'03", "'05", "'09"]


def test_main_type_values():
    assert DriMainType(0) is DriMainType.PHDB
    assert DriMainType(1) is DriMainType.WAVE
    with pytest.raises(ValueError):
        DriMainType(2)


def test_subrecord_and_class_round_trip():
    for member in PhdbSubrecordType:
        assert PhdbSubrecordType(int(member)) is member
    for member in PhdbClass:
        assert PhdbClass(int(member)) is member