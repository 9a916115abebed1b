from drirecord.scaling import (
    SCALE_PERCENT_100,
    SCALE_TEMP_100,
    scale_i16,
    scale_valid_i16,
)
from drirecord.special_values import DATA_NOT_UPDATED


def test_scale_i16():
    assert scale_i16(9800, SCALE_PERCENT_100) == 98.0
    assert scale_i16(3700, SCALE_TEMP_100) == 37.0
    assert scale_i16(None, SCALE_PERCENT_100) is None


def test_scale_valid_i16():
    assert scale_valid_i16(9800, SCALE_PERCENT_100) == 98.0
    assert scale_valid_i16(-32767, SCALE_PERCENT_100) is None


def test_scale_valid_rejects_all_special_values():
    assert scale_valid_i16(DATA_NOT_UPDATED, SCALE_TEMP_100) is None


def test_scale_valid_keeps_ordinary_negatives():
    assert scale_valid_i16(-100, 1.0) == -100.0