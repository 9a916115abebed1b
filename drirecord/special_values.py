"""Special raw values that mark invalid or out-of-range measurements."""

from __future__ import annotations

from enum import Enum


class SpecialValue(Enum):
    """Kinds of special measurement values."""

    INVALID = "invalid"
    NOT_UPDATED = "not_updated"
    UNDER_RANGE = "under_range"
    OVER_RANGE = "over_range"
    NOT_CALIBRATED = "not_calibrated"


DATA_INVALID_LIMIT = -32001
DATA_INVALID = -32767
DATA_NOT_UPDATED = -32766
DATA_DISCONT = -32765
DATA_UNDER_RANGE = -32764
DATA_OVER_RANGE = -32763
DATA_NOT_CALIBRATED = -32762

_SPECIAL = {
    DATA_INVALID: SpecialValue.INVALID,
    DATA_NOT_UPDATED: SpecialValue.NOT_UPDATED,
    DATA_UNDER_RANGE: SpecialValue.UNDER_RANGE,
    DATA_OVER_RANGE: SpecialValue.OVER_RANGE,
    DATA_NOT_CALIBRATED: SpecialValue.NOT_CALIBRATED,
}


def is_invalid(value: int) -> bool:
    """True if the raw value is in the reserved invalid range."""
    return value <= DATA_INVALID_LIMIT


def check_valid(value: int) -> int | None:
    """The value itself, or None when it is invalid."""
    return None if is_invalid(value) else value


def get_special_value(value: int) -> SpecialValue | None:
    """The special meaning of a raw value, or None for ordinary data."""
    special = _SPECIAL.get(value)
    if special is not None:
        return special
    if value > DATA_INVALID_LIMIT:
        return None
    return SpecialValue.INVALID