"""Scaling factors that turn raw integers into physical units."""

from __future__ import annotations

from .special_values import is_invalid

SCALE_PERCENT_100 = 0.01
SCALE_TEMP_100 = 0.01
SCALE_PRESSURE_100 = 0.01
SCALE_ST_100 = 0.01
SCALE_FLOW_10 = 0.1
SCALE_VOLUME_10 = 0.1
SCALE_COMPLIANCE_100 = 0.01
SCALE_MAC_100 = 0.01
SCALE_AWP_100 = 0.01
SCALE_IR_AMP_10 = 0.1
SCALE_IMPEDANCE_100 = 0.01


def scale_i16(value: int | None, scale: float) -> float | None:
    """Scale an optional raw value; None stays None."""
    return None if value is None else value * scale


def scale_valid_i16(value: int, scale: float) -> float | None:
    """Scale a raw value, or return None when it is a special invalid value."""
    return None if is_invalid(value) else value * scale