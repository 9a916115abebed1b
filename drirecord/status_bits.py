"""Status flags of the parameter groups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


def _bit(word: int, n: int) -> bool:
    return bool(word & (1 << n))


@dataclass(frozen=True)
class EcgStatus:
    """ECG status flags."""

    exists: bool = False
    active: bool = False
    asystole: bool = False
    noise: bool = False
    artifact: bool = False
    learning: bool = False
    pacer_on: bool = False
    channel1_off: bool = False
    channel2_off: bool = False
    channel3_off: bool = False

    @classmethod
    def from_status(cls, status: int) -> EcgStatus:
        """Decode the group status word."""
        return cls(
            exists=_bit(status, 0),
            active=_bit(status, 1),
            asystole=_bit(status, 2),
            noise=_bit(status, 7),
            artifact=_bit(status, 8),
            learning=_bit(status, 9),
            pacer_on=_bit(status, 10),
            channel1_off=_bit(status, 11),
            channel2_off=_bit(status, 12),
            channel3_off=_bit(status, 13),
        )


@dataclass(frozen=True)
class NibpStatus:
    """Non-invasive blood pressure status flags."""

    exists: bool = False
    active: bool = False
    auto_mode: bool = False
    stat_mode: bool = False
    measuring: bool = False
    stasis_on: bool = False
    calibrating: bool = False
    data_older_than_60s: bool = False

    @classmethod
    def from_label(cls, label: int) -> NibpStatus:
        """Decode the group label word; exists and active are always set."""
        return cls(
            exists=True,
            active=True,
            auto_mode=_bit(label, 3),
            stat_mode=_bit(label, 4),
            measuring=_bit(label, 5),
            stasis_on=_bit(label, 6),
            calibrating=_bit(label, 7),
            data_older_than_60s=_bit(label, 8),
        )


@dataclass(frozen=True)
class Co2Status:
    """CO2 status flags."""

    exists: bool = False
    active: bool = False
    apnea_co2: bool = False
    calibrating_sensor: bool = False
    zeroing_sensor: bool = False
    occlusion: bool = False
    air_leak: bool = False
    apnea_from_resp: bool = False
    apnea_deactivated: bool = False
    wet_condition: bool = False

    @classmethod
    def from_status(cls, status: int) -> Co2Status:
        """Decode the group status word."""
        return cls(
            exists=_bit(status, 0),
            active=_bit(status, 1),
            apnea_co2=_bit(status, 2),
            calibrating_sensor=_bit(status, 3),
            zeroing_sensor=_bit(status, 4),
            occlusion=_bit(status, 5),
            air_leak=_bit(status, 6),
            apnea_from_resp=_bit(status, 7),
            apnea_deactivated=_bit(status, 8),
            wet_condition=_bit(status, 9),
        )


@dataclass(frozen=True)
class Spo2Status:
    """SpO2 status flags."""

    exists: bool = False
    active: bool = False

    @classmethod
    def from_status(cls, status: int) -> Spo2Status:
        """Decode the group status word."""
        return cls(exists=_bit(status, 0), active=_bit(status, 1))


class TidalVolumeBase(IntEnum):
    """Temperature and pressure base of tidal volumes."""

    ATPD = 0
    NTPD = 1
    BTPS = 2
    STPD = 3


@dataclass(frozen=True)
class FlowVolStatus:
    """Flow and volume (ventilator) status flags."""

    exists: bool = False
    active: bool = False
    disconnection: bool = False
    calibrating: bool = False
    zeroing: bool = False
    obstruction: bool = False
    leak: bool = False
    measurement_off: bool = False
    tv_base: TidalVolumeBase = TidalVolumeBase.ATPD

    @classmethod
    def from_status(cls, status: int) -> FlowVolStatus:
        """Decode the group status word."""
        return cls(
            exists=_bit(status, 0),
            active=_bit(status, 1),
            disconnection=_bit(status, 2),
            calibrating=_bit(status, 3),
            zeroing=_bit(status, 4),
            obstruction=_bit(status, 5),
            leak=_bit(status, 6),
            measurement_off=_bit(status, 7),
            tv_base=TidalVolumeBase((status >> 8) & 0x03),
        )


@dataclass(frozen=True)
class GasStatus:
    """O2, N2O and anesthesia agent status flags."""

    exists: bool = False
    active: bool = False
    calibrating: bool = False
    measurement_off: bool = False

    @classmethod
    def from_status(cls, status: int) -> GasStatus:
        """Decode the group status word."""
        return cls(
            exists=_bit(status, 0),
            active=_bit(status, 1),
            calibrating=_bit(status, 2),
            measurement_off=_bit(status, 3),
        )


@dataclass(frozen=True)
class GenericStatus:
    """Status of groups that carry only exists and active flags."""

    exists: bool = False
    active: bool = False

    @classmethod
    def from_status(cls, status: int) -> GenericStatus:
        """Decode the group status word."""
        return cls(exists=_bit(status, 0), active=_bit(status, 1))