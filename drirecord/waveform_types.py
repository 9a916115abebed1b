"""Waveform types, their sampling rates and units."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

MAX_TOTAL_SAMPLE_RATE = 600


class WaveformType(IntEnum):
    """Waveform channels available over the interface."""

    CMD = 0
    ECG1 = 1
    ECG2 = 2
    ECG3 = 3
    INVP1 = 4
    INVP2 = 5
    INVP3 = 6
    INVP4 = 7
    PLETH = 8
    CO2 = 9
    O2 = 10
    N2O = 11
    AA = 12
    AWP = 13
    FLOW = 14
    RESP = 15
    INVP5 = 16
    INVP6 = 17
    EEG1 = 18
    EEG2 = 19
    EEG3 = 20
    EEG4 = 21
    VOL = 23
    TONO_PRESS = 24
    SPI_LOOP_STATUS = 29
    ENT_100 = 32
    EEG_BIS = 35
    INVP7 = 36
    INVP8 = 37
    PLETH2 = 38

    def display_name(self) -> str:
        """Upper-case name shown to users."""
        return self.name

    def info(self) -> WaveformInfo:
        """Sampling rate, unit and description of this waveform."""
        return get_waveform_info(self)


@dataclass(frozen=True)
class WaveformInfo:
    """Metadata describing one waveform type."""

    waveform_type: WaveformType
    samples_per_second: int
    unit: str
    description: str


_W = WaveformType

_INFO_TABLE: list[tuple[tuple[WaveformType, ...], int, str, str]] = [
    ((_W.ECG1, _W.ECG2, _W.ECG3), 300, "μV", "ECG waveform"),
    (
        (_W.INVP1, _W.INVP2, _W.INVP3, _W.INVP4, _W.INVP5, _W.INVP6, _W.INVP7, _W.INVP8),
        100,
        "mmHg (1/100)",
        "Invasive blood pressure",
    ),
    ((_W.PLETH, _W.PLETH2), 100, "% (1/10)", "Plethysmograph"),
    ((_W.CO2,), 25, "% (1/100)", "CO2 concentration"),
    ((_W.O2,), 25, "% (1/100)", "O2 concentration"),
    ((_W.N2O,), 25, "% (1/100)", "N2O concentration"),
    ((_W.AA,), 25, "% (1/100)", "Anesthesia agent"),
    ((_W.AWP,), 25, "cmH2O (1/10)", "Airway pressure"),
    ((_W.FLOW,), 25, "l/min (1/10)", "Airway flow"),
    ((_W.VOL,), 25, "ml", "Airway volume"),
    ((_W.RESP,), 25, "Ω (1/100)", "ECG impedance respiration"),
    ((_W.EEG1, _W.EEG2, _W.EEG3, _W.EEG4), 100, "μV (1/10)", "EEG channel"),
    ((_W.TONO_PRESS,), 25, "mmHg (1/10)", "Tonometry catheter pressure"),
    ((_W.SPI_LOOP_STATUS,), 25, "bit pattern", "Spirometry loop status"),
    ((_W.ENT_100,), 100, "μV (1/10)", "Entropy"),
    ((_W.EEG_BIS,), 300, "μV", "BIS"),
    ((_W.CMD,), 0, "", "Command"),
]

_INFO: dict[WaveformType, WaveformInfo] = {
    wf: WaveformInfo(wf, rate, unit, description)
    for types, rate, unit, description in _INFO_TABLE
    for wf in types
}


def get_waveform_info(wf_type: WaveformType) -> WaveformInfo:
    """Metadata for the given waveform type."""
    return _INFO[WaveformType(wf_type)]


def calculate_total_sample_rate(waveforms: Iterable[WaveformType]) -> int:
    """Sum of the sampling rates of the given waveforms."""
    return sum(get_waveform_info(wf).samples_per_second for wf in waveforms)


def validate_waveform_set(waveforms: Iterable[WaveformType]) -> None:
    """Raise ValueError if the waveforms together exceed the rate limit."""
    total = calculate_total_sample_rate(waveforms)
    if total > MAX_TOTAL_SAMPLE_RATE:
        raise ValueError(
            f"Total sample rate {total} exceeds maximum {MAX_TOTAL_SAMPLE_RATE}"
        )