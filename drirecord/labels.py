"""Labels and enumerations for physiological parameters."""

from enum import Enum, IntEnum


class EcgLeadType(IntEnum):
    """ECG lead selections."""

    NOT_SELECTED = 0
    I = 1  # noqa: E741
    II = 2
    III = 3
    AVR = 4
    AVL = 5
    AVF = 6
    V = 7

    def display_name(self) -> str:
        """Upper-case name shown to users."""
        return self.name


class HrSource(IntEnum):
    """Source of the heart rate value."""

    UNKNOWN = 0
    ECG = 1
    BP1 = 2
    BP2 = 3
    BP3 = 4
    BP4 = 5
    PLETH = 6
    BP5 = 7
    BP6 = 8
    ECG_MORTARA = 9
    BP7 = 10
    BP8 = 11
    PLETH2 = 12


class InvasivePressureLabel(IntEnum):
    """Labels of invasive pressure channels."""

    NOT_DEFINED = 0
    ART = 1
    CVP = 2
    PA = 3
    RAP = 4
    RVP = 5
    LAP = 6
    ICP = 7
    ABP = 8
    P1 = 9
    P2 = 10
    P3 = 11
    P4 = 12
    P5 = 13
    P6 = 14
    SP = 15
    FEM = 16
    UAC = 17
    UVC = 18
    ICP2 = 19
    P7 = 20
    P8 = 21
    FEMV = 22

    def display_name(self) -> str:
        """Upper-case name shown to users."""
        return self.name


class TemperatureLabel(IntEnum):
    """Labels of temperature channels."""

    NOT_USED = 0
    ESO = 1
    NASO = 2
    TYMP = 3
    RECT = 4
    BLAD = 5
    AXIL = 6
    SKIN = 7
    AIRW = 8
    ROOM = 9
    MYO = 10
    T1 = 11
    T2 = 12
    T3 = 13
    T4 = 14
    CORE = 15
    SURF = 16
    T5 = 17
    T6 = 18

    def display_name(self) -> str:
        """Upper-case name shown to users."""
        return self.name


class AnesthesiaAgent(IntEnum):
    """Anesthesia agents identified by the gas module."""

    UNKNOWN = 0
    NONE = 1
    HAL = 2
    ENF = 3
    ISO = 4
    DES = 5
    SEV = 6

    def display_name(self) -> str:
        """Upper-case name shown to users."""
        return self.name


class ParameterGroup(Enum):
    """Parameter groups of the physiological data record."""

    ECG = "ecg"
    INVASIVE_PRESSURE = "invasive_pressure"
    NIBP = "nibp"
    TEMPERATURE = "temperature"
    SPO2 = "spo2"
    CO2 = "co2"
    O2 = "o2"
    N2O = "n2o"
    ANESTHESIA_AGENT = "anesthesia_agent"
    FLOW_VOLUME = "flow_volume"
    CARDIAC_OUTPUT = "cardiac_output"
    NMT = "nmt"
    ECG_EXTRA = "ecg_extra"
    SVO2 = "svo2"