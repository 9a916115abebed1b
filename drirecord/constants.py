"""Protocol constants and record type enumerations."""

from enum import IntEnum

FRAME_CHAR = 0x7E
CTRL_CHAR = 0x7D
BIT5 = 0x20
BIT5_COMPL = 0x5F

MAX_RECORD_SIZE = 1490
HEADER_SIZE = 40
MAX_DATA_SIZE = 1450
MAX_SUBRECORDS = 8
EOL_SUBRECORD_LIST = 0xFF

PHDBCL_REQ_BASIC_MASK = 0x0000
PHDBCL_DENY_BASIC_MASK = 0x0001
PHDBCL_REQ_EXT1_MASK = 0x0002
PHDBCL_REQ_EXT2_MASK = 0x0004
PHDBCL_REQ_EXT3_MASK = 0x0008

PHDBCL_REQ_ALL = (
    PHDBCL_REQ_BASIC_MASK
    | PHDBCL_REQ_EXT1_MASK
    | PHDBCL_REQ_EXT2_MASK
    | PHDBCL_REQ_EXT3_MASK
)


class DriLevel(IntEnum):
    """Interface level the monitor supports."""

    LEVEL_95 = 2
    LEVEL_97 = 3
    LEVEL_98 = 4
    LEVEL_99 = 5
    LEVEL_00 = 6
    LEVEL_01 = 7
    LEVEL_02 = 8
    LEVEL_03 = 9
    LEVEL_04 = 10

    def year_str(self) -> str:
        """Release year of this level, for display."""
        return _LEVEL_YEARS[self]


_LEVEL_YEARS = {
    DriLevel.LEVEL_95: "'95",
    DriLevel.LEVEL_97: "'97",
    DriLevel.LEVEL_98: "'98",
    DriLevel.LEVEL_99: "'99",
    DriLevel.LEVEL_00: "'01",
    DriLevel.LEVEL_01: "'02",
    DriLevel.LEVEL_02: "'03",
    DriLevel.LEVEL_03: "'05",
    DriLevel.LEVEL_04: "'09",
}


class DriMainType(IntEnum):
    """Main record types."""

    PHDB = 0
    WAVE = 1
    ALARM = 4
    NETWORK = 5
    FO = 8


class PhdbSubrecordType(IntEnum):
    """Physiological database subrecord types."""

    XMIT_REQ = 0
    DISPL = 1
    TREND_10S = 2
    TREND_60S = 3
    AUX = 4


class PhdbClass(IntEnum):
    """Physiological data record classes."""

    BASIC = 0
    EXT1 = 1
    EXT2 = 2
    EXT3 = 3