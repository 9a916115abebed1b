"""Decoding of physiological data subrecords."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TypeVar

from .constants import PhdbClass, PhdbSubrecordType
from .labels import (
    AnesthesiaAgent,
    EcgLeadType,
    HrSource,
    InvasivePressureLabel,
    TemperatureLabel,
)
from .scaling import (
    SCALE_AWP_100,
    SCALE_COMPLIANCE_100,
    SCALE_IR_AMP_10,
    SCALE_MAC_100,
    SCALE_PERCENT_100,
    SCALE_PRESSURE_100,
    SCALE_ST_100,
    SCALE_TEMP_100,
    SCALE_VOLUME_10,
    scale_valid_i16,
)
from .status_bits import (
    Co2Status,
    EcgStatus,
    FlowVolStatus,
    GasStatus,
    GenericStatus,
    NibpStatus,
    Spo2Status,
)
from .subrecords import GroupHeader, read_i16, read_u32, read_valid_i16

log = logging.getLogger(__name__)

SUBRECORD_SIZE = 1088
_CLASS_DATA_START = 4

_E = TypeVar("_E", bound=Enum)


@dataclass
class PhysiologicalData:
    """One physiological data record with values in physical units."""

    timestamp: datetime
    phdb_class: PhdbClass
    subtype: PhdbSubrecordType

    ecg_status: EcgStatus = field(default_factory=EcgStatus)
    ecg_hr: float | None = None
    ecg_st1: float | None = None
    ecg_st2: float | None = None
    ecg_st3: float | None = None
    ecg_rr: float | None = None
    ecg_hr_source: HrSource | None = None
    ecg_lead1: EcgLeadType | None = None
    ecg_lead2: EcgLeadType | None = None
    ecg_lead3: EcgLeadType | None = None

    nibp_status: NibpStatus = field(default_factory=NibpStatus)
    nibp_sys: float | None = None
    nibp_dia: float | None = None
    nibp_mean: float | None = None
    nibp_hr: float | None = None

    invp1_status: GenericStatus = field(default_factory=GenericStatus)
    invp1_sys: float | None = None
    invp1_dia: float | None = None
    invp1_mean: float | None = None
    invp1_hr: float | None = None
    invp1_label: InvasivePressureLabel | None = None

    spo2_status: Spo2Status = field(default_factory=Spo2Status)
    spo2: float | None = None
    spo2_pr: float | None = None
    spo2_ir_amp: float | None = None

    temp1_status: GenericStatus = field(default_factory=GenericStatus)
    temp1: float | None = None
    temp1_label: TemperatureLabel | None = None
    temp2_status: GenericStatus = field(default_factory=GenericStatus)
    temp2: float | None = None
    temp2_label: TemperatureLabel | None = None

    co2_status: Co2Status = field(default_factory=Co2Status)
    co2_et: float | None = None
    co2_fi: float | None = None
    co2_rr: float | None = None

    o2_status: GasStatus = field(default_factory=GasStatus)
    o2_et: float | None = None
    o2_fi: float | None = None

    n2o_status: GasStatus = field(default_factory=GasStatus)
    n2o_et: float | None = None
    n2o_fi: float | None = None

    aa_status: GasStatus = field(default_factory=GasStatus)
    aa_et: float | None = None
    aa_fi: float | None = None
    aa_mac: float | None = None
    aa_agent: AnesthesiaAgent | None = None

    flow_status: FlowVolStatus = field(default_factory=FlowVolStatus)
    flow_rr: float | None = None
    flow_ppeak: float | None = None
    flow_peep: float | None = None
    flow_pplat: float | None = None
    flow_tv_insp: float | None = None
    flow_tv_exp: float | None = None
    flow_compliance: float | None = None
    flow_mv_exp: float | None = None

    @classmethod
    def empty(
        cls,
        timestamp: datetime,
        phdb_class: PhdbClass,
        subtype: PhdbSubrecordType,
    ) -> PhysiologicalData:
        """A record with default statuses and no values."""
        return cls(
            timestamp=timestamp,
            phdb_class=PhdbClass(phdb_class),
            subtype=PhdbSubrecordType(subtype),
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain representation suitable for JSON."""
        result: dict[str, Any] = {}
        for f in fields(self):
            key = "class" if f.name == "phdb_class" else f.name
            result[key] = _plain(getattr(self, f.name))
        return result


def _plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat().replace("+00:00", "Z")
    if isinstance(value, Enum):
        return value.name
    if hasattr(value, "__dataclass_fields__"):
        return {f.name: _plain(getattr(value, f.name)) for f in fields(value)}
    return value


def _maybe(enum_cls: type[_E], value: int) -> _E | None:
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _unscaled(data: bytes, offset: int) -> float | None:
    value = read_valid_i16(data, offset)
    return None if value is None else float(value)


def _scaled(data: bytes, offset: int, scale: float) -> float | None:
    return scale_valid_i16(read_i16(data, offset), scale)


def _ecg(data: bytes) -> dict[str, Any]:
    header = GroupHeader.parse(data)
    return {
        "ecg_status": EcgStatus.from_status(header.status),
        "ecg_hr": _unscaled(data, 6),
        "ecg_st1": _scaled(data, 8, SCALE_ST_100),
        "ecg_st2": _scaled(data, 10, SCALE_ST_100),
        "ecg_st3": _scaled(data, 12, SCALE_ST_100),
        "ecg_rr": _unscaled(data, 14),
        "ecg_hr_source": _maybe(HrSource, (header.status >> 3) & 0x0F),
        "ecg_lead1": _maybe(EcgLeadType, header.label & 0x0F),
        "ecg_lead2": _maybe(EcgLeadType, (header.label >> 4) & 0x0F),
        "ecg_lead3": _maybe(EcgLeadType, (header.label >> 8) & 0x0F),
    }


def _invp(data: bytes, prefix: str) -> dict[str, Any]:
    header = GroupHeader.parse(data)
    return {
        f"{prefix}_status": GenericStatus.from_status(header.status),
        f"{prefix}_sys": _scaled(data, 6, SCALE_PRESSURE_100),
        f"{prefix}_dia": _scaled(data, 8, SCALE_PRESSURE_100),
        f"{prefix}_mean": _scaled(data, 10, SCALE_PRESSURE_100),
        f"{prefix}_hr": _unscaled(data, 12),
        f"{prefix}_label": _maybe(InvasivePressureLabel, header.label),
    }


def _nibp(data: bytes) -> dict[str, Any]:
    header = GroupHeader.parse(data)
    return {
        "nibp_status": NibpStatus.from_label(header.label),
        "nibp_sys": _scaled(data, 6, SCALE_PRESSURE_100),
        "nibp_dia": _scaled(data, 8, SCALE_PRESSURE_100),
        "nibp_mean": _scaled(data, 10, SCALE_PRESSURE_100),
        "nibp_hr": _unscaled(data, 12),
    }


def _temp(data: bytes, prefix: str) -> dict[str, Any]:
    header = GroupHeader.parse(data)
    return {
        f"{prefix}_status": GenericStatus.from_status(header.status),
        prefix: _scaled(data, 6, SCALE_TEMP_100),
        f"{prefix}_label": _maybe(TemperatureLabel, header.label),
    }


def _spo2(data: bytes) -> dict[str, Any]:
    header = GroupHeader.parse(data)
    return {
        "spo2_status": Spo2Status.from_status(header.status),
        "spo2": _scaled(data, 6, SCALE_PERCENT_100),
        "spo2_pr": _unscaled(data, 8),
        "spo2_ir_amp": _scaled(data, 10, SCALE_IR_AMP_10),
    }


def _co2(data: bytes) -> dict[str, Any]:
    header = GroupHeader.parse(data)
    return {
        "co2_status": Co2Status.from_status(header.status),
        "co2_et": _scaled(data, 6, SCALE_PERCENT_100),
        "co2_fi": _scaled(data, 8, SCALE_PERCENT_100),
        "co2_rr": _unscaled(data, 10),
    }


def _gas(data: bytes, prefix: str) -> dict[str, Any]:
    header = GroupHeader.parse(data)
    return {
        f"{prefix}_status": GasStatus.from_status(header.status),
        f"{prefix}_et": _scaled(data, 6, SCALE_PERCENT_100),
        f"{prefix}_fi": _scaled(data, 8, SCALE_PERCENT_100),
    }


def _aa(data: bytes) -> dict[str, Any]:
    header = GroupHeader.parse(data)
    values = _gas(data, "aa")
    values["aa_mac"] = _scaled(data, 10, SCALE_MAC_100)
    values["aa_agent"] = _maybe(AnesthesiaAgent, header.label)
    return values


def _flow(data: bytes) -> dict[str, Any]:
    header = GroupHeader.parse(data)
    return {
        "flow_status": FlowVolStatus.from_status(header.status),
        "flow_rr": _unscaled(data, 6),
        "flow_ppeak": _scaled(data, 8, SCALE_AWP_100),
        "flow_peep": _scaled(data, 10, SCALE_AWP_100),
        "flow_pplat": _scaled(data, 12, SCALE_AWP_100),
        "flow_tv_insp": _scaled(data, 14, SCALE_VOLUME_10),
        "flow_tv_exp": _scaled(data, 16, SCALE_VOLUME_10),
        "flow_compliance": _scaled(data, 18, SCALE_COMPLIANCE_100),
        "flow_mv_exp": _scaled(data, 20, SCALE_PERCENT_100),
    }


# (start, end, decoder) of each group within the basic class data.
_BASIC_GROUPS = (
    (0, 16, _ecg),
    (16, 30, lambda d: _invp(d, "invp1")),
    (76, 90, _nibp),
    (90, 98, lambda d: _temp(d, "temp1")),
    (98, 106, lambda d: _temp(d, "temp2")),
    (122, 136, _spo2),
    (136, 150, _co2),
    (150, 160, lambda d: _gas(d, "o2")),
    (160, 170, lambda d: _gas(d, "n2o")),
    (170, 182, _aa),
    (182, 204, _flow),
)


def _decode_basic(data: bytes) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for start, end, decode in _BASIC_GROUPS:
        if len(data) >= end:
            values.update(decode(data[start:end]))
    return values


def decode_physiological(
    subrecord_data: bytes,
    subtype: PhdbSubrecordType,
    phdb_class: PhdbClass,
) -> PhysiologicalData:
    """Decode a 1088-byte physiological subrecord."""
    if len(subrecord_data) < SUBRECORD_SIZE:
        raise ValueError(
            f"Physiological subrecord too short: {len(subrecord_data)} bytes"
        )

    timestamp_raw = read_u32(subrecord_data, 0)
    try:
        timestamp = datetime.fromtimestamp(timestamp_raw, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise ValueError(f"Invalid timestamp: {timestamp_raw}") from None

    phdb_class = PhdbClass(phdb_class)
    record = PhysiologicalData.empty(timestamp, phdb_class, subtype)

    if phdb_class is PhdbClass.BASIC:
        for name, value in _decode_basic(bytes(subrecord_data[_CLASS_DATA_START:])).items():
            setattr(record, name, value)
    else:
        log.debug("%s class decoding is not supported", phdb_class.name)

    return record