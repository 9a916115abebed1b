import pytest

from drirecord.labels import (
    AnesthesiaAgent,
    EcgLeadType,
    HrSource,
    InvasivePressureLabel,
    TemperatureLabel,
)


def test_ecg_lead_names():
    assert EcgLeadType(0).display_name() == "NOT_SELECTED"
    assert EcgLeadType(4).display_name() == "AVR"
    assert EcgLeadType(7).display_name() == "V"


def test_ecg_lead_out_of_range():
    with pytest.raises(ValueError):
        EcgLeadType(8)


def test_hr_source_values():
    assert HrSource(1) is HrSource.ECG
    assert HrSource(12) is HrSource.PLETH2
    with pytest.raises(ValueError):
        HrSource(13)


def test_invasive_pressure_labels():
    assert InvasivePressureLabel(1).display_name() == "ART"
    assert InvasivePressureLabel(22).display_name() == "FEMV"
    with pytest.raises(ValueError):
        InvasivePressureLabel(23)


def test_temperature_labels():
    assert TemperatureLabel(0).display_name() == "NOT_USED"
    assert TemperatureLabel(15).display_name() == "CORE"
    with pytest.raises(ValueError):
        TemperatureLabel(19)


def test_anesthesia_agents():
    assert AnesthesiaAgent(1).display_name() == "NONE"
    assert AnesthesiaAgent(6).display_name() == "SEV"
    with pytest.raises(ValueError):
        AnesthesiaAgent(7)


@pytest.mark.parametrize(
    "enum_cls", [EcgLeadType, InvasivePressureLabel, TemperatureLabel, AnesthesiaAgent]
)
def test_round_trip_and_unique_names(enum_cls):
    names = [member.display_name() for member in enum_cls]
    assert len(names) == len(set(names))
    for member in enum_cls:
        assert enum_cls(int(member)) is member