# drirecord

Building blocks for working with patient monitors that speak the
Datex-Ohmeda Record Interface (DRI) protocol (S/5 and CARESCAPE B650/B850
class monitors): protocol constants, checksum, little-endian field readers,
status-bit decoding and decoding of physiological data subrecords into
engineering units.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `drirecord.constants` – frame characters (`FRAME_CHAR`, `CTRL_CHAR`,
  `BIT5`), sizes (`HEADER_SIZE`, `MAX_RECORD_SIZE`, `MAX_SUBRECORDS`, …),
  class request masks (`PHDBCL_REQ_ALL` and friends) and the enums
  `DriLevel` (with `year_str()`), `DriMainType`, `PhdbSubrecordType` and
  `PhdbClass`.
- `drirecord.labels` – `EcgLeadType`, `HrSource`, `InvasivePressureLabel`,
  `TemperatureLabel`, `AnesthesiaAgent` (each label enum has
  `display_name()`) and `ParameterGroup`.
- `drirecord.special_values` – the reserved raw values
  (`DATA_INVALID`, `DATA_NOT_UPDATED`, …), `is_invalid`, `check_valid` and
  `get_special_value`, which returns a `SpecialValue` or `None`.
- `drirecord.scaling` – scale factors (`SCALE_PERCENT_100`,
  `SCALE_TEMP_100`, …), `scale_i16` and `scale_valid_i16`, which returns
  `None` for invalid raw values.
- `drirecord.checksum` – `calculate_checksum` (sum of bytes modulo 256) and
  `validate_checksum` (last byte is the checksum of the rest).
- `drirecord.subrecords` – `read_i16`, `read_u16`, `read_u32`,
  `read_valid_i16` (all take an optional offset), `GroupHeader` with
  `parse`, `exists`, `active`, `get_bit`, `get_bits`, and
  `extract_label_bits`.
- `drirecord.status_bits` – frozen dataclasses `EcgStatus`, `NibpStatus`,
  `Co2Status`, `Spo2Status`, `FlowVolStatus` (with `TidalVolumeBase`),
  `GasStatus` and `GenericStatus`, built from group status or label words.
- `drirecord.waveform_types` – `WaveformType`, `WaveformInfo`,
  `get_waveform_info`, `calculate_total_sample_rate` and
  `validate_waveform_set`, which raises `ValueError` when the rates add up
  to more than `MAX_TOTAL_SAMPLE_RATE` (600 samples per second).
- `drirecord.physiological` – `PhysiologicalData` (with `empty` and
  `to_dict`) and `decode_physiological`.
- `drirecord.ui` – terminal helpers: `display_banner`, `confirm`,
  `get_input`, `progress`, `success`, `error`, `info`.
- `drirecord.port_selector` – `list_ports`, `format_port_info` and
  `select_port`, which lists the serial ports found, asks for a number and
  returns the chosen device name (`RuntimeError` if there is none).

## Decoding a physiological subrecord

`decode_physiological` takes a subrecord of at least 1088 bytes: a 4-byte
Unix timestamp followed by the class data. For the basic class it fills in
ECG, invasive pressure 1, NIBP, two temperatures, SpO2, CO2, O2, N2O,
anesthesia agent and flow/volume values; values the monitor marks as invalid
become `None`. Other classes give a record with only timestamp, class and
subtype set. A subrecord that is too short raises `ValueError`.

```python
import struct

from drirecord.constants import PhdbClass, PhdbSubrecordType
from drirecord.physiological import decode_physiological

sub = bytearray(1088)
struct.pack_into("<I", sub, 0, 1700000000)               # timestamp
struct.pack_into("<IHh", sub, 4 + 122, 0x3, 0, 9800)     # SpO2 group: exists+active, 98.00 %

record = decode_physiological(bytes(sub), PhdbSubrecordType.DISPL, PhdbClass.BASIC)
print(record.spo2)                 # 98.0
print(record.spo2_status.active)   # True
print(record.to_dict()["class"])   # "BASIC"
```

`to_dict()` gives a JSON-ready dictionary: the timestamp in ISO 8601 with a
`Z` suffix, enums by name and status flags as nested dictionaries.

## What the package does not do

There is no command-line program. The package does not open or talk to a
serial port beyond listing ports, does not split a byte stream into frames
or undo byte stuffing, does not parse record headers or build request
records, does not decode waveform records, and does not write anything to
files. It provides the pieces listed above for code that does those things.