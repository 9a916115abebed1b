"""Constants, checksum, field readers and physiological data decoding for the Datex-Ohmeda Record Interface (DRI) protocol."""

__version__ = "0.1.0"