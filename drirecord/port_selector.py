"""Listing and interactive choice of serial ports."""

from __future__ import annotations

from typing import Any

from serial.tools import list_ports as _list_ports

_PROMPT = "Select the serial port connected to your GE monitor"


def list_ports() -> list[Any]:
    """All serial ports present on the system."""
    return list(_list_ports.comports())


def format_port_info(port: Any) -> str:
    """One-line description of a port for display."""
    name = f"{port.device:<20}"
    if getattr(port, "vid", None) is not None:
        manufacturer = port.manufacturer or "Unknown"
        product = port.product or "Unknown"
        serial_number = port.serial_number or ""
        serial_part = f"[{serial_number}]" if serial_number else ""
        return (
            f"{name} │ USB: {manufacturer} - {product} {serial_part} "
            f"(VID:{port.vid:04X} PID:{port.pid:04X})"
        )
    hwid = (getattr(port, "hwid", None) or "").upper()
    if hwid.startswith("PCI"):
        return f"{name} │ PCI Device"
    if "BTHENUM" in hwid or "BLUETOOTH" in hwid:
        return f"{name} │ Bluetooth Device"
    return f"{name} │ Unknown Device"


def select_port() -> str:
    """Let the user choose a port; return its device name."""
    ports = list_ports()
    if not ports:
        raise RuntimeError("No serial ports found! Please check your connections.")

    print("\n🔌 Available Serial Ports:")
    print("─────────────────────────────────────────────────────────")
    for number, port in enumerate(ports):
        print(f"  {number}) {format_port_info(port)}")

    while True:
        answer = input(f"{_PROMPT} [0]: ").strip()
        if not answer:
            return ports[0].device
        try:
            choice = int(answer)
        except ValueError:
            choice = -1
        if 0 <= choice < len(ports):
            return ports[choice].device
        print(f"Please enter a number from 0 to {len(ports) - 1}.")