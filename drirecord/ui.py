"""Terminal prompts and status messages."""

from __future__ import annotations

import sys

_BANNER = (
    "\n╔═══════════════════════════════════════════════════════════╗",
    "║                                                           ║",
    "║        GE DRI Protocol Parser - Prototype v0.1.0         ║",
    "║                                                           ║",
    "║  Compatible with: CARESCAPE B650/B850, S/5 Monitors      ║",
    "║                                                           ║",
    "╚═══════════════════════════════════════════════════════════╝\n",
)

_YES = {"y", "yes"}
_NO = {"n", "no"}


def display_banner() -> None:
    """Print the welcome banner."""
    for line in _BANNER:
        print(line)


def confirm(prompt: str) -> bool:
    """Ask a yes/no question; an empty answer means yes."""
    while True:
        answer = input(f"{prompt} [Y/n]: ").strip().lower()
        if not answer or answer in _YES:
            return True
        if answer in _NO:
            return False


def get_input(prompt: str, default: str) -> str:
    """Ask for a line of text; an empty answer gives the default."""
    answer = input(f"{prompt} [{default}]: ").strip()
    return answer or default


def progress(message: str) -> None:
    """Print a progress message."""
    print(f"⏳ {message}")


def success(message: str) -> None:
    """Print a success message."""
    print(f"✅ {message}")


def error(message: str) -> None:
    """Print an error message to standard error."""
    print(f"❌ {message}", file=sys.stderr)


def info(message: str) -> None:
    """Print an informational message."""
    print(f"ℹ️  {message}")