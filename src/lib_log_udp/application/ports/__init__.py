"""Protocols the application layer depends on."""

from __future__ import annotations

from .console import ConsolePort
from .time import ClockPort
from .transport import DatagramTransportPort

__all__ = ["ClockPort", "ConsolePort", "DatagramTransportPort"]
