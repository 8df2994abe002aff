"""Adapters connecting the UDP sink to sockets, logging, and consoles."""

from __future__ import annotations

from ._formatting import MAX_DATAGRAM_BYTES
from .console import RichConsoleAdapter
from .handler import SystemClock, UdpLogHandler
from .listener import DatagramListener, ReceivedDatagram
from .udp import UdpTransport

__all__ = [
    "DatagramListener",
    "MAX_DATAGRAM_BYTES",
    "ReceivedDatagram",
    "RichConsoleAdapter",
    "SystemClock",
    "UdpLogHandler",
    "UdpTransport",
]
