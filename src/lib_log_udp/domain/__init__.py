"""Domain entities and value objects used by the UDP sink."""

from __future__ import annotations

from .destination import Destination
from .errors import AddressError, AlreadyInitializedError, SocketError, UdpLoggerError
from .events import LogEvent
from .levels import LogLevel

__all__ = [
    "AddressError",
    "AlreadyInitializedError",
    "Destination",
    "LogEvent",
    "LogLevel",
    "SocketError",
    "UdpLoggerError",
]
