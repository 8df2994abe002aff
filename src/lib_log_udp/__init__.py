"""Public package surface of the UDP logging sink.

``init`` installs the sink once per process; applications then log through
:mod:`logging` (or the :func:`get` proxy) and every enabled record is sent as
one UDP datagram ``LEVEL [timestamp] message``.
"""

from __future__ import annotations

from .domain import AddressError, AlreadyInitializedError, Destination, LogLevel, SocketError, UdpLoggerError
from .runtime import (
    LoggerProxy,
    RuntimeSnapshot,
    get,
    init,
    inspect_runtime,
    is_initialised,
    shutdown,
    summary_info,
)

__all__ = [
    "AddressError",
    "AlreadyInitializedError",
    "Destination",
    "LogLevel",
    "LoggerProxy",
    "RuntimeSnapshot",
    "SocketError",
    "UdpLoggerError",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "shutdown",
    "summary_info",
]
