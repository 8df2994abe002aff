"""Domain event describing one log record on its way to the wire.

Purpose
-------
Provide an immutable snapshot of a stdlib :class:`logging.LogRecord` taken at
emit time, decoupling formatting from the logging facade.

Contents
--------
* :class:`LogEvent` dataclass.

System Role
-----------
Created by :class:`lib_log_udp.adapters.handler.UdpLogHandler` for each
enabled record and consumed by :mod:`lib_log_udp.adapters._formatting`.
Never retained after the datagram has been sent.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from .levels import LogLevel

_NANOS_PER_SECOND = 1_000_000_000


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event.

    Attributes
    ----------
    level:
        :class:`LogLevel` severity of the record.
    message:
        Fully rendered message text (``msg % args``).
    timestamp_ns:
        Nanoseconds since the Unix epoch (UTC) captured when the event was
        emitted, not when the record was created.
    logger_name:
        Name of the logger that produced the record.
    module:
        Optional module name of the call site.
    line:
        Optional line number of the call site.
    """

    level: LogLevel
    message: str
    timestamp_ns: int
    logger_name: str = "root"
    module: str | None = None
    line: int | None = None

    def __post_init__(self) -> None:
        if self.timestamp_ns < 0:
            raise ValueError("timestamp_ns must not be negative")

    @property
    def seconds(self) -> int:
        return self.timestamp_ns // _NANOS_PER_SECOND

    @property
    def nanoseconds(self) -> int:
        """Return the sub-second part of the timestamp in nanoseconds."""
        return self.timestamp_ns % _NANOS_PER_SECOND

    @property
    def timestamp(self) -> datetime:
        """Return the timestamp as an aware UTC datetime (microsecond precision)."""

        whole = datetime.fromtimestamp(self.seconds, tz=timezone.utc)
        return whole.replace(microsecond=self.nanoseconds // 1000)


__all__ = ["LogEvent"]
