"""Stdlib logging handler that emits every enabled record as one UDP datagram.

Purpose
-------
Plug the UDP sink into the :mod:`logging` facade. Applications keep calling
``logging.getLogger(__name__).info(...)``; this handler turns each enabled
record into ``LEVEL [timestamp] message`` and sends it once.

Contents
--------
* :class:`SystemClock` - :class:`ClockPort` backed by :func:`time.time_ns`.
* :class:`UdpLogHandler` - the emitter.

System Role
-----------
Adapter between the facade and
:func:`lib_log_udp.application.use_cases.emit_event.create_emit_event`.
Installed on the root logger by :func:`lib_log_udp.init`.
"""

from __future__ import annotations

import logging
import time
from functools import partial

from lib_log_udp.application.ports import ClockPort, DatagramTransportPort
from lib_log_udp.application.use_cases.emit_event import create_emit_event
from lib_log_udp.domain.events import LogEvent
from lib_log_udp.domain.levels import LogLevel

from ._formatting import MAX_DATAGRAM_BYTES, render_datagram


class SystemClock(ClockPort):
    """Clock port returning the wall-clock time in epoch nanoseconds."""

    def now_ns(self) -> int:
        return time.time_ns()


class UdpLogHandler(logging.Handler):
    """Send enabled log records to a fixed UDP peer, best effort.

    The threshold and the transport are fixed for the lifetime of the
    handler. ``emit`` never raises: send failures are discarded by the emit
    use case, and any other failure while rendering the record (bad format
    arguments, an argument whose ``__str__`` raises) is routed to
    :meth:`logging.Handler.handleError` like any stdlib handler.

    Examples
    --------
    >>> class Recording:
    ...     local_address = ("127.0.0.1", 40000)
    ...     remote_address = ("127.0.0.1", 1999)
    ...     def __init__(self):
    ...         self.sent = []
    ...     def send(self, payload):
    ...         self.sent.append(payload)
    ...         return len(payload)
    ...     def close(self):
    ...         pass
    >>> transport = Recording()
    >>> handler = UdpLogHandler(transport, level=LogLevel.INFO)
    >>> handler.is_enabled(LogLevel.DEBUG), handler.is_enabled(LogLevel.ERROR)
    (False, True)
    >>> record = logging.LogRecord("app", logging.INFO, __file__, 1, "testing %s things", (1,), None)
    >>> handler.emit(record)
    >>> transport.sent[0].startswith(b"INFO [") and transport.sent[0].endswith(b"] testing 1 things")
    True
    """

    def __init__(
        self,
        transport: DatagramTransportPort,
        *,
        level: LogLevel = LogLevel.INFO,
        clock: ClockPort | None = None,
        max_datagram_bytes: int = MAX_DATAGRAM_BYTES,
    ) -> None:
        """Bind the handler to ``transport`` with a fixed minimum ``level``.

        Parameters
        ----------
        transport:
            Connected datagram transport, usually :class:`UdpTransport`.
        level:
            Minimum severity that gets sent.
        clock:
            Source of emit-time timestamps; defaults to :class:`SystemClock`.
        max_datagram_bytes:
            Payload size guard; longer lines are truncated.
        """
        if max_datagram_bytes <= 0:
            raise ValueError("max_datagram_bytes must be positive")
        super().__init__(level=level.to_python_level())
        self._threshold = level
        self._transport = transport
        self._clock = clock or SystemClock()
        self._max_datagram_bytes = max_datagram_bytes
        self._emit = create_emit_event(
            transport=transport,
            render=partial(render_datagram, limit=max_datagram_bytes),
        )

    @property
    def threshold(self) -> LogLevel:
        return self._threshold

    @property
    def transport(self) -> DatagramTransportPort:
        return self._transport

    @property
    def max_datagram_bytes(self) -> int:
        return self._max_datagram_bytes

    def is_enabled(self, level: LogLevel | int) -> bool:
        """Return ``True`` when ``level`` is at least as severe as the threshold."""

        if not isinstance(level, LogLevel):
            level = LogLevel.from_python_level(level)
        return level.is_at_least(self._threshold)

    def emit(self, record: logging.LogRecord) -> None:
        """Send ``record`` as one datagram if its level is enabled."""

        if not self.is_enabled(record.levelno):
            return
        try:
            event = LogEvent(
                level=LogLevel.from_python_level(record.levelno),
                message=record.getMessage(),
                timestamp_ns=self._clock.now_ns(),
                logger_name=record.name,
                module=record.module,
                line=record.lineno,
            )
            self._emit(event)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """Detach from :mod:`logging` bookkeeping and release the socket."""

        try:
            self._transport.close()
        finally:
            super().close()


__all__ = ["SystemClock", "UdpLogHandler"]
