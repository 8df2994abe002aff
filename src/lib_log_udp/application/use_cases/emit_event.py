"""Use case sending one log event as one best-effort datagram.

Purpose
-------
Own the fire-and-forget policy: every event gets exactly one transmission
attempt and send failures are discarded on purpose.

Contents
--------
* :data:`EmitCallable` - signature of the callable returned by the factory.
* :func:`create_emit_event` - factory binding a transport and a renderer.

System Role
-----------
Application-layer step invoked by
:class:`lib_log_udp.adapters.handler.UdpLogHandler` for every enabled record.
"""

from __future__ import annotations

from collections.abc import Callable

from lib_log_udp.application.ports import DatagramTransportPort
from lib_log_udp.domain import LogEvent

EmitCallable = Callable[[LogEvent], bool]


def create_emit_event(
    *,
    transport: DatagramTransportPort,
    render: Callable[[LogEvent], bytes],
) -> EmitCallable:
    """Build the per-event send callable.

    Parameters
    ----------
    transport:
        Connected datagram transport; its ``send`` may raise :class:`OSError`.
    render:
        Callable turning an event into the datagram payload.

    Returns
    -------
    EmitCallable
        Callable returning ``True`` when the datagram left the socket and
        ``False`` when the attempt failed. Callers are free to ignore it.

    Examples
    --------
    >>> from lib_log_udp.domain import LogLevel
    >>> class Refusing:
    ...     def send(self, payload):
    ...         raise ConnectionRefusedError(111, "refused")
    >>> emit = create_emit_event(transport=Refusing(), render=lambda event: event.message.encode())
    >>> emit(LogEvent(LogLevel.INFO, "dropped", 0))
    False
    """

    def emit(event: LogEvent) -> bool:
        payload = render(event)
        try:
            transport.send(payload)
        except OSError:
            # Best effort: a lost datagram is indistinguishable from a dropped one.
            return False
        return True

    return emit


__all__ = ["EmitCallable", "create_emit_event"]
