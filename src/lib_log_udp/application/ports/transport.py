"""Port describing the connectionless transport behind the sink.

Purpose
-------
Define the narrow contract the emit use case needs from a datagram socket so
tests can swap in recording fakes and the UDP adapter stays replaceable.

Contents
--------
* :class:`DatagramTransportPort` - runtime-checkable protocol.

System Role
-----------
Implemented by :class:`lib_log_udp.adapters.udp.UdpTransport`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DatagramTransportPort(Protocol):
    """Send unaddressed datagrams to a fixed peer."""

    @property
    def local_address(self) -> tuple[str, int]:
        """Return the OS-assigned local address."""

    @property
    def remote_address(self) -> tuple[str, int]:
        """Return the resolved peer address."""

    def send(self, payload: bytes) -> int:
        """Send ``payload`` as one datagram; may raise :class:`OSError`."""

    def close(self) -> None:
        """Release the underlying socket."""


__all__ = ["DatagramTransportPort"]
