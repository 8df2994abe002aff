"""UDP transport adapter implementing :class:`DatagramTransportPort`.

Purpose
-------
Resolve a :class:`Destination`, open an ephemeral UDP socket of the matching
address family, and ``connect`` it so every later ``send`` goes to the fixed
peer without naming it again.

Contents
--------
* :func:`resolve_destination` - ``getaddrinfo`` wrapper raising :class:`AddressError`.
* :class:`UdpTransport` - connected, non-blocking datagram socket.

System Role
-----------
Outer adapter created by the runtime composition root. A UDP ``connect`` only
records the default peer: it performs no handshake and does not fail when
nobody listens on the remote side.
"""

from __future__ import annotations

import logging
import socket
from typing import Any

from lib_log_udp.application.ports.transport import DatagramTransportPort
from lib_log_udp.domain.destination import Destination
from lib_log_udp.domain.errors import AddressError, SocketError

LOGGER = logging.getLogger(__name__)

_WILDCARD = {
    socket.AF_INET: "0.0.0.0",
    socket.AF_INET6: "::",
}


def resolve_destination(destination: Destination) -> tuple[int, tuple[Any, ...]]:
    """Return ``(family, sockaddr)`` for the first UDP address of ``destination``."""

    try:
        candidates = socket.getaddrinfo(
            destination.host,
            destination.port,
            type=socket.SOCK_DGRAM,
            proto=socket.IPPROTO_UDP,
        )
    except (socket.gaierror, UnicodeError) as exc:
        raise AddressError(f"Cannot resolve destination {destination}: {exc}") from exc
    for family, _type, _proto, _canonname, sockaddr in candidates:
        if family in _WILDCARD:
            return family, sockaddr
    raise AddressError(f"Destination {destination} did not resolve to an IPv4 or IPv6 address")


class UdpTransport(DatagramTransportPort):
    """Connected UDP socket sending to a single peer.

    Use :meth:`open` to build one from a :class:`Destination`; the constructor
    accepts an already connected socket so tests can inject their own.
    """

    def __init__(self, sock: socket.socket, *, destination: Destination) -> None:
        self._sock = sock
        self._destination = destination
        self._local_address = _address_pair(sock.getsockname())
        self._remote_address = _address_pair(sock.getpeername())
        self._closed = False

    @classmethod
    def open(cls, destination: Destination) -> "UdpTransport":
        """Resolve ``destination`` and return a connected transport.

        Raises
        ------
        AddressError
            When the host name cannot be resolved.
        SocketError
            When the socket cannot be created, bound, or connected.
        """

        family, sockaddr = resolve_destination(destination)
        try:
            sock = socket.socket(family, socket.SOCK_DGRAM)
        except OSError as exc:
            raise SocketError(f"Cannot create UDP socket for {destination}: {exc}") from exc
        try:
            sock.bind((_WILDCARD[family], 0))
            sock.connect(sockaddr)
            sock.setblocking(False)
            transport = cls(sock, destination=destination)
        except OSError as exc:
            sock.close()
            raise SocketError(f"Cannot bind or connect UDP socket to {destination}: {exc}") from exc
        LOGGER.debug(
            "udp transport ready",
            extra={"local_address": transport.local_address, "remote_address": transport.remote_address},
        )
        return transport

    @property
    def destination(self) -> Destination:
        return self._destination

    @property
    def local_address(self) -> tuple[str, int]:
        return self._local_address

    @property
    def remote_address(self) -> tuple[str, int]:
        return self._remote_address

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, payload: bytes) -> int:
        """Send ``payload`` to the connected peer in one ``send`` call.

        The socket is non-blocking: a full send buffer raises
        :class:`BlockingIOError` instead of stalling the caller, and a closed
        transport raises :class:`OSError`. Both are ``OSError`` subclasses.
        """

        if self._closed:
            raise OSError("UDP transport is closed")
        return self._sock.send(payload)

    def close(self) -> None:
        """Close the socket; safe to call more than once."""

        if self._closed:
            return
        self._closed = True
        self._sock.close()


def _address_pair(sockaddr: tuple[Any, ...]) -> tuple[str, int]:
    """Reduce IPv4/IPv6 socket addresses to ``(host, port)``."""
    return str(sockaddr[0]), int(sockaddr[1])


__all__ = ["UdpTransport", "resolve_destination"]
