"""UDP listener used to watch log datagrams arrive live.

Purpose
-------
Give operators (and the test-suite) a small receiver for the lines emitted by
:class:`lib_log_udp.adapters.handler.UdpLogHandler`, the way a generic packet
listener such as ``nc -ul`` would show them.

Contents
--------
* :class:`ReceivedDatagram` - decoded payload plus sender address.
* :class:`DatagramListener` - bound UDP socket with a receive timeout.
"""

from __future__ import annotations

import socket
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from lib_log_udp.domain.errors import SocketError

_RECV_BUFFER = 65_535


@dataclass(slots=True, frozen=True)
class ReceivedDatagram:
    """One datagram as seen by the listener."""

    text: str
    sender: tuple[str, int]


class DatagramListener:
    """Receive UDP datagrams on a local address.

    Examples
    --------
    >>> with DatagramListener("127.0.0.1", 0, timeout=0.05) as listener:
    ...     listener.receive() is None
    True
    """

    def __init__(self, host: str = "127.0.0.1", port: int = 0, *, timeout: float | None = 1.0) -> None:
        family = socket.AF_INET6 if ":" in host else socket.AF_INET
        try:
            self._sock = socket.socket(family, socket.SOCK_DGRAM)
        except OSError as exc:
            raise SocketError(f"Cannot create UDP listener socket: {exc}") from exc
        try:
            self._sock.bind((host, port))
        except OSError as exc:
            self._sock.close()
            raise SocketError(f"Cannot bind UDP listener to {host}:{port}: {exc}") from exc
        self._sock.settimeout(timeout)

    @property
    def address(self) -> tuple[str, int]:
        sockaddr: tuple[Any, ...] = self._sock.getsockname()
        return str(sockaddr[0]), int(sockaddr[1])

    @property
    def port(self) -> int:
        return self.address[1]

    def receive(self) -> ReceivedDatagram | None:
        """Return the next datagram, or ``None`` when the timeout expires."""

        try:
            data, sender = self._sock.recvfrom(_RECV_BUFFER)
        except socket.timeout:
            return None
        return ReceivedDatagram(
            text=data.decode("utf-8", errors="replace"),
            sender=(str(sender[0]), int(sender[1])),
        )

    def __iter__(self) -> Iterator[ReceivedDatagram]:
        """Yield datagrams until one receive times out."""

        while True:
            datagram = self.receive()
            if datagram is None:
                return
            yield datagram

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> "DatagramListener":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()


__all__ = ["DatagramListener", "ReceivedDatagram"]
