from __future__ import annotations

import errno
import socket
import time

import pytest

from lib_log_udp.adapters import udp as udp_module
from lib_log_udp.adapters.listener import DatagramListener
from lib_log_udp.adapters.udp import UdpTransport, resolve_destination
from lib_log_udp.domain.destination import Destination
from lib_log_udp.domain.errors import AddressError, SocketError


def test_open_connects_to_destination(udp_listener: DatagramListener) -> None:
    transport = UdpTransport.open(Destination("127.0.0.1", udp_listener.port))
    try:
        assert transport.remote_address == ("127.0.0.1", udp_listener.port)
        local_host, local_port = transport.local_address
        assert local_host in ("0.0.0.0", "127.0.0.1")
        assert local_port > 0
        assert transport.send(b"hello") == 5
        received = udp_listener.receive()
        assert received is not None
        assert received.text == "hello"
        assert received.sender[1] == local_port
    finally:
        transport.close()


def test_each_send_is_one_datagram(udp_listener: DatagramListener) -> None:
    transport = UdpTransport.open(Destination("127.0.0.1", udp_listener.port))
    try:
        transport.send(b"first")
        transport.send(b"second")
        texts = [udp_listener.receive(), udp_listener.receive()]
    finally:
        transport.close()
    assert [item.text for item in texts if item is not None] == ["first", "second"]


def test_open_resolves_localhost_name(udp_listener: DatagramListener) -> None:
    family, sockaddr = resolve_destination(Destination("localhost", udp_listener.port))
    assert family in (socket.AF_INET, socket.AF_INET6)
    assert sockaddr[1] == udp_listener.port


def test_open_without_listener_succeeds(unused_udp_port: int) -> None:
    transport = UdpTransport.open(Destination("127.0.0.1", unused_udp_port))
    transport.close()
    assert transport.closed


def test_unresolvable_host_raises_address_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def refuse(*_args: object, **_kwargs: object) -> list[object]:
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    monkeypatch.setattr(udp_module.socket, "getaddrinfo", refuse)
    with pytest.raises(AddressError, match="Cannot resolve destination"):
        UdpTransport.open(Destination("nowhere.invalid", 1999))


def test_socket_creation_failure_raises_socket_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def exhausted(*_args: object, **_kwargs: object) -> socket.socket:
        raise OSError(errno.EMFILE, "Too many open files")

    monkeypatch.setattr(udp_module.socket, "socket", exhausted)
    with pytest.raises(SocketError, match="Cannot create UDP socket") as excinfo:
        UdpTransport.open(Destination("127.0.0.1", 1999))
    assert isinstance(excinfo.value.__cause__, OSError)


def test_bind_failure_closes_socket_and_raises_socket_error(monkeypatch: pytest.MonkeyPatch) -> None:
    created: list[object] = []

    class FailingSocket:
        def __init__(self, *_args: object) -> None:
            self.closed = False
            created.append(self)

        def bind(self, _address: object) -> None:
            raise PermissionError(errno.EACCES, "Permission denied")

        def close(self) -> None:
            self.closed = True

    monkeypatch.setattr(udp_module.socket, "socket", FailingSocket)
    with pytest.raises(SocketError, match="Cannot bind or connect"):
        UdpTransport.open(Destination("127.0.0.1", 1999))
    assert created and created[0].closed  # type: ignore[attr-defined]


def test_send_after_close_raises_oserror(udp_listener: DatagramListener) -> None:
    transport = UdpTransport.open(Destination("127.0.0.1", udp_listener.port))
    transport.close()
    transport.close()
    with pytest.raises(OSError):
        transport.send(b"late")


def test_send_to_missing_listener_does_not_block(unused_udp_port: int) -> None:
    transport = UdpTransport.open(Destination("127.0.0.1", unused_udp_port))
    started = time.monotonic()
    try:
        for _ in range(5):
            try:
                transport.send(b"nobody home")
            except OSError:
                pass
    finally:
        transport.close()
    assert time.monotonic() - started < 1.0
