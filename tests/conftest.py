from __future__ import annotations

import socket
from collections.abc import Iterator

import pytest

from lib_log_udp.adapters.listener import DatagramListener
from lib_log_udp.runtime import _state


@pytest.fixture(autouse=True)
def reset_runtime() -> Iterator[None]:
    """Free the one-shot registration slot around every test."""

    _state._reset_runtime_for_testing()
    try:
        yield
    finally:
        _state._reset_runtime_for_testing()


@pytest.fixture
def udp_listener() -> Iterator[DatagramListener]:
    with DatagramListener("127.0.0.1", 0, timeout=2.0) as listener:
        yield listener


@pytest.fixture
def unused_udp_port() -> int:
    """Return a loopback UDP port nobody is listening on (right now)."""

    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]
