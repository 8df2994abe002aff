"""Runtime façade that installs the UDP sink behind the logging facade.

Purpose
-------
Expose a stable entry point (``init``, ``get``, ``inspect_runtime``,
``shutdown``) that host applications call instead of wiring handlers and
sockets themselves.

Contents
--------
* ``init`` - composition root; one successful call per process.
* ``get`` - :class:`LoggerProxy` accessor.
* ``inspect_runtime`` - read-only :class:`RuntimeSnapshot`.
* ``shutdown`` - detaches the handler and releases the socket.
* ``summary_info`` - metadata banner shared with the CLI.

System Role
-----------
Outer shell of the library. Everything below it is reachable through this
module, so applications never import adapters directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lib_log_udp.adapters._formatting import MAX_DATAGRAM_BYTES
from lib_log_udp.domain import AlreadyInitializedError, Destination, LogLevel

from ._composition import LoggerProxy, build_runtime, coerce_level, install_runtime, release_runtime
from ._settings import RuntimeSettings, build_runtime_settings
from ._state import current_runtime, is_initialised, registration, set_runtime

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the installed sink."""

    destination: str
    remote_address: tuple[str, int]
    local_address: tuple[str, int]
    level: LogLevel
    max_datagram_bytes: int
    active: bool


__all__ = [
    "LoggerProxy",
    "RuntimeSettings",
    "RuntimeSnapshot",
    "coerce_level",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "shutdown",
    "summary_info",
]


def init(
    destination: str | tuple[str, int] | Destination,
    level: str | int | LogLevel = LogLevel.INFO,
    *,
    max_datagram_bytes: int = MAX_DATAGRAM_BYTES,
) -> None:
    """Install the UDP sink as the process-wide logging backend.

    Why
    ---
    Hosts call ``init`` once during startup. Afterwards every record that
    reaches the root logger at ``level`` or above leaves the process as one
    UDP datagram to ``destination``.

    Inputs
    ------
    destination:
        ``"HOST:PORT"``, ``"[IPV6]:PORT"``, a ``(host, port)`` tuple, or a
        :class:`Destination`.
    level:
        Minimum severity; names are case-insensitive (``"warn"`` works).
    max_datagram_bytes:
        Payload size guard; longer lines are truncated, never fragmented.

    Side Effects
    ------------
    Opens a UDP socket bound to an ephemeral local port and connected to the
    destination, attaches a :class:`UdpLogHandler` to the root logger, and
    sets the root logger level. On failure nothing is installed.

    Raises
    ------
    AlreadyInitializedError
        When a previous call succeeded, even if :func:`shutdown` ran since.
    AddressError
        When ``destination`` cannot be parsed or resolved.
    SocketError
        When the local socket cannot be created, bound, or connected.
    ValueError
        When ``level`` or ``max_datagram_bytes`` is invalid.
    """

    with registration():
        if is_initialised():
            raise AlreadyInitializedError(
                "lib_log_udp.init() can only succeed once per process; the UDP sink is already registered",
            )
        settings = build_runtime_settings(
            destination=destination,
            level=level,
            max_datagram_bytes=max_datagram_bytes,
        )
        runtime = build_runtime(settings)
        install_runtime(runtime)
        set_runtime(runtime)


def get(name: str) -> LoggerProxy:
    """Return a logger proxy for ``name``.

    Raises :class:`RuntimeError` when ``init`` has not been called, so call
    sites fail loudly instead of logging into the void.
    """

    current_runtime()
    return LoggerProxy(name)


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the installed sink."""

    runtime = current_runtime()
    return RuntimeSnapshot(
        destination=str(runtime.settings.destination),
        remote_address=runtime.transport.remote_address,
        local_address=runtime.transport.local_address,
        level=runtime.settings.level,
        max_datagram_bytes=runtime.settings.max_datagram_bytes,
        active=runtime.active,
    )


def shutdown() -> None:
    """Detach the handler from the root logger and close the socket.

    The registration slot stays claimed: a later :func:`init` still raises
    :class:`AlreadyInitializedError`. Calling ``shutdown`` twice is harmless;
    calling it before ``init`` raises :class:`RuntimeError`.
    """

    with registration():
        runtime = current_runtime()
        was_active = runtime.active
        release_runtime(runtime)
    if was_active:
        LOGGER.debug("released udp sink for %s", runtime.settings.destination)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Outputs
    -------
    str
        Multi-line banner ending with a newline.
    """

    from .. import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)
