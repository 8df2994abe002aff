"""Runtime state container and access helpers.

The root logger accepts one UDP sink per process. The first successful
:func:`lib_log_udp.init` claims the slot; the slot is never handed out again,
not even after :func:`lib_log_udp.shutdown`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from threading import RLock

from lib_log_udp.adapters.handler import UdpLogHandler
from lib_log_udp.adapters.udp import UdpTransport

from ._settings import RuntimeSettings


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of live collaborators assembled by the composition root."""

    settings: RuntimeSettings
    transport: UdpTransport
    handler: UdpLogHandler
    logger: logging.Logger
    previous_level: int
    active: bool = True


_STATE: LoggingRuntime | None = None
_STATE_LOCK = RLock()


@contextmanager
def registration() -> Iterator[None]:
    """Hold the state lock while a caller checks and claims the slot."""

    with _STATE_LOCK:
        yield


def set_runtime(runtime: LoggingRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def current_runtime() -> LoggingRuntime:
    """Return the installed runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_udp.init() must be called before using the logging API")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` once :func:`lib_log_udp.init` has succeeded."""

    with _STATE_LOCK:
        return _STATE is not None


def _reset_runtime_for_testing() -> None:
    """Release the sink and free the registration slot (tests only)."""

    with _STATE_LOCK:
        global _STATE
        runtime = _STATE
        _STATE = None
    if runtime is not None and runtime.active:
        runtime.logger.removeHandler(runtime.handler)
        runtime.logger.setLevel(runtime.previous_level)
        runtime.handler.close()


__all__ = [
    "LoggingRuntime",
    "current_runtime",
    "is_initialised",
    "registration",
    "set_runtime",
]
