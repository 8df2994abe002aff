"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate :class:`RuntimeSettings` into a live :class:`LoggingRuntime`,
attach it to the root logger, and detach it again on shutdown.

Contents
--------
* :func:`build_runtime` / :func:`install_runtime` / :func:`release_runtime`.
* :class:`LoggerProxy` - handle returned by :func:`lib_log_udp.get`.
"""

from __future__ import annotations

import logging
from typing import Any

from lib_log_udp.adapters.handler import UdpLogHandler
from lib_log_udp.adapters.udp import UdpTransport
from lib_log_udp.domain import LogLevel
from lib_log_udp.domain.levels import register_trace_level

from ._settings import RuntimeSettings, coerce_level
from ._state import LoggingRuntime

LOGGER = logging.getLogger(__name__)


__all__ = ["LoggerProxy", "build_runtime", "coerce_level", "install_runtime", "release_runtime"]


def build_runtime(settings: RuntimeSettings) -> LoggingRuntime:
    """Open the transport and build the handler described by ``settings``.

    Nothing is attached to :mod:`logging` yet, so a failure here leaves the
    process untouched.
    """

    transport = UdpTransport.open(settings.destination)
    handler = UdpLogHandler(
        transport,
        level=settings.level,
        max_datagram_bytes=settings.max_datagram_bytes,
    )
    root = logging.getLogger()
    return LoggingRuntime(
        settings=settings,
        transport=transport,
        handler=handler,
        logger=root,
        previous_level=root.level,
    )


def install_runtime(runtime: LoggingRuntime) -> None:
    """Attach the handler to the root logger and apply the global level."""

    LOGGER.debug(
        "installing udp sink for %s at level %s",
        runtime.settings.destination,
        runtime.settings.level.token,
    )
    register_trace_level()
    runtime.logger.addHandler(runtime.handler)
    runtime.logger.setLevel(runtime.settings.level.to_python_level())


def release_runtime(runtime: LoggingRuntime) -> None:
    """Detach the handler, restore the root level, and close the socket."""

    if not runtime.active:
        return
    runtime.logger.removeHandler(runtime.handler)
    runtime.logger.setLevel(runtime.previous_level)
    runtime.handler.close()
    runtime.active = False


class LoggerProxy:
    """Lightweight handle for leveled logging calls.

    Wraps a stdlib :class:`logging.Logger` and adds ``trace`` so callers can
    use every :class:`LogLevel` without importing numeric constants. Messages
    use the stdlib ``%`` style: ``proxy.info("testing %s things", 1)``.
    """

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def is_enabled_for(self, level: str | int | LogLevel) -> bool:
        return self._logger.isEnabledFor(coerce_level(level).to_python_level())

    def log(self, level: str | int | LogLevel, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(coerce_level(level), message, args, kwargs)

    def trace(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.TRACE, message, args, kwargs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.DEBUG, message, args, kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.INFO, message, args, kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.WARNING, message, args, kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.ERROR, message, args, kwargs)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.CRITICAL, message, args, kwargs)

    def _log(self, level: LogLevel, message: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        """Forward to :meth:`logging.Logger.log` keeping the caller's location."""

        # Skip this method and the public helper so records point at the caller.
        kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 2
        self._logger.log(level.to_python_level(), message, *args, **kwargs)
