"""Validated configuration for the UDP runtime."""

from __future__ import annotations

from dataclasses import dataclass

from lib_log_udp.adapters._formatting import MAX_DATAGRAM_BYTES
from lib_log_udp.domain import Destination, LogLevel


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Inputs of :func:`lib_log_udp.init` after coercion.

    Attributes
    ----------
    destination:
        Parsed remote endpoint; resolution happens later in the transport.
    level:
        Minimum severity sent and the level applied to the root logger.
    max_datagram_bytes:
        Payload size guard passed to the handler.
    """

    destination: Destination
    level: LogLevel
    max_datagram_bytes: int = MAX_DATAGRAM_BYTES


def coerce_level(level: str | int | LogLevel) -> LogLevel:
    """Normalise level inputs (enum, name, or stdlib number) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warn") is LogLevel.WARNING
    True
    >>> coerce_level(40) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, int) and not isinstance(level, bool):
        return LogLevel.from_numeric(level)
    if isinstance(level, str):
        return LogLevel.from_name(level)
    raise TypeError(f"level must be a LogLevel, name, or number, got {type(level).__name__}")


def build_runtime_settings(
    *,
    destination: str | tuple[str, int] | Destination,
    level: str | int | LogLevel,
    max_datagram_bytes: int = MAX_DATAGRAM_BYTES,
) -> RuntimeSettings:
    """Validate ``init`` arguments.

    Raises
    ------
    AddressError
        When ``destination`` does not parse.
    ValueError
        When ``level`` is unknown or ``max_datagram_bytes`` is out of range.
    """

    parsed = Destination.parse(destination)
    resolved_level = coerce_level(level)
    if not 0 < max_datagram_bytes <= MAX_DATAGRAM_BYTES:
        raise ValueError(f"max_datagram_bytes must be positive and at most {MAX_DATAGRAM_BYTES}")
    return RuntimeSettings(destination=parsed, level=resolved_level, max_datagram_bytes=max_datagram_bytes)


__all__ = ["RuntimeSettings", "build_runtime_settings", "coerce_level"]
