"""Exception hierarchy raised while configuring the UDP sink.

Only construction can fail. Runtime send failures never surface as
exceptions; see :class:`lib_log_udp.adapters.handler.UdpLogHandler`.
"""

from __future__ import annotations


class UdpLoggerError(Exception):
    """Base class for every error raised by :mod:`lib_log_udp`."""


class AddressError(UdpLoggerError, ValueError):
    """The destination could not be parsed or resolved."""


class SocketError(UdpLoggerError, OSError):
    """The local UDP socket could not be created, bound, or connected."""


class AlreadyInitializedError(UdpLoggerError, RuntimeError):
    """A UDP sink has already been installed in this process."""


__all__ = ["AddressError", "AlreadyInitializedError", "SocketError", "UdpLoggerError"]
