"""Destination value object describing where datagrams are sent.

Purpose
-------
Parse the ``host:port`` strings accepted by :func:`lib_log_udp.init` once, so
adapters only ever see a validated ``(host, port)`` pair.

Contents
--------
* :class:`Destination` frozen dataclass with :meth:`Destination.parse`.

System Role
-----------
Domain layer: no sockets, no name resolution. Resolution happens in
:mod:`lib_log_udp.adapters.udp`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import AddressError

_MAX_PORT = 65535


@dataclass(slots=True, frozen=True)
class Destination:
    """Validated remote endpoint.

    Attributes
    ----------
    host:
        Hostname, IPv4 literal, or IPv6 literal (without brackets).
    port:
        UDP port in ``1..65535``.
    """

    host: str
    port: int

    def __post_init__(self) -> None:
        if not self.host or self.host != self.host.strip():
            raise AddressError(f"Destination host must be a non-empty name, got {self.host!r}")
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise AddressError(f"Destination port must be an integer, got {self.port!r}")
        if not 0 < self.port <= _MAX_PORT:
            raise AddressError(f"Destination port must be positive and at most {_MAX_PORT}, got {self.port}")

    @property
    def is_ipv6_literal(self) -> bool:
        return ":" in self.host

    def __str__(self) -> str:
        if self.is_ipv6_literal:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"

    @classmethod
    def parse(cls, value: "str | tuple[str, int] | Destination") -> "Destination":
        """Build a destination from ``HOST:PORT``, ``[IPV6]:PORT``, or a tuple.

        Examples
        --------
        >>> Destination.parse("127.0.0.1:1999")
        Destination(host='127.0.0.1', port=1999)
        >>> Destination.parse("[::1]:514")
        Destination(host='::1', port=514)
        >>> str(Destination.parse(("logs.example", 9000)))
        'logs.example:9000'
        """
        if isinstance(value, Destination):
            return value
        if isinstance(value, tuple):
            if len(value) != 2:
                raise AddressError(f"Destination tuple must be (host, port), got {value!r}")
            host, port = value
            return cls(host=host, port=port)
        if not isinstance(value, str):
            raise AddressError(f"Destination must be a HOST:PORT string, got {type(value).__name__}")

        text = value.strip()
        if text.startswith("["):
            host, bracket, rest = text[1:].partition("]")
            if not bracket or not rest.startswith(":"):
                raise AddressError(f"Destination {value!r} must look like [IPV6]:PORT")
            port_text = rest[1:]
        else:
            host, separator, port_text = text.rpartition(":")
            if not separator or not host:
                raise AddressError(f"Destination {value!r} must look like HOST:PORT")
            if ":" in host:
                raise AddressError(f"IPv6 destination {value!r} must be written as [IPV6]:PORT")
        if not (port_text.isascii() and port_text.isdigit()):
            raise AddressError(f"Destination port in {value!r} must be an integer")
        return cls(host=host, port=int(port_text))


__all__ = ["Destination"]
