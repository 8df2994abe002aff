"""Helpers that turn log events into wire lines and back.

Why
---
The sender and the listener agree on one line layout,
``LEVEL [timestamp] message``. Keeping the rendering and the parsing side by
side guarantees both ends stay in sync.

Contents
--------
* :data:`MAX_DATAGRAM_BYTES` - largest UDP payload over IPv4.
* :func:`format_timestamp` - RFC 3339 with nanoseconds and ``+00:00``.
* :func:`format_line` / :func:`render_datagram` - event to text to bytes.
* :func:`fit_datagram` - size guard truncating on a UTF-8 boundary.
* :func:`parse_line` - split a received line into its parts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone

from lib_log_udp.domain.events import LogEvent
from lib_log_udp.domain.levels import LogLevel

MAX_DATAGRAM_BYTES = 65_507
#: 65535 minus the 8 byte UDP header and the 20 byte IPv4 header.

_LINE_RE = re.compile(r"^(?P<level>[A-Z]+) \[(?P<timestamp>[^\]]*)\] (?P<message>.*)$", re.DOTALL)


def format_timestamp(event: LogEvent) -> str:
    """Return the event time as RFC 3339 with nine fractional digits.

    Examples
    --------
    >>> event = LogEvent(LogLevel.INFO, "msg", 1_700_000_000_123_456_789)
    >>> format_timestamp(event)
    '2023-11-14T22:13:20.123456789+00:00'
    """

    whole = datetime.fromtimestamp(event.seconds, tz=timezone.utc)
    return f"{whole:%Y-%m-%dT%H:%M:%S}.{event.nanoseconds:09d}+00:00"


def format_line(event: LogEvent) -> str:
    """Return ``LEVEL [timestamp] message`` for ``event``.

    Examples
    --------
    >>> format_line(LogEvent(LogLevel.WARNING, "disk almost full", 0))
    'WARNING [1970-01-01T00:00:00.000000000+00:00] disk almost full'
    """

    return f"{event.level.token} [{format_timestamp(event)}] {event.message}"


def fit_datagram(payload: bytes, limit: int = MAX_DATAGRAM_BYTES) -> bytes:
    """Truncate ``payload`` to ``limit`` bytes without splitting a character.

    Examples
    --------
    >>> fit_datagram("héllo".encode("utf-8"), 2)
    b'h'
    >>> fit_datagram(b"short", 10)
    b'short'
    """

    if len(payload) <= limit:
        return payload
    return payload[:limit].decode("utf-8", errors="ignore").encode("utf-8")


def render_datagram(event: LogEvent, limit: int = MAX_DATAGRAM_BYTES) -> bytes:
    """Return the UTF-8 datagram payload for ``event`` within ``limit`` bytes.

    Lone surrogates (undecodable file names read with ``surrogateescape``)
    are written as backslash escapes.

    Examples
    --------
    >>> render_datagram(LogEvent(LogLevel.INFO, "caf\\udce9.txt", 0))
    b'INFO [1970-01-01T00:00:00.000000000+00:00] caf\\\\udce9.txt'
    """

    return fit_datagram(format_line(event).encode("utf-8", errors="backslashreplace"), limit)


@dataclass(slots=True, frozen=True)
class ParsedLine:
    """Parts of a received line; ``level`` is ``None`` for foreign traffic."""

    level: LogLevel | None
    timestamp: str
    message: str


def parse_line(text: str) -> ParsedLine:
    """Split a received datagram into level, timestamp, and message.

    Lines that do not follow the layout come back with ``level=None`` and the
    whole text as message so listeners can still show them.

    Examples
    --------
    >>> parse_line("INFO [2026-10-19T08:00:00.000000000+00:00] ready").level
    <LogLevel.INFO: 20>
    >>> parse_line("garbage").message
    'garbage'
    """

    match = _LINE_RE.match(text)
    if match is None:
        return ParsedLine(level=None, timestamp="", message=text)
    try:
        level = LogLevel.from_name(match.group("level"))
    except ValueError:
        return ParsedLine(level=None, timestamp="", message=text)
    return ParsedLine(level=level, timestamp=match.group("timestamp"), message=match.group("message"))


__all__ = [
    "MAX_DATAGRAM_BYTES",
    "ParsedLine",
    "fit_datagram",
    "format_line",
    "format_timestamp",
    "parse_line",
    "render_datagram",
]
