"""Log level abstraction ordered the way the stdlib logging facade orders it.

Purpose
-------
Offer a domain-specific representation of log severities that lines up with
the numeric levels of :mod:`logging` and adds ``TRACE`` below ``DEBUG`` for
very chatty diagnostics.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and the wire token.
* ``_ALIASES`` constant mapping alternative spellings to canonical names.

System Role
-----------
Used by the runtime to coerce configuration input, by the handler to decide
whether a record is enabled, and by the formatter to render the level token
that prefixes every datagram.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Enumerated logging levels, most verbose first."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name."""

        return self.name.lower()

    @property
    def token(self) -> str:
        """Return the upper-case literal written at the start of each datagram."""

        return self.name

    def to_python_level(self) -> int:
        """Return the :mod:`logging` numeric level matching this level."""

        return self.value

    def is_at_least(self, threshold: "LogLevel") -> bool:
        """Return ``True`` when this level is as severe as ``threshold`` or more.

        Examples
        --------
        >>> LogLevel.ERROR.is_at_least(LogLevel.INFO)
        True
        >>> LogLevel.DEBUG.is_at_least(LogLevel.INFO)
        False
        """

        return self.value >= threshold.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` whose value is exactly ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate any stdlib level integer into the closest member at or below it.

        Custom levels registered by applications (``25`` for example) do not
        have an exact member; they inherit the nearest lower severity. Values
        under ``TRACE`` collapse to ``TRACE``.

        Examples
        --------
        >>> LogLevel.from_python_level(25)
        <LogLevel.INFO: 20>
        >>> LogLevel.from_python_level(1)
        <LogLevel.TRACE: 5>
        """
        chosen = cls.TRACE
        for member in cls:
            if member.value <= level:
                chosen = member
        return chosen


_ALIASES = {
    "WARN": "WARNING",
    "ERR": "ERROR",
    "FATAL": "CRITICAL",
}
# Alternative spellings accepted by :meth:`LogLevel.from_name`.


def register_trace_level() -> None:
    """Teach :mod:`logging` the ``TRACE`` name so records render it."""

    logging.addLevelName(LogLevel.TRACE.value, LogLevel.TRACE.name)


__all__ = ["LogLevel", "register_trace_level"]
