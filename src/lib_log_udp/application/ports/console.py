"""Console port used by the listener to display received log lines."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Render one received log line to an interactive console."""

    def emit(self, line: str, *, sender: tuple[str, int] | None = None, colorize: bool = True) -> None:
        """Render ``line`` with optional colour control."""


__all__ = ["ConsolePort"]
