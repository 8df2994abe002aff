"""Port for the emit-time clock."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current wall-clock time in nanoseconds since the epoch."""

    def now_ns(self) -> int: ...


__all__ = ["ClockPort"]
