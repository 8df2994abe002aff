"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Print the lines received by the ``listen`` command, coloured by the level
token at the start of each line.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleAdapter` - adapter used by :mod:`lib_log_udp.cli`.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console
from rich.text import Text

from lib_log_udp.adapters._formatting import parse_line
from lib_log_udp.application.ports.console import ConsolePort
from lib_log_udp.domain.levels import LogLevel


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.TRACE: "grey50",
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


class RichConsoleAdapter(ConsolePort):
    """Render received log lines using Rich.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True)
    >>> adapter = RichConsoleAdapter(console=console)
    >>> adapter.emit("INFO [2026-10-19T08:00:00.000000000+00:00] ready", colorize=False)
    >>> 'ready' in console.export_text()
    True
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        show_sender: bool = False,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        self._show_sender = show_sender

    def emit(self, line: str, *, sender: tuple[str, int] | None = None, colorize: bool = True) -> None:
        """Print ``line`` with the style of its level token."""

        parsed = parse_line(line)
        style = ""
        if colorize and not self._no_color and parsed.level is not None:
            style = _STYLE_MAP[parsed.level]
        text = Text()
        if self._show_sender and sender is not None:
            text.append(f"{sender[0]}:{sender[1]} ", style="dim" if style else "")
        text.append(line, style=style)
        self._console.print(text, highlight=False, soft_wrap=True)


__all__ = ["RichConsoleAdapter"]
