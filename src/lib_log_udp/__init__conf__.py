"""Static package metadata surfaced by the CLI ``info`` command.

Kept in sync with ``pyproject.toml`` by hand; the values are read by
:func:`lib_log_udp.summary_info` and ``lib_log_udp --version``.
"""

from __future__ import annotations

from typing import Callable

name = "lib_log_udp"
title = "Best-effort UDP datagram sink for the Python logging facade"
version = "0.1.0"
author = "bitranox"
shell_command = "lib_log_udp"


def print_info(*, writer: Callable[[str], None] | None = None) -> None:
    """Print the metadata banner, or hand each line to ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_udp:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    for line in lines:
        if writer is None:
            print(line, end="")
        else:
            writer(line)
