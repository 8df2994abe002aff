"""Command line interface for sending and watching UDP log datagrams.

Purpose
-------
Expose the sink to shells and smoke tests: ``send`` one record, run the
``demo`` loop, or ``listen`` for datagrams on a local port and print them.

Contents
--------
* :func:`cli` - rich-click group with the global ``--traceback`` and
  ``--use-dotenv`` switches.
* :func:`main` - runs the group through :func:`lib_cli_exit_tools.run_cli`
  and restores traceback preferences afterwards.
"""

from __future__ import annotations

import os
import time
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from . import __init__conf__
from . import config as config_module
from .adapters.console import RichConsoleAdapter
from .adapters.listener import DatagramListener
from .domain import LogLevel
from .runtime import get, init, inspect_runtime, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_LEVEL_CHOICES = [level.severity for level in LogLevel] + ["warn"]


def _to_level(_ctx: click.Context, _param: click.Parameter, value: str | None) -> LogLevel | None:
    if value is None:
        return None
    return LogLevel.from_name(value)


_destination_option = click.option(
    "--destination",
    "-d",
    envvar=config_module.DESTINATION_ENV_VAR,
    required=True,
    show_envvar=True,
    help="HOST:PORT (or [IPV6]:PORT) receiving the datagrams.",
)
_threshold_option = click.option(
    "--level",
    "-l",
    "threshold",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    envvar=config_module.LEVEL_ENV_VAR,
    default="info",
    show_default=True,
    show_envvar=True,
    callback=_to_level,
    help="Minimum severity that is sent.",
)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from a nearby .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Apply global switches, then run the sub-command or print the banner."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    env_toggle = os.getenv(config_module.DOTENV_ENV_VAR)
    if config_module.should_use_dotenv(explicit=explicit, env_value=env_toggle):
        config_module.enable_dotenv()

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("send", context_settings=CLICK_CONTEXT_SETTINGS)
@_destination_option
@_threshold_option
@click.option(
    "--at-level",
    "-a",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    default="info",
    show_default=True,
    callback=_to_level,
    help="Severity of the record to send.",
)
@click.argument("message")
def cli_send(destination: str, threshold: LogLevel, at_level: LogLevel, message: str) -> None:
    """Send MESSAGE as a single log record."""

    init(destination, threshold)
    proxy = get("lib_log_udp.cli")
    proxy.log(at_level, message)
    snapshot = inspect_runtime()
    verdict = "emitted" if at_level.is_at_least(threshold) else "filtered"
    click.echo(f"{verdict} {at_level.token} record to {snapshot.destination}")


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@_destination_option
@_threshold_option
@click.option("--count", "-n", type=click.IntRange(min=0), default=10, show_default=True, help="Records to send; 0 runs until interrupted.")
@click.option("--interval", "-i", type=click.FloatRange(min=0.0), default=1.0, show_default=True, help="Seconds between records.")
def cli_demo(destination: str, threshold: LogLevel, count: int, interval: float) -> None:
    """Send ``testing N things`` at INFO level in a loop."""

    init(destination, threshold)
    proxy = get("lib_log_udp.demo")
    sent = 0
    while count == 0 or sent < count:
        sent += 1
        proxy.info("testing %s things", sent)
        if interval and (count == 0 or sent < count):
            time.sleep(interval)
    click.echo(f"emitted {sent} records to {inspect_runtime().destination}")


@cli.command("listen", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--host", default="127.0.0.1", show_default=True, help="Local address to bind.")
@click.option(
    "--port",
    "-p",
    type=click.IntRange(min=0, max=65535),
    envvar=config_module.LISTEN_PORT_ENV_VAR,
    default=1999,
    show_default=True,
    show_envvar=True,
    help="Local UDP port to bind.",
)
@click.option("--count", "-n", type=click.IntRange(min=0), default=0, show_default=True, help="Stop after N datagrams; 0 means no limit.")
@click.option("--timeout", "-t", type=click.FloatRange(min=0.0, min_open=True), default=None, help="Stop after this many idle seconds.")
@click.option("--show-sender", is_flag=True, default=False, help="Prefix each line with the sender address.")
@click.option("--no-color", is_flag=True, default=False, help="Disable colours.")
def cli_listen(host: str, port: int, count: int, timeout: float | None, show_sender: bool, no_color: bool) -> None:
    """Print log datagrams received on HOST:PORT."""

    console = RichConsoleAdapter(no_color=no_color, show_sender=show_sender)
    received = 0
    with DatagramListener(host, port, timeout=timeout) as listener:
        for datagram in listener:
            console.emit(datagram.text, sender=datagram.sender, colorize=not no_color)
            received += 1
            if count and received >= count:
                break


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).
    restore_traceback:
        Put ``lib_cli_exit_tools`` traceback preferences back after the run so
        embedding processes are not affected by ``--traceback``.
    """

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color
