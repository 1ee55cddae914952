"""Click command line interface for manual channel logging.

Purpose
-------
Let operators inspect the policy table, write ad-hoc messages to a channel,
and exercise every channel once with ``demo`` without writing host code.

Contents
--------
* :func:`cli` - root group with traceback and ``.env`` toggles.
* Commands ``info``, ``channels``, ``write``, ``demo``.
* :func:`main` - entry point routed through :mod:`lib_cli_exit_tools`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import click
import lib_cli_exit_tools
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as log_config
from .domain import CHANNEL_POLICIES, Channel
from .runtime import LogEngine

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
CHANNEL_CHOICE = click.Choice([channel.name.lower() for channel in Channel], case_sensitive=False)

_DEMO_MESSAGES: tuple[tuple[Channel, str], ...] = (
    (Channel.ERROR, "demo error message"),
    (Channel.WARNING, "demo warning message"),
    (Channel.SCREEN, "demo screen message"),
    (Channel.NOTE, "demo note message"),
    (Channel.FILE_ONLY, "demo file-only message"),
)


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show the full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (also via {log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags and printing the banner when bare."""

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("channels", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_channels() -> None:
    """Show the routing policy of every channel."""

    table = Table(title="Log channels")
    table.add_column("Channel")
    table.add_column("File")
    table.add_column("Header")
    table.add_column("Stream")
    table.add_column("Status prefix")
    for channel, policy in CHANNEL_POLICIES.items():
        table.add_row(
            channel.name.lower(),
            f".{policy.file_extension}" if policy.file_extension else "-",
            repr(policy.header) if policy.header else "-",
            policy.output_target.value,
            "yes" if policy.add_status_prefix else "no",
        )
    Console().print(table)


def _build_engine(base_path: Path | None, status: str | None, escalate: bool | None) -> LogEngine:
    settings = log_config.build_engine_settings(base_path=base_path, status=status, escalate=escalate)
    return LogEngine.from_settings(settings)


@cli.command("write", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("channel", type=CHANNEL_CHOICE)
@click.argument("message")
@click.option("--base-path", type=click.Path(path_type=Path), default=None, help="Base path of the channel files.")
@click.option("--status", default=None, help="Status prefix for channels that use one.")
@click.option("--newline/--no-newline", default=True, help="Terminate the message with a line break.")
@click.option("--escalate/--no-escalate", default=None, help="Open the error file in a viewer at exit.")
def cli_write(
    channel: str,
    message: str,
    base_path: Path | None,
    status: str | None,
    newline: bool,
    escalate: bool | None,
) -> None:
    """Write MESSAGE to CHANNEL and close the channel files."""

    engine = _build_engine(base_path, status, escalate)
    try:
        engine.write(Channel.from_name(channel), message + ("\n" if newline else ""))
    finally:
        engine.shutdown()


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--base-path", type=click.Path(path_type=Path), default=None, help="Base path of the channel files.")
@click.option("--status", default="demo", show_default=True, help="Status prefix for channels that use one.")
@click.option("--escalate/--no-escalate", default=False, show_default=True, help="Open the error file in a viewer at exit.")
def cli_demo(base_path: Path | None, status: str, escalate: bool) -> None:
    """Write one sample message to every channel."""

    engine = _build_engine(base_path, status, escalate)
    try:
        for channel, text in _DEMO_MESSAGES:
            engine.write(channel, text + "\n")
        files = [engine.path_of(channel) for channel in Channel]
    finally:
        engine.shutdown()
    for path in files:
        if path is not None:
            click.echo(f"wrote {path}")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI through :func:`lib_cli_exit_tools.run_cli` and return the exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
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


__all__ = ["cli", "main", "summary_info"]
