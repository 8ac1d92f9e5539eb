"""Rich-click command line interface for the handler chain.

Purpose
-------
Let operators push single messages through the default chain and replay the
demo walkthrough from a shell.

Contents
--------
* :func:`cli` - command group with ``info``, ``send`` and ``demo``.
* :func:`main` - runs the group through :mod:`lib_cli_exit_tools` and restores
  traceback preferences afterwards.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from . import __init__conf__
from . import config as log_config
from .domain import Severity
from .runtime import RuntimeConfig, dispatch, init, run_demo, shutdown, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
DEFAULT_DEMO_ERROR_FILE = Path("error.txt")


def _parse_severity(_ctx: click.Context, _param: click.Parameter, value: str) -> Severity:
    try:
        return Severity.from_name(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    __init__conf__.version,
    "--version",
    "-V",
    prog_name=__init__conf__.shell_command,
    message="%(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    default=None,
    help="Show full Python tracebacks for unexpected errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load LOG_CHAIN_* variables from the nearest .env (also via {log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool | None, use_dotenv: bool) -> None:
    """Route log messages through the severity handler chain."""

    if traceback is not None:
        lib_cli_exit_tools.config.traceback = traceback
        lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("send", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("severity", callback=_parse_severity, metavar="SEVERITY")
@click.argument("text")
@click.option(
    "--error-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="File overwritten by error messages. LOG_CHAIN_ERROR_FILE takes precedence when set.",
)
@click.option(
    "--catch-all/--no-catch-all",
    default=True,
    show_default=True,
    help="Fail on unclassified messages instead of dropping them.",
)
def cli_send(severity: Severity, text: str, error_file: Path | None, catch_all: bool) -> None:
    """Dispatch TEXT with SEVERITY (warning, error, fatal_error, unclassified)."""

    try:
        init(RuntimeConfig(error_file=error_file, include_catch_all=catch_all))
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    try:
        outcome = dispatch(severity, text)
    finally:
        shutdown()
    if outcome.failure is not None:
        raise click.ClickException(str(outcome.failure))
    click.echo(f"{outcome.status.value}: {outcome.handler or '-'}")


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--error-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_DEMO_ERROR_FILE,
    show_default=True,
    help="File overwritten by the demo's error message.",
)
def cli_demo(error_file: Path) -> None:
    """Send one message of every severity through a fresh chain."""

    for step in run_demo(error_file):
        message = step.message
        line = f"{message.severity.icon} {message.severity.label:<12} {step.outcome.status.value:<7} {message.text}"
        if step.detail is not None:
            line += f" -> {step.detail}"
        click.echo(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` only last for this run.
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
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
