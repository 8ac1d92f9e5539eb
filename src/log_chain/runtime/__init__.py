"""Runtime façade that wires the handler chain to its adapters.

Purpose
-------
Expose a stable entry point (`init`, `dispatch`, `handle`, `shutdown`) that
host applications use instead of assembling handlers themselves. The module
translates :class:`RuntimeConfig` plus ``LOG_CHAIN_*`` environment overrides
into the default chain built from domain records, use-case policies, and
adapters.

Contents
--------
* ``init`` – composition root installing the process-wide chain.
* ``dispatch`` / ``handle`` – route one message, as an outcome or raising.
* ``inspect_runtime`` – read-only snapshot of the active wiring.
* ``run_demo`` – replay of the canonical four-message walkthrough.
* ``shutdown`` – drop the active runtime.
* ``summary_info`` – metadata banner used by the CLI.

System Role
-----------
Outer shell of the package: handler policies depend only on ports; the
concrete Rich console and text file sink are created here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from log_chain.adapters.console.rich_console import DEFAULT_STYLE
from log_chain.application.use_cases.demo import DemoStep
from log_chain.domain import DispatchOutcome, LogMessage, Severity

from ._composition import build_runtime, coerce_severity
from ._settings import RuntimeConfig, RuntimeSettings, build_runtime_settings
from ._state import LoggingRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active runtime."""

    error_file: Path
    severities: tuple[Severity, ...]
    catch_all: bool
    force_color: bool
    no_color: bool
    warning_style: str


def init(config: RuntimeConfig) -> None:
    """Compose the handler chain and install it as the active runtime.

    Side Effects
    ------------
    * Truncates (or creates) the configured error file.
    * Replaces any previously installed runtime.

    Raises
    ------
    ValueError
        When no error file is configured.

    Examples
    --------
    >>> import log_chain  # doctest: +SKIP
    >>> log_chain.init(log_chain.RuntimeConfig(error_file="error.txt"))  # doctest: +SKIP
    >>> log_chain.handle("warning", "disk almost full")  # doctest: +SKIP
    >>> log_chain.shutdown()  # doctest: +SKIP
    """
    settings = build_runtime_settings(config)
    set_runtime(build_runtime(settings))


def dispatch(severity: str | Severity, text: str) -> DispatchOutcome:
    """Route one message through the active chain and return the outcome."""

    runtime = current_runtime()
    return runtime.chain.dispatch(LogMessage(coerce_severity(severity), text))


def handle(severity: str | Severity, text: str) -> None:
    """Route one message, raising the :class:`ChainFailure` of terminal handlers."""

    dispatch(severity, text).raise_for_failure()


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    settings = runtime.settings
    return RuntimeSnapshot(
        error_file=settings.error_file,
        severities=runtime.chain.severities,
        catch_all=Severity.UNCLASSIFIED in runtime.chain.severities,
        force_color=settings.force_color,
        no_color=settings.no_color,
        warning_style=settings.warning_style,
    )


def run_demo(error_file: Path | str, *, stream: TextIO | None = None) -> list[DemoStep]:
    """Run the walkthrough against a private chain writing to ``error_file``.

    The active runtime, if any, is left untouched and ``LOG_CHAIN_*``
    variables are ignored: the demo always uses the full default chain.
    """
    settings = RuntimeSettings(
        error_file=Path(error_file).expanduser(),
        include_catch_all=True,
        force_color=False,
        no_color=False,
        warning_style=DEFAULT_STYLE,
        stream=stream,
        diagnostic_hook=None,
    )
    return build_runtime(settings).run_demo()


def shutdown() -> None:
    """Remove the active runtime; later dispatches raise until :func:`init` runs again."""

    clear_runtime()


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from log_chain import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = [
    "LoggingRuntime",
    "RuntimeConfig",
    "RuntimeSettings",
    "RuntimeSnapshot",
    "build_runtime_settings",
    "coerce_severity",
    "dispatch",
    "handle",
    "init",
    "inspect_runtime",
    "is_initialised",
    "run_demo",
    "shutdown",
    "summary_info",
]
