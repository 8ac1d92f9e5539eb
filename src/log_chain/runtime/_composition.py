"""Composition helpers wiring adapters into the default handler chain."""

from __future__ import annotations

import logging

from log_chain.adapters.console.rich_console import RichConsoleAdapter
from log_chain.adapters.file_sink import TextFileSink
from log_chain.application.use_cases.demo import create_run_demo
from log_chain.application.use_cases.handlers import create_default_chain
from log_chain.domain import Severity

from ._settings import RuntimeSettings
from ._state import LoggingRuntime

logger = logging.getLogger(__name__)


def build_runtime(settings: RuntimeSettings) -> LoggingRuntime:
    """Create adapters and the chain described by ``settings``.

    Building the chain truncates the configured error file.
    """
    console = RichConsoleAdapter(
        stream=settings.stream,
        force_color=settings.force_color,
        no_color=settings.no_color,
        style=settings.warning_style,
    )
    error_sink = TextFileSink(settings.error_file)
    chain = create_default_chain(
        error_sink=error_sink,
        console=console,
        include_catch_all=settings.include_catch_all,
        colorize=not settings.no_color,
        diagnostic=settings.diagnostic_hook,
    )
    logger.debug("handler chain assembled: %s", chain)
    return LoggingRuntime(
        chain=chain,
        console=console,
        error_sink=error_sink,
        run_demo=create_run_demo(chain=chain, error_sink=error_sink),
        settings=settings,
    )


def coerce_severity(severity: str | Severity) -> Severity:
    """Normalise severity inputs (string or enum) into :class:`Severity`.

    Examples
    --------
    >>> coerce_severity("warning") is Severity.WARNING
    True
    >>> coerce_severity(Severity.ERROR) is Severity.ERROR
    True
    """
    if isinstance(severity, Severity):
        return severity
    return Severity.from_name(severity)


__all__ = ["build_runtime", "coerce_severity"]
