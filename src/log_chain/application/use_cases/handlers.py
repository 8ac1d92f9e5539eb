"""Factories for the concrete handler policies and the default chain.

Purpose
-------
Turn the configured ports into :class:`LogHandler` records, one per severity,
and assemble them into the canonical dispatch order.

Contents
--------
* :func:`create_fatal_error_handler` - aborts with :class:`FatalLogError`.
* :func:`create_error_handler` - overwrites the error file with the text.
* :func:`create_warning_handler` - writes the text to the diagnostic stream.
* :func:`create_unclassified_handler` - catch-all raising
  :class:`UnprocessedMessageError`.
* :func:`create_default_chain` - fatal → error → warning → catch-all.

System Role
-----------
Application-layer policy invoked by :func:`log_chain.runtime.init`. Each
factory depends only on ports so tests can swap in recorders.
"""

from __future__ import annotations

from log_chain.application.ports.console import ConsolePort
from log_chain.application.ports.file_sink import FileSinkPort
from log_chain.domain import (
    ChainFailure,
    DiagnosticHook,
    FatalLogError,
    HandlerChain,
    LogHandler,
    LogMessage,
    Severity,
    UnprocessedMessageError,
)


def create_fatal_error_handler() -> LogHandler:
    """Return the handler that turns fatal messages into :class:`FatalLogError`.

    Examples
    --------
    >>> outcome = create_fatal_error_handler().dispatch(LogMessage(Severity.FATAL_ERROR, "fatal error"))
    >>> outcome.failed, str(outcome.failure)
    (True, 'fatal error')
    """

    def fatal(message: LogMessage) -> ChainFailure:
        return FatalLogError(message)

    return LogHandler(Severity.FATAL_ERROR, fatal, name="fatal_error")


def create_error_handler(sink: FileSinkPort) -> LogHandler:
    """Return the handler persisting error messages through ``sink``.

    The sink is reset immediately so the target exists and is empty before
    the first message arrives. A sink that cannot be opened skips the write;
    the message still counts as handled.
    """
    sink.reset()

    def persist(message: LogMessage) -> None:
        sink.write_line(message.text)

    return LogHandler(Severity.ERROR, persist, name="error_file")


def create_warning_handler(console: ConsolePort, *, colorize: bool = True) -> LogHandler:
    """Return the handler echoing warning messages to ``console``."""

    def warn(message: LogMessage) -> None:
        console.emit(message, colorize=colorize)

    return LogHandler(Severity.WARNING, warn, name="warning_console")


def create_unclassified_handler() -> LogHandler:
    """Return the catch-all that makes unclaimed messages fail loudly."""

    def unprocessed(message: LogMessage) -> ChainFailure:
        return UnprocessedMessageError(message)

    return LogHandler(Severity.UNCLASSIFIED, unprocessed, name="catch_all")


def create_default_chain(
    *,
    error_sink: FileSinkPort,
    console: ConsolePort,
    include_catch_all: bool = True,
    colorize: bool = True,
    diagnostic: DiagnosticHook | None = None,
) -> HandlerChain:
    """Assemble the canonical chain: fatal, error, warning, then the catch-all.

    Parameters
    ----------
    error_sink:
        Sink receiving error messages; reset while the chain is built.
    console:
        Diagnostic stream receiving warning messages.
    include_catch_all:
        When ``False`` unclassified messages reach the end of the chain and
        are dropped silently instead of raising.
    colorize:
        Forwarded to the console on each warning.
    diagnostic:
        Optional hook informed about every dispatch outcome.
    """
    handlers = [
        create_fatal_error_handler(),
        create_error_handler(error_sink),
        create_warning_handler(console, colorize=colorize),
    ]
    if include_catch_all:
        handlers.append(create_unclassified_handler())
    return HandlerChain(handlers, diagnostic=diagnostic)


__all__ = [
    "create_default_chain",
    "create_error_handler",
    "create_fatal_error_handler",
    "create_unclassified_handler",
    "create_warning_handler",
]
