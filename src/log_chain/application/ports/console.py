"""Console port describing the diagnostic stream contract.

Purpose
-------
Define the abstraction for adapters that write warning messages to a
diagnostic output stream, letting the handler policies depend on a narrow
protocol.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol with a single ``emit``
  method supporting optional colour control.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from log_chain.domain.messages import LogMessage


@runtime_checkable
class ConsolePort(Protocol):
    """Write a log message's text to a diagnostic stream."""

    def emit(self, message: LogMessage, *, colorize: bool) -> None:
        """Write ``message.text`` followed by a line terminator."""


__all__ = ["ConsolePort"]
