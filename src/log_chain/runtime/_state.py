"""Runtime state container and access helpers."""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import Callable

from log_chain.adapters.console.rich_console import RichConsoleAdapter
from log_chain.adapters.file_sink import TextFileSink
from log_chain.application.use_cases.demo import DemoStep
from log_chain.domain import HandlerChain

from ._settings import RuntimeSettings


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of live collaborators assembled by the composition root."""

    chain: HandlerChain
    console: RichConsoleAdapter
    error_sink: TextFileSink
    run_demo: Callable[[], list[DemoStep]]
    settings: RuntimeSettings


_STATE: LoggingRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: LoggingRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> None:
    """Remove the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> LoggingRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("log_chain.init() must be called before dispatching messages")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`log_chain.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "LoggingRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "set_runtime",
]
