"""Public package surface of the severity-routed handler chain.

``import log_chain`` exposes the domain types needed to build chains by hand
and the runtime façade (``init``/``dispatch``/``handle``/``shutdown``) that
wires the default chain to a Rich console and a text file sink.
"""

from __future__ import annotations

from .domain import (
    ChainFailure,
    DispatchOutcome,
    DispatchStatus,
    FatalLogError,
    HandlerChain,
    LogHandler,
    LogMessage,
    Severity,
    UnprocessedMessageError,
)
from .runtime import (
    RuntimeConfig,
    dispatch,
    handle,
    init,
    inspect_runtime,
    run_demo,
    shutdown,
    summary_info,
)

__all__ = [
    "ChainFailure",
    "DispatchOutcome",
    "DispatchStatus",
    "FatalLogError",
    "HandlerChain",
    "LogHandler",
    "LogMessage",
    "RuntimeConfig",
    "Severity",
    "UnprocessedMessageError",
    "dispatch",
    "handle",
    "init",
    "inspect_runtime",
    "run_demo",
    "shutdown",
    "summary_info",
]
