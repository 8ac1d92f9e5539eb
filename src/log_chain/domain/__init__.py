"""Domain entities and value objects used by the dispatch chain."""

from __future__ import annotations

from .chain import DiagnosticHook, HandlerAction, HandlerChain, LogHandler, dispatch_through
from .errors import UNPROCESSED_PREFIX, ChainFailure, FatalLogError, UnprocessedMessageError
from .messages import LogMessage
from .outcomes import DispatchOutcome, DispatchStatus
from .severity import Severity

__all__ = [
    "ChainFailure",
    "DiagnosticHook",
    "DispatchOutcome",
    "DispatchStatus",
    "FatalLogError",
    "HandlerAction",
    "HandlerChain",
    "LogHandler",
    "LogMessage",
    "Severity",
    "UNPROCESSED_PREFIX",
    "UnprocessedMessageError",
    "dispatch_through",
]
