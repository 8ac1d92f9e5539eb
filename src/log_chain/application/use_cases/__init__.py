"""Use cases composing handler policies from the configured ports."""

from __future__ import annotations

from .demo import DEMO_MESSAGES, DemoStep, create_run_demo
from .handlers import (
    create_default_chain,
    create_error_handler,
    create_fatal_error_handler,
    create_unclassified_handler,
    create_warning_handler,
)

__all__ = [
    "DEMO_MESSAGES",
    "DemoStep",
    "create_default_chain",
    "create_error_handler",
    "create_fatal_error_handler",
    "create_run_demo",
    "create_unclassified_handler",
    "create_warning_handler",
]
