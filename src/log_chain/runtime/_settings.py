"""Runtime configuration inputs and their environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from log_chain.adapters.console.rich_console import DEFAULT_STYLE
from log_chain.domain import DiagnosticHook

ENV_ERROR_FILE = "LOG_CHAIN_ERROR_FILE"
ENV_CATCH_ALL = "LOG_CHAIN_CATCH_ALL"
ENV_FORCE_COLOR = "LOG_CHAIN_FORCE_COLOR"
ENV_NO_COLOR = "LOG_CHAIN_NO_COLOR"
ENV_WARNING_STYLE = "LOG_CHAIN_WARNING_STYLE"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RuntimeConfig:
    """Caller-facing options for :func:`log_chain.runtime.init`.

    Parameters
    ----------
    error_file:
        Target of the error handler. Required, either here or through
        ``LOG_CHAIN_ERROR_FILE``.
    include_catch_all:
        Keep the unclassified catch-all at the end of the chain
        (``LOG_CHAIN_CATCH_ALL``).
    force_color, no_color:
        Console colour overrides (``LOG_CHAIN_FORCE_COLOR``/``LOG_CHAIN_NO_COLOR``).
    warning_style:
        Rich style for warnings (``LOG_CHAIN_WARNING_STYLE``).
    stream:
        Diagnostic stream for warnings; ``None`` selects stderr.
    diagnostic_hook:
        Callback informed about each dispatch outcome.
    """

    error_file: Path | str | None = None
    include_catch_all: bool = True
    force_color: bool = False
    no_color: bool = False
    warning_style: str = DEFAULT_STYLE
    stream: TextIO | None = None
    diagnostic_hook: DiagnosticHook | None = None


@dataclass(frozen=True)
class RuntimeSettings:
    """Validated configuration after environment overrides were applied."""

    error_file: Path
    include_catch_all: bool
    force_color: bool
    no_color: bool
    warning_style: str
    stream: TextIO | None
    diagnostic_hook: DiagnosticHook | None


def build_runtime_settings(config: RuntimeConfig) -> RuntimeSettings:
    """Merge ``config`` with the ``LOG_CHAIN_*`` environment variables.

    Environment values take precedence over the supplied configuration.

    Raises
    ------
    ValueError
        When no error file is configured.
    """
    raw_error_file = os.getenv(ENV_ERROR_FILE) or config.error_file
    if raw_error_file is None or not str(raw_error_file).strip():
        raise ValueError(f"error_file must be provided (argument or {ENV_ERROR_FILE})")
    warning_style = os.getenv(ENV_WARNING_STYLE, config.warning_style).strip()
    return RuntimeSettings(
        error_file=Path(raw_error_file).expanduser(),
        include_catch_all=_env_bool(ENV_CATCH_ALL, config.include_catch_all),
        force_color=_env_bool(ENV_FORCE_COLOR, config.force_color),
        no_color=_env_bool(ENV_NO_COLOR, config.no_color),
        warning_style=warning_style or DEFAULT_STYLE,
        stream=config.stream,
        diagnostic_hook=config.diagnostic_hook,
    )


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop('LOG_CHAIN_EXAMPLE_BOOL', None)
    >>> _env_bool('LOG_CHAIN_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_CHAIN_EXAMPLE_BOOL'] = '0'
    >>> _env_bool('LOG_CHAIN_EXAMPLE_BOOL', default=True)
    False
    >>> del os.environ['LOG_CHAIN_EXAMPLE_BOOL']
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


__all__ = ["RuntimeConfig", "RuntimeSettings", "build_runtime_settings"]
