"""Optional ``.env`` loading for the CLI and host applications.

Purpose
-------
Let operators keep ``LOG_CHAIN_*`` settings in a ``.env`` file next to their
project. Loading is opt-in (CLI flag or ``LOG_CHAIN_USE_DOTENV``) and never
overrides variables already present in the environment.

Contents
--------
* :data:`DOTENV_ENV_VAR` - environment toggle consulted by the CLI.
* :func:`should_use_dotenv` - precedence between flag and toggle.
* :func:`enable_dotenv` - locate and load the nearest ``.env`` once.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_CHAIN_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}
_LOADED_PATH: Path | None = None
_ATTEMPTED = False


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI flag wins; otherwise the environment toggle decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search starts in the working directory and walks up its parents.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, ``None`` when none was found.
    """
    global _LOADED_PATH, _ATTEMPTED
    if _ATTEMPTED:
        return _LOADED_PATH
    _ATTEMPTED = True
    found = find_dotenv(usecwd=True)
    if not found:
        logger.debug("no .env file found")
        return None
    load_dotenv(found, override=False)
    _LOADED_PATH = Path(found).resolve()
    logger.debug("loaded environment from %s", _LOADED_PATH)
    return _LOADED_PATH


def _reset_dotenv_state_for_testing() -> None:
    global _LOADED_PATH, _ATTEMPTED
    _LOADED_PATH = None
    _ATTEMPTED = False


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
