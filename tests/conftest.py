from __future__ import annotations

from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from log_chain import config as log_config
from log_chain import runtime
from log_chain.runtime import _settings

_RUNTIME_ENV_VARS = (
    _settings.ENV_ERROR_FILE,
    _settings.ENV_CATCH_ALL,
    _settings.ENV_FORCE_COLOR,
    _settings.ENV_NO_COLOR,
    _settings.ENV_WARNING_STYLE,
    log_config.DOTENV_ENV_VAR,
)


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test without LOG_CHAIN_* overrides or an installed runtime."""

    for name in _RUNTIME_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    runtime.shutdown()
    log_config._reset_dotenv_state_for_testing()
    yield
    runtime.shutdown()
    log_config._reset_dotenv_state_for_testing()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def error_file(tmp_path: Path) -> Path:
    return tmp_path / "error.txt"


@pytest.fixture
def stream() -> StringIO:
    return StringIO()
