from __future__ import annotations

from pathlib import Path

import pytest

from log_chain import runtime
from log_chain.runtime import RuntimeConfig, build_runtime_settings
from log_chain.runtime import _settings


def test_missing_error_file_is_rejected() -> None:
    with pytest.raises(ValueError, match="error_file must be provided"):
        runtime.init(RuntimeConfig())


def test_blank_error_file_is_rejected() -> None:
    with pytest.raises(ValueError, match="error_file must be provided"):
        build_runtime_settings(RuntimeConfig(error_file="   "))


def test_environment_supplies_error_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    target = tmp_path / "from-env.txt"
    monkeypatch.setenv(_settings.ENV_ERROR_FILE, str(target))

    settings = build_runtime_settings(RuntimeConfig())

    assert settings.error_file == target


def test_environment_overrides_arguments(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(_settings.ENV_ERROR_FILE, str(tmp_path / "env.txt"))
    monkeypatch.setenv(_settings.ENV_CATCH_ALL, "off")
    monkeypatch.setenv(_settings.ENV_NO_COLOR, "yes")
    monkeypatch.setenv(_settings.ENV_WARNING_STYLE, "bold magenta")

    settings = build_runtime_settings(RuntimeConfig(error_file=tmp_path / "arg.txt", include_catch_all=True))

    assert settings.error_file == tmp_path / "env.txt"
    assert settings.include_catch_all is False
    assert settings.no_color is True
    assert settings.warning_style == "bold magenta"


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("no", False), ("", True)])
def test_force_color_env_parsing(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, raw: str, expected: bool) -> None:
    monkeypatch.setenv(_settings.ENV_FORCE_COLOR, raw)

    settings = build_runtime_settings(RuntimeConfig(error_file=tmp_path / "e.txt", force_color=True))

    assert settings.force_color is expected


def test_catch_all_disabled_via_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(_settings.ENV_CATCH_ALL, "0")
    runtime.init(RuntimeConfig(error_file=tmp_path / "e.txt"))

    assert runtime.inspect_runtime().catch_all is False
    assert runtime.dispatch("unclassified", "quiet").dropped
