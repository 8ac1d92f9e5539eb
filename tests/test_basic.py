"""Behavioral tests for the metadata banner and module entry point."""

from __future__ import annotations

import runpy
import sys

import pytest

from log_chain import __init__conf__, summary_info


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert "Info for log_chain" in summary
    assert f"version       = {__init__conf__.version}" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_print_info_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    __init__conf__.print_info()
    assert capsys.readouterr().out == summary_info()


def test_module_entry_point_exits_with_cli_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("log_chain.cli.main", lambda argv=None: 7)
    monkeypatch.setattr(sys, "argv", ["log_chain"])

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("log_chain.__main__", run_name="__main__")

    assert excinfo.value.code == 7
