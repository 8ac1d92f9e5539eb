from __future__ import annotations

from pathlib import Path

from log_chain.adapters import RichConsoleAdapter, TextFileSink
from log_chain.application.ports import ConsolePort, FileSinkPort

from .test_handlers import _FakeConsole, _FakeSink, _Recorder


def test_adapters_satisfy_ports(tmp_path: Path) -> None:
    assert isinstance(RichConsoleAdapter(), ConsolePort)
    assert isinstance(TextFileSink(tmp_path / "error.txt"), FileSinkPort)


def test_fakes_satisfy_ports() -> None:
    recorder = _Recorder()
    assert isinstance(_FakeConsole(recorder), ConsolePort)
    assert isinstance(_FakeSink(recorder), FileSinkPort)


def test_objects_missing_methods_do_not_satisfy_ports() -> None:
    class _Incomplete:
        def reset(self) -> bool:
            return True

    assert not isinstance(_Incomplete(), FileSinkPort)
    assert not isinstance(_Incomplete(), ConsolePort)
