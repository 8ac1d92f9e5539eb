from __future__ import annotations

from pathlib import Path

import pytest

from log_chain.application.use_cases.handlers import (
    create_default_chain,
    create_error_handler,
    create_fatal_error_handler,
    create_unclassified_handler,
    create_warning_handler,
)
from log_chain.domain import FatalLogError, LogMessage, Severity, UnprocessedMessageError


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict]] = []

    def record(self, name: str, **payload) -> None:
        self.calls.append((name, payload))


class _FakeConsole:
    def __init__(self, recorder: _Recorder) -> None:
        self.recorder = recorder

    def emit(self, message: LogMessage, *, colorize: bool) -> None:
        self.recorder.record("console", text=message.text, colorize=colorize)


class _FakeSink:
    def __init__(self, recorder: _Recorder, path: Path = Path("error.txt")) -> None:
        self.recorder = recorder
        self._path = path
        self.line: str | None = None

    @property
    def path(self) -> Path:
        return self._path

    def reset(self) -> bool:
        self.recorder.record("reset")
        self.line = None
        return True

    def write_line(self, text: str) -> bool:
        self.recorder.record("write", text=text)
        self.line = text
        return True

    def read_line(self) -> str | None:
        return self.line


@pytest.fixture
def recorder() -> _Recorder:
    return _Recorder()


def _default_chain(recorder: _Recorder, *, include_catch_all: bool = True):
    chain = create_default_chain(
        error_sink=_FakeSink(recorder),
        console=_FakeConsole(recorder),
        include_catch_all=include_catch_all,
    )
    recorder.calls.clear()
    return chain


def test_default_chain_order() -> None:
    chain = _default_chain(_Recorder())
    assert chain.severities == (Severity.FATAL_ERROR, Severity.ERROR, Severity.WARNING, Severity.UNCLASSIFIED)
    assert [handler.name for handler in chain] == ["fatal_error", "error_file", "warning_console", "catch_all"]


def test_default_chain_without_catch_all() -> None:
    chain = _default_chain(_Recorder(), include_catch_all=False)
    assert Severity.UNCLASSIFIED not in chain.severities


def test_error_handler_resets_sink_on_construction(recorder: _Recorder) -> None:
    create_error_handler(_FakeSink(recorder))
    assert recorder.calls == [("reset", {})]


def test_warning_reaches_only_the_console(recorder: _Recorder) -> None:
    chain = _default_chain(recorder)

    outcome = chain.dispatch(LogMessage(Severity.WARNING, "real warning"))

    assert outcome.handled and outcome.handler == "warning_console"
    assert recorder.calls == [("console", {"text": "real warning", "colorize": True})]


def test_error_reaches_only_the_file_sink(recorder: _Recorder) -> None:
    chain = _default_chain(recorder)

    outcome = chain.dispatch(LogMessage(Severity.ERROR, "some_error"))

    assert outcome.handled and outcome.handler == "error_file"
    assert recorder.calls == [("write", {"text": "some_error"})]


def test_fatal_error_raises_text_verbatim_without_side_effects(recorder: _Recorder) -> None:
    chain = _default_chain(recorder)

    with pytest.raises(FatalLogError) as excinfo:
        chain.handle(LogMessage(Severity.FATAL_ERROR, "fatal error"))

    assert str(excinfo.value) == "fatal error"
    assert recorder.calls == []


def test_unclassified_raises_with_prefix(recorder: _Recorder) -> None:
    chain = _default_chain(recorder)

    with pytest.raises(UnprocessedMessageError) as excinfo:
        chain.handle(LogMessage(Severity.UNCLASSIFIED, "some unknown message"))

    assert str(excinfo.value) == "Unprocessed message: some unknown message"
    assert recorder.calls == []


def test_unclassified_is_dropped_silently_without_catch_all(recorder: _Recorder) -> None:
    chain = _default_chain(recorder, include_catch_all=False)

    outcome = chain.dispatch(LogMessage(Severity.UNCLASSIFIED, "some unknown message"))
    chain.handle(LogMessage(Severity.UNCLASSIFIED, "some unknown message"))

    assert outcome.dropped
    assert recorder.calls == []


def test_repeated_warnings_are_not_deduplicated(recorder: _Recorder) -> None:
    chain = _default_chain(recorder)
    message = LogMessage(Severity.WARNING, "real warning")

    chain.handle(message)
    chain.handle(message)

    assert [name for name, _ in recorder.calls] == ["console", "console"]


def test_warning_handler_forwards_colorize_flag(recorder: _Recorder) -> None:
    handler = create_warning_handler(_FakeConsole(recorder), colorize=False)
    handler.handle(LogMessage(Severity.WARNING, "plain"))
    assert recorder.calls == [("console", {"text": "plain", "colorize": False})]


@pytest.mark.parametrize(
    "factory, severity",
    [
        (create_fatal_error_handler, Severity.FATAL_ERROR),
        (create_unclassified_handler, Severity.UNCLASSIFIED),
    ],
)
def test_terminal_handlers_forward_other_severities(factory, severity: Severity, recorder: _Recorder) -> None:
    handler = factory()
    handler.set_next(create_warning_handler(_FakeConsole(recorder)))

    assert handler.severity is severity
    handler.handle(LogMessage(Severity.WARNING, "passed along"))

    assert recorder.calls == [("console", {"text": "passed along", "colorize": True})]
