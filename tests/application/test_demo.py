from __future__ import annotations

from log_chain.application.use_cases.demo import DEMO_MESSAGES, create_run_demo
from log_chain.application.use_cases.handlers import create_default_chain
from log_chain.domain import DispatchStatus, LogMessage, Severity

from .test_handlers import _FakeConsole, _FakeSink, _Recorder


def test_demo_replays_every_severity_and_reads_error_back() -> None:
    recorder = _Recorder()
    sink = _FakeSink(recorder)
    chain = create_default_chain(error_sink=sink, console=_FakeConsole(recorder))

    steps = create_run_demo(chain=chain, error_sink=sink)()

    assert [step.message for step in steps] == list(DEMO_MESSAGES)
    assert [step.outcome.status for step in steps] == [
        DispatchStatus.FAILED,
        DispatchStatus.HANDLED,
        DispatchStatus.HANDLED,
        DispatchStatus.FAILED,
    ]
    assert [step.detail for step in steps] == [
        "Unprocessed message: some unknown message",
        None,
        "some_error",
        "fatal error",
    ]


def test_demo_messages_cover_all_severities() -> None:
    assert {message.severity for message in DEMO_MESSAGES} == set(Severity)
    assert all(isinstance(message, LogMessage) for message in DEMO_MESSAGES)
