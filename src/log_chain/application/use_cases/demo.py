"""Demo sequence exercising every handler of the default chain.

Purpose
-------
Replay the canonical walkthrough: an unclassified message, a warning, an
error read back from the error file, and a fatal error. Terminal outcomes are
collected instead of raised so the whole sequence always completes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from log_chain.application.ports.file_sink import FileSinkPort
from log_chain.domain import DispatchOutcome, HandlerChain, LogMessage, Severity

DEMO_MESSAGES: tuple[LogMessage, ...] = (
    LogMessage(Severity.UNCLASSIFIED, "some unknown message"),
    LogMessage(Severity.WARNING, "real warning"),
    LogMessage(Severity.ERROR, "some_error"),
    LogMessage(Severity.FATAL_ERROR, "fatal error"),
)


@dataclass(slots=True, frozen=True)
class DemoStep:
    """One dispatched demo message with its outcome.

    ``detail`` holds the failure description for terminal outcomes and the
    line read back from the error file for the error message.
    """

    outcome: DispatchOutcome
    detail: str | None = None

    @property
    def message(self) -> LogMessage:
        return self.outcome.message


def create_run_demo(*, chain: HandlerChain, error_sink: FileSinkPort) -> Callable[[], list[DemoStep]]:
    """Return a callable dispatching :data:`DEMO_MESSAGES` through ``chain``."""

    def run_demo() -> list[DemoStep]:
        steps: list[DemoStep] = []
        for message in DEMO_MESSAGES:
            outcome = chain.dispatch(message)
            detail: str | None = None
            if outcome.failure is not None:
                detail = str(outcome.failure)
            elif message.severity is Severity.ERROR:
                detail = error_sink.read_line()
            steps.append(DemoStep(outcome=outcome, detail=detail))
        return steps

    return run_demo


__all__ = ["DEMO_MESSAGES", "DemoStep", "create_run_demo"]
