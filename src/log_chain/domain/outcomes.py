"""Result value returned by a single dispatch through a handler chain.

Purpose
-------
Let callers pattern-match on what happened to a message instead of relying on
exception unwinding alone. :meth:`DispatchOutcome.raise_for_failure` bridges
back to the exception style for callers that prefer it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ChainFailure
from .messages import LogMessage


class DispatchStatus(Enum):
    """How a dispatch terminated."""

    HANDLED = "handled"
    DROPPED = "dropped"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class DispatchOutcome:
    """Outcome of routing one :class:`LogMessage` through a chain.

    Attributes
    ----------
    message:
        The message that was dispatched.
    status:
        :class:`DispatchStatus` describing the termination.
    handler:
        Name of the handler that accepted the message, ``None`` when dropped.
    failure:
        The :class:`ChainFailure` produced by a terminal handler, if any.
    """

    message: LogMessage
    status: DispatchStatus
    handler: str | None = None
    failure: ChainFailure | None = None

    def __post_init__(self) -> None:
        if (self.status is DispatchStatus.FAILED) != (self.failure is not None):
            raise ValueError("failure must be set exactly when status is FAILED")

    @property
    def handled(self) -> bool:
        return self.status is DispatchStatus.HANDLED

    @property
    def dropped(self) -> bool:
        return self.status is DispatchStatus.DROPPED

    @property
    def failed(self) -> bool:
        return self.status is DispatchStatus.FAILED

    def raise_for_failure(self) -> None:
        """Raise the carried failure; no-op for handled or dropped outcomes."""

        if self.failure is not None:
            raise self.failure


__all__ = ["DispatchOutcome", "DispatchStatus"]
