"""Hard failures raised when a terminal handler claims a message."""

from __future__ import annotations

from .messages import LogMessage

UNPROCESSED_PREFIX = "Unprocessed message: "


class ChainFailure(RuntimeError):
    """Base class for failures that terminate a dispatch by policy."""

    def __init__(self, log_message: LogMessage, description: str) -> None:
        super().__init__(description)
        self.log_message = log_message

    @property
    def description(self) -> str:
        return str(self)


class FatalLogError(ChainFailure):
    """Raised for fatal messages; the description is the text verbatim.

    Examples
    --------
    >>> from log_chain.domain.severity import Severity
    >>> str(FatalLogError(LogMessage(Severity.FATAL_ERROR, "fatal error")))
    'fatal error'
    """

    def __init__(self, log_message: LogMessage) -> None:
        super().__init__(log_message, log_message.text)


class UnprocessedMessageError(ChainFailure):
    """Raised by the catch-all for messages no specific handler recognised.

    Examples
    --------
    >>> from log_chain.domain.severity import Severity
    >>> str(UnprocessedMessageError(LogMessage(Severity.UNCLASSIFIED, "odd")))
    'Unprocessed message: odd'
    """

    def __init__(self, log_message: LogMessage) -> None:
        super().__init__(log_message, UNPROCESSED_PREFIX + log_message.text)


__all__ = ["ChainFailure", "FatalLogError", "UNPROCESSED_PREFIX", "UnprocessedMessageError"]
