"""Domain value describing a single log message.

Purpose
-------
Provide the immutable carrier that travels unchanged from the caller through
every handler of a chain.

System Role
-----------
Sits in the domain layer; handlers, adapters and the runtime only ever read
from it.
"""

from __future__ import annotations

from dataclasses import dataclass

from .severity import Severity


@dataclass(slots=True, frozen=True)
class LogMessage:
    """Immutable pairing of a severity with its text payload.

    Attributes
    ----------
    severity:
        :class:`Severity` selecting the handler that consumes the message.
    text:
        Human-readable payload; written verbatim by the sinks.

    Examples
    --------
    >>> message = LogMessage(Severity.WARNING, "disk almost full")
    >>> message.severity.label, message.text
    ('warning', 'disk almost full')
    """

    severity: Severity
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.severity, Severity):
            raise TypeError(f"severity must be a Severity member, got {self.severity!r}")
        if not isinstance(self.text, str):
            raise TypeError(f"text must be a string, got {type(self.text).__name__}")


__all__ = ["LogMessage"]
