"""Severity classification steering which handler consumes a message.

Purpose
-------
Offer the closed set of severities understood by the dispatch chain together
with the parsing and presentation helpers used by the CLI and runtime.

Contents
--------
* :class:`Severity` enum with name parsing and presentation metadata.
* ``_ICON_TABLE`` constant mapping severities to console glyphs.
* ``_ALIASES`` constant accepting the legacy spellings of two members.

System Role
-----------
Every :class:`~log_chain.domain.messages.LogMessage` carries exactly one
severity; each handler in a chain is bound to exactly one member.
"""

from __future__ import annotations

from enum import Enum


class Severity(Enum):
    """Fixed severity categories routed by the handler chain."""

    WARNING = "warning"
    ERROR = "error"
    FATAL_ERROR = "fatal_error"
    UNCLASSIFIED = "unclassified"

    @property
    def label(self) -> str:
        """Return the lowercase label used in diagnostics and CLI output."""

        return self.value

    @property
    def icon(self) -> str:
        """Return the unicode icon visualising the severity on consoles."""

        return _ICON_TABLE[self]

    @property
    def is_terminal(self) -> bool:
        """Return ``True`` for severities whose handler aborts processing.

        Examples
        --------
        >>> Severity.FATAL_ERROR.is_terminal, Severity.WARNING.is_terminal
        (True, False)
        """

        return self in (Severity.FATAL_ERROR, Severity.UNCLASSIFIED)

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Parse ``name`` case-insensitively, honouring the legacy aliases.

        Examples
        --------
        >>> Severity.from_name("fatal-error") is Severity.FATAL_ERROR
        True
        >>> Severity.from_name(" Unknown ") is Severity.UNCLASSIFIED
        True
        """
        normalized = name.strip().upper().replace("-", "_").replace(" ", "_")
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown severity: {name!r}") from exc


_ICON_TABLE = {
    Severity.WARNING: "⚠",
    Severity.ERROR: "✖",
    Severity.FATAL_ERROR: "☠",
    Severity.UNCLASSIFIED: "?",
}

_ALIASES = {
    "FATAL": "FATAL_ERROR",
    "FATALERROR": "FATAL_ERROR",
    "UNKNOWN": "UNCLASSIFIED",
    "UNKNOWN_MESSAGE": "UNCLASSIFIED",
    "UNKNOWNMESSAGE": "UNCLASSIFIED",
}


__all__ = ["Severity"]
