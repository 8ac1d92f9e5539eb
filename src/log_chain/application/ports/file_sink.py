"""Port for sinks persisting a single overwritten line of text."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSinkPort(Protocol):
    """Hold the most recent line written by the error handler."""

    @property
    def path(self) -> Path: ...

    def reset(self) -> bool:
        """Create or truncate the target; return ``False`` when it cannot be opened."""

    def write_line(self, text: str) -> bool:
        """Replace the contents with ``text`` plus a line terminator."""

    def read_line(self) -> str | None:
        """Return the stored line without its terminator, if any."""


__all__ = ["FileSinkPort"]
