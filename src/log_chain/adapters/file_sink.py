"""Text file sink implementing :class:`FileSinkPort`.

Purpose
-------
Persist the most recent error message as a single line, truncating the target
on every write.

Contents
--------
* :class:`TextFileSink` - opens, overwrites and closes the file per call.

System Role
-----------
Sink of the error handler. A target that cannot be opened, or text the
encoding cannot represent, degrades to a skipped write: nothing is raised,
the sink returns ``False`` and logs a warning through :mod:`logging`. Text is
encoded before the file is truncated, so a rejected payload leaves the
previous contents in place. Concurrent writers racing on one path are not
coordinated.
"""

from __future__ import annotations

import logging
from pathlib import Path

from log_chain.application.ports.file_sink import FileSinkPort

logger = logging.getLogger(__name__)


class TextFileSink(FileSinkPort):
    """Overwrite ``path`` with one line of text per write.

    Examples
    --------
    >>> import tempfile
    >>> with tempfile.TemporaryDirectory() as tmp:
    ...     sink = TextFileSink(Path(tmp) / "error.txt")
    ...     sink.write_line("first") and sink.write_line("some_error")
    ...     sink.path.read_text()
    True
    'some_error\\n'
    """

    def __init__(self, path: Path | str, *, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def reset(self) -> bool:
        """Create the file or truncate it to zero length."""

        return self._open_and_write("")

    def write_line(self, text: str) -> bool:
        """Replace the file contents with ``text`` and a trailing newline."""

        return self._open_and_write(text + "\n")

    def read_line(self) -> str | None:
        """Return the stored line without its terminator, ``None`` when unreadable or empty."""

        try:
            content = self._path.read_text(encoding=self._encoding)
        except OSError:
            return None
        lines = content.splitlines()
        return lines[0] if lines else None

    def _open_and_write(self, payload: str) -> bool:
        try:
            data = payload.encode(self._encoding)
            with self._path.open("wb") as handle:
                handle.write(data)
        except (OSError, UnicodeEncodeError) as exc:
            logger.warning("skipping write to %s: %s", self._path, exc)
            return False
        return True


__all__ = ["TextFileSink"]
