"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Write warning messages to the diagnostic stream (stderr unless another stream
is injected) through Rich so colour handling follows the terminal.

Contents
--------
* :data:`DEFAULT_STYLE` - style applied to warnings when colour is enabled.
* :class:`RichConsoleAdapter` - adapter constructed by :func:`log_chain.runtime.init`.

System Role
-----------
Sink of the warning handler. Rich decides whether colour applies and renders the
style codes; the text itself is written untouched, followed by a newline.
"""

from __future__ import annotations

from typing import TextIO

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from log_chain.application.ports.console import ConsolePort
from log_chain.domain.messages import LogMessage

DEFAULT_STYLE = "yellow"

_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


class RichConsoleAdapter(ConsolePort):
    """Render warning text using Rich with optional colour."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        stream: TextIO | None = None,
        force_color: bool = False,
        no_color: bool = False,
        style: str = DEFAULT_STYLE,
    ) -> None:
        """Configure the adapter; ``stream`` defaults to stderr when no console is given."""
        if console is not None:
            self._console = console
        elif stream is not None:
            self._console = Console(file=stream, force_terminal=force_color or None, no_color=no_color)
        else:
            self._console = Console(stderr=True, force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        self._style = style

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, message: LogMessage, *, colorize: bool) -> None:
        """Write ``message.text`` and a newline, wrapped in the warning style when colour applies.

        The text bypasses Rich's renderer, which would expand tabs and strip
        control characters.

        Examples
        --------
        >>> from io import StringIO
        >>> from log_chain.domain.severity import Severity
        >>> stream = StringIO()
        >>> RichConsoleAdapter(stream=stream).emit(LogMessage(Severity.WARNING, "[b]real[/b]\\twarning"), colorize=False)
        >>> stream.getvalue()
        '[b]real[/b]\\twarning\\n'
        """
        text = message.text
        color_system = _COLOR_SYSTEMS.get(self._console.color_system or "")
        if colorize and not self._no_color and not self._console.no_color and color_system is not None:
            text = Style.parse(self._style).render(text, color_system=color_system)
        stream = self._console.file
        stream.write(text + "\n")
        stream.flush()


__all__ = ["DEFAULT_STYLE", "RichConsoleAdapter"]
