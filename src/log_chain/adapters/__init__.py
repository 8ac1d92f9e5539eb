"""Concrete adapters backing the application ports."""

from __future__ import annotations

from .console.rich_console import RichConsoleAdapter
from .file_sink import TextFileSink

__all__ = ["RichConsoleAdapter", "TextFileSink"]
