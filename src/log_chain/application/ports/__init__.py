"""Protocols the handler policies depend on."""

from __future__ import annotations

from .console import ConsolePort
from .file_sink import FileSinkPort

__all__ = ["ConsolePort", "FileSinkPort"]
