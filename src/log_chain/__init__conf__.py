"""Static package metadata surfaced by the CLI banner.

Kept in sync with ``pyproject.toml`` by hand; the values are read at import
time so the banner works without ``importlib.metadata`` lookups.
"""

from __future__ import annotations

from typing import Callable

name = "log_chain"
title = "Severity-routed log handler chain with console, file and fail-fast sinks"
version = "0.1.0"
homepage = "https://github.com/log-chain/log_chain"
author = "log_chain maintainers"
author_email = "maintainers@log-chain.invalid"
shell_command = "log-chain"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner through ``writer`` (``print`` without newline by default).

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for log_chain:
    <BLANKLINE>
    ...
        shell_command = log-chain
    """
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    fields = [
        ("name", name),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", "", f"    {title}", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    emit("\n".join(lines) + "\n")
