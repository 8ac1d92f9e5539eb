"""Handler records and the ordered chain that dispatches messages to them.

Purpose
-------
Model each handler as plain data (the severity it claims, the action it runs,
a name for diagnostics) and route messages to the first handler whose
severity matches. Messages nobody claims are dropped without error.

Contents
--------
* :class:`LogHandler` - handler record with optional successor wiring.
* :class:`HandlerChain` - explicit ordered sequence owned by the composer.
* ``DiagnosticHook`` / ``HandlerAction`` type aliases.

System Role
-----------
Core dispatch policy. Side effects live in the actions supplied by
:mod:`log_chain.application.use_cases.handlers`; this module performs no I/O.
Dispatch is synchronous and unguarded; callers sharing a chain across threads
must serialise access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from .errors import ChainFailure
from .messages import LogMessage
from .outcomes import DispatchOutcome, DispatchStatus
from .severity import Severity

logger = logging.getLogger(__name__)

HandlerAction = Callable[[LogMessage], Optional[ChainFailure]]
DiagnosticHook = Callable[[str, dict[str, Any]], None]


class LogHandler:
    """Bind one :class:`Severity` to the action performed for it.

    Handlers can be wired directly through :meth:`set_next` and dispatched
    from any of them with :meth:`handle`, or collected into a
    :class:`HandlerChain` which ignores the successor links.

    Examples
    --------
    >>> seen = []
    >>> warn = LogHandler(Severity.WARNING, lambda message: seen.append(message.text))
    >>> err = LogHandler(Severity.ERROR, lambda message: seen.append("E:" + message.text))
    >>> warn.set_next(err) is err
    True
    >>> warn.handle(LogMessage(Severity.ERROR, "boom"))
    >>> seen
    ['E:boom']
    """

    __slots__ = ("severity", "name", "_action", "_next")

    def __init__(self, severity: Severity, action: HandlerAction, *, name: str | None = None) -> None:
        if not isinstance(severity, Severity):
            raise TypeError(f"severity must be a Severity member, got {severity!r}")
        self.severity = severity
        self.name = name or f"{severity.label}_handler"
        self._action = action
        self._next: LogHandler | None = None

    def __repr__(self) -> str:
        return f"LogHandler(name={self.name!r}, severity={self.severity.name})"

    @property
    def next(self) -> LogHandler | None:
        """Return the installed successor, if any."""

        return self._next

    def set_next(self, successor: LogHandler | None) -> LogHandler | None:
        """Install ``successor`` as the forwarding target and return it.

        An existing successor is replaced. ``None`` clears the link. Links
        that would make the chain cyclic, which includes the same handler
        appearing twice, raise :class:`ValueError`.
        """
        if successor is not None:
            for handler in successor.iter_chain():
                if handler is self:
                    raise ValueError(f"linking {successor.name!r} after {self.name!r} would create a cycle")
        self._next = successor
        return successor

    def iter_chain(self) -> Iterator[LogHandler]:
        """Yield this handler followed by every linked successor."""

        handler: LogHandler | None = self
        while handler is not None:
            yield handler
            handler = handler._next

    def accepts(self, message: LogMessage) -> bool:
        return message.severity is self.severity

    def run(self, message: LogMessage) -> ChainFailure | None:
        """Perform this handler's action for ``message``."""

        return self._action(message)

    def dispatch(self, message: LogMessage) -> DispatchOutcome:
        """Route ``message`` from this handler along its successor links."""

        return dispatch_through(self.iter_chain(), message)

    def handle(self, message: LogMessage) -> None:
        """Route ``message`` and raise the hard failure of a terminal handler."""

        self.dispatch(message).raise_for_failure()


class HandlerChain:
    """Ordered, inspectable sequence of handlers traversed on dispatch.

    Parameters
    ----------
    handlers:
        Handlers in dispatch order. The same instance may appear only once.
    diagnostic:
        Optional callback receiving ``("handled" | "dropped" | "failed",
        payload)`` after each dispatch.

    Examples
    --------
    >>> chain = HandlerChain([LogHandler(Severity.WARNING, lambda message: None)])
    >>> chain.dispatch(LogMessage(Severity.WARNING, "w")).status.value
    'handled'
    >>> chain.dispatch(LogMessage(Severity.ERROR, "e")).status.value
    'dropped'
    """

    def __init__(self, handlers: Iterable[LogHandler] = (), *, diagnostic: DiagnosticHook | None = None) -> None:
        ordered = tuple(handlers)
        seen: set[int] = set()
        for handler in ordered:
            if id(handler) in seen:
                raise ValueError(f"handler {handler.name!r} appears more than once in the chain")
            seen.add(id(handler))
        self._handlers = ordered
        self._diagnostic = diagnostic

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[LogHandler]:
        return iter(self._handlers)

    def __repr__(self) -> str:
        names = ", ".join(handler.name for handler in self._handlers)
        return f"HandlerChain([{names}])"

    @property
    def handlers(self) -> tuple[LogHandler, ...]:
        return self._handlers

    @property
    def head(self) -> LogHandler | None:
        return self._handlers[0] if self._handlers else None

    @property
    def severities(self) -> tuple[Severity, ...]:
        return tuple(handler.severity for handler in self._handlers)

    def without(self, severity: Severity) -> HandlerChain:
        """Return a new chain lacking every handler bound to ``severity``."""

        remaining = [handler for handler in self._handlers if handler.severity is not severity]
        return HandlerChain(remaining, diagnostic=self._diagnostic)

    def dispatch(self, message: LogMessage) -> DispatchOutcome:
        """Route ``message`` to the first matching handler and report the outcome."""

        outcome = dispatch_through(self._handlers, message)
        if self._diagnostic is not None:
            _notify(self._diagnostic, outcome)
        return outcome

    def handle(self, message: LogMessage) -> None:
        """Route ``message`` and raise the hard failure of a terminal handler."""

        self.dispatch(message).raise_for_failure()


def dispatch_through(handlers: Iterable[LogHandler], message: LogMessage) -> DispatchOutcome:
    """Run the first handler in ``handlers`` accepting ``message``.

    No further handler is consulted once one accepts, whatever its action
    does. Without a match the message is dropped silently.
    """
    for handler in handlers:
        if not handler.accepts(message):
            continue
        failure = handler.run(message)
        if failure is not None:
            logger.debug("dispatch failed", extra={"handler": handler.name, "severity": message.severity.label})
            return DispatchOutcome(message, DispatchStatus.FAILED, handler=handler.name, failure=failure)
        logger.debug("dispatch handled", extra={"handler": handler.name, "severity": message.severity.label})
        return DispatchOutcome(message, DispatchStatus.HANDLED, handler=handler.name)
    logger.debug("dispatch dropped", extra={"severity": message.severity.label})
    return DispatchOutcome(message, DispatchStatus.DROPPED)


def _notify(diagnostic: DiagnosticHook, outcome: DispatchOutcome) -> None:
    payload: dict[str, Any] = {
        "severity": outcome.message.severity.label,
        "text": outcome.message.text,
        "handler": outcome.handler,
    }
    if outcome.failure is not None:
        payload["failure"] = str(outcome.failure)
    try:
        diagnostic(outcome.status.value, payload)
    except Exception:  # noqa: BLE001
        logger.exception("diagnostic hook raised while reporting %s", outcome.status.value)


__all__ = ["DiagnosticHook", "HandlerAction", "HandlerChain", "LogHandler", "dispatch_through"]
