"""Extension points a host session exposes to the history core."""

from __future__ import annotations

from typing import Any, Callable, List

Handler = Callable[..., Any]


class EventHook:
    """Ordered list of handlers invoked when the event fires."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: List[Handler] = []

    def register(self, handler: Handler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unregister(self, handler: Handler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def fire(self, *args: Any) -> None:
        for handler in list(self._handlers):
            handler(*args)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


class SessionHost:
    """The interactive environment a history session attaches to.

    ``before_submit`` handlers receive the raw submitted text; ``shutdown``
    handlers run once when the host closes.
    """

    def __init__(self) -> None:
        self.before_submit = EventHook("before_submit")
        self.shutdown = EventHook("shutdown")
        self.closed = False

    def submit(self, raw: str) -> None:
        """Hand a submitted line to every registered handler."""
        self.before_submit.fire(raw)

    def close(self) -> None:
        """Run shutdown handlers. Later calls do nothing."""
        if self.closed:
            return
        self.closed = True
        self.shutdown.fire()
