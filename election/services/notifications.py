"""Notification bus - hands committed events to external collaborators."""

from collections.abc import Callable, Iterable

from loguru import logger

from election.models.events import Event

Handler = Callable[[Event], None]


class EventBus:
    """Synchronous fan-out of events to subscribed handlers."""

    def __init__(self):
        self._handlers: list[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        self._handlers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        self._handlers.remove(handler)

    def publish(self, events: Iterable[Event]) -> None:
        """Deliver events in order. State is already committed, so a failing
        handler is logged and skipped."""
        for event in events:
            logger.debug("Event {}: {}", event.kind, event.to_dict())
            for handler in list(self._handlers):
                try:
                    handler(event)
                except Exception:
                    logger.opt(exception=True).error("Handler {!r} failed on {}", handler, event.kind)
