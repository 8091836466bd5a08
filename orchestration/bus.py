"""Event bus - EventBusProtocol and InMemoryEventBus."""

from collections.abc import Callable
from typing import Protocol

from core.infrastructure.logging import get_logger

from .events import Event

EventHandler = Callable[[Event], None]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations."""

    def publish(self, event: Event) -> None:
        """Publish an event.

        Args:
            event: Event to publish
        """
        ...

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Subscribe a handler to an event name.

        Args:
            event_name: Event name to subscribe to
            handler: Handler function
        """
        ...


class InMemoryEventBus(EventBusProtocol):
    """In-memory, synchronous event bus implementation."""

    def __init__(self) -> None:
        """Initialize in-memory event bus."""
        self._handlers: dict[str, list[EventHandler]] = {}
        self._logger = get_logger("orchestration.event_bus")

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Subscribe a handler to an event name.

        Args:
            event_name: Event name to subscribe to
            handler: Handler function
        """
        if event_name not in self._handlers:
            self._handlers[event_name] = []
        self._handlers[event_name].append(handler)

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribed handlers.

        A failing subscriber is logged and does not stop the others.

        Args:
            event: Event to publish
        """
        handlers = self._handlers.get(event.name, [])
        if not handlers:
            return

        self._logger.debug(
            "publishing_event event_name=%s execution_id=%s handler_count=%d",
            event.name,
            event.metadata.execution_id,
            len(handlers),
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception as exc:
                self._logger.error(
                    "handler_error event_name=%s handler=%s error=%s",
                    event.name,
                    handler,
                    exc,
                    exc_info=True,
                )
