"""
A minimal in-process event bus.

Host applications usually bring their own bus; anything offering
``on(event_name, handler_id, handler)`` can be given to the dispatcher.
"""

from collections.abc import Callable
from typing import Any, Protocol

from beacon.core import RequestContext
from beacon.logging_config import get_logger

logger = get_logger(__name__)

Handler = Callable[..., None]


class EventSource(Protocol):
    """What the dispatcher needs from a host event bus."""

    def on(self, event_name: str, handler_id: str, handler: Handler) -> None:
        ...


class EventBus:
    """
    Synchronous publish/subscribe by event name.

    Handlers are called with ``(context, *args)`` in subscription order.
    Subscribing again with the same handler id replaces the handler.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, dict[str, Handler]] = {}

    def on(self, event_name: str, handler_id: str, handler: Handler) -> None:
        self._handlers.setdefault(event_name, {})[handler_id] = handler

    def off(self, event_name: str, handler_id: str) -> None:
        self._handlers.get(event_name, {}).pop(handler_id, None)

    def handlers(self, event_name: str) -> list[str]:
        return list(self._handlers.get(event_name, {}))

    def emit(self, event_name: str, context: RequestContext | None, *args: Any) -> None:
        """
        Fire an event.

        A failing handler is logged and does not stop the others.
        """
        for handler_id, handler in list(self._handlers.get(event_name, {}).items()):
            try:
                handler(context, *args)
            except Exception:
                logger.error(
                    "Handler '%s' failed for event '%s'",
                    handler_id,
                    event_name,
                    exc_info=True
                )
