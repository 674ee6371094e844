"""
Notification dispatcher that wires events, formatting, queues and platforms.
"""

from collections.abc import Callable, Sequence
from typing import Any

from beacon.channels import resolve_channels
from beacon.config import Config
from beacon.core import DeliverFn, Message, Platform, RequestContext
from beacon.delivery import QueueRegistry
from beacon.doctypes import DocumentTypes
from beacon.events import EventBus, EventSource
from beacon.formatting import TemplateFormatter
from beacon.listeners import add_standard_event_listeners
from beacon.logging_config import get_logger
from beacon.plugins import get_registry
from beacon.registry import PlatformRegistry

logger = get_logger(__name__)

# Maps an event's (context, *args) to [template, *format_args]
MapFn = Callable[..., Sequence[Any]]


class NotificationDispatcher:
    """
    Turns application events into messages and delivers them.

    Events bound with ``notify_on`` are formatted immediately and queued
    on their request's queue (or the global queue); delivery happens on
    background workers, one message at a time per queue.
    """

    def __init__(
        self,
        config: Config,
        bus: EventSource | None = None,
        registry: PlatformRegistry | None = None,
        types: DocumentTypes | None = None
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            config: Validated configuration
            bus: Event source to subscribe to (a private EventBus if omitted)
            registry: Platforms to deliver with (a copy of the built-ins if omitted)
            types: Document type metadata (built from config if omitted)
        """
        self.config = config
        self.bus = bus if bus is not None else EventBus()
        self.platforms = registry if registry is not None else get_registry().copy()
        self.formatter = TemplateFormatter(types or DocumentTypes.from_config(config))
        self.queues = QueueRegistry(self.send_one)

        if config.standard_listeners:
            add_standard_event_listeners(self)

    def add_platform(self, name: str, platform: Platform | DeliverFn) -> None:
        """Register or replace a delivery platform."""
        self.platforms.register(name, platform)

    def notify_on(self, event_name: str, map_fn: MapFn) -> None:
        """
        Send a notification whenever an event fires.

        Args:
            event_name: Event to subscribe to
            map_fn: Called with the event's (context, *args); returns the
                template followed by its format arguments
        """
        def handler(context: RequestContext | None, *args: Any) -> None:
            try:
                template, *format_args = map_fn(context, *args)
                self.notify(event_name, context, template, *format_args)
            except Exception:
                logger.error(
                    "Could not build notification for event '%s'",
                    event_name,
                    exc_info=True
                )

        self.bus.on(event_name, f"notify:{event_name}", handler)
        logger.debug("Notifying on event '%s'", event_name)

    def notify(
        self,
        event_name: str,
        context: RequestContext | None,
        template: str,
        *args: Any
    ) -> Message:
        """Format a message and queue it for delivery without waiting."""
        actor = context.actor if context else None
        message = Message(
            event=event_name,
            context=context,
            formatted=self.formatter.format(actor, template, *args)
        )
        self.queues.enqueue(context, message)
        return message

    def send_one(self, message: Message) -> None:
        """
        Deliver one message to every configured platform, in turn.

        Platforms without configuration are skipped. The first platform
        failure propagates and the remaining platforms are not attempted.
        """
        for name, platform in self.platforms.items():
            options = self.config.platforms.get(name)
            if options is None:
                continue
            channels = resolve_channels(self.config.platforms, name, message)
            logger.debug(
                "Delivering '%s' via %s to %s",
                message.event,
                name,
                ", ".join(channels) or "(no channels)"
            )
            platform.deliver(message.context, options, channels, message)

    def flush(self, timeout: float | None = None) -> bool:
        """Wait for all queued messages to be delivered or dropped."""
        return self.queues.wait_idle(timeout)
