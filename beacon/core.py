"""
Core interfaces and data structures for Beacon.

An event fired with an optional RequestContext is rendered into a Message,
queued per scope, and handed to every configured Platform for delivery.
"""

import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from beacon.config import PlatformConfig


class PlatformConfigurationError(ValueError):
    """A platform is missing configuration it needs to deliver."""


class DeliveryError(RuntimeError):
    """A platform failed to hand a message to its external service."""


@dataclass(frozen=True)
class Actor:
    """The user on whose behalf an event fired."""
    username: str
    title: str | None = None


@dataclass(frozen=True)
class RequestContext:
    """
    A request-like scope carrying the acting user.

    Each request_id owns its own delivery queue. Events fired without a
    context share one process-wide queue.
    """
    actor: Actor
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)


@dataclass(frozen=True)
class Message:
    """A formatted notification waiting for delivery."""
    event: str
    context: RequestContext | None
    formatted: str

    @property
    def actor(self) -> Actor | None:
        return self.context.actor if self.context else None


class Platform(ABC):
    """
    Base class for all delivery platforms.

    Platforms are stateless with respect to configuration: the options
    for the platform are passed on every delivery.
    """

    @abstractmethod
    def deliver(
        self,
        context: RequestContext | None,
        options: "PlatformConfig",
        channels: list[str],
        message: Message
    ) -> None:
        """
        Deliver a message to every channel.

        Args:
            context: Request context the message was fired in, if any
            options: This platform's configuration
            channels: De-duplicated destination channels, in order
            message: The message to deliver

        Raises:
            PlatformConfigurationError: If options are missing or incomplete
            DeliveryError: If the external service could not be reached
        """
        raise NotImplementedError


DeliverFn = Callable[
    [RequestContext | None, "PlatformConfig", list[str], Message],
    None
]


class FunctionPlatform(Platform):
    """Adapts a plain delivery function to the Platform interface."""

    def __init__(self, fn: DeliverFn) -> None:
        self.fn = fn

    def deliver(
        self,
        context: RequestContext | None,
        options: "PlatformConfig",
        channels: list[str],
        message: Message
    ) -> None:
        self.fn(context, options, channels, message)

    def __repr__(self) -> str:
        return f"FunctionPlatform({getattr(self.fn, '__name__', self.fn)!r})"


def get_field(obj: Any, name: str, default: Any = None) -> Any:
    """
    Read a field from a mapping or an attribute-bearing object.

    Scalars have no fields, and methods are not fields, so neither
    ``"hello"`` nor ``5`` yields a ``title``.
    """
    if obj is None or isinstance(obj, (str, bytes, int, float)):
        return default
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    value = getattr(obj, name, default)
    return default if callable(value) else value
