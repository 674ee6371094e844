"""
Console platform for Beacon.
"""

from beacon.config import PlatformConfig
from beacon.core import Message, Platform, RequestContext
from beacon.logging_config import get_logger
from beacon.registry import register_platform

logger = get_logger(__name__)


@register_platform("console")
class ConsolePlatform(Platform):
    """
    Prints messages to stdout.

    Useful for trying out channel routing without real webhooks.

    Config:
        (channel and events only)
    """

    def deliver(
        self,
        context: RequestContext | None,
        options: PlatformConfig | None,
        channels: list[str],
        message: Message
    ) -> None:
        for channel in channels or ["(default)"]:
            logger.info("Console notification for '%s' on %s", message.event, channel)
            print(f"[{channel}] {message.formatted}")


# Export for dynamic importing
__all__ = ["ConsolePlatform"]
