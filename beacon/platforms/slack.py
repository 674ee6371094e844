"""
Slack platform for Beacon.
"""

from typing import ClassVar

import requests

from beacon.config import PlatformConfig
from beacon.core import DeliveryError, Message, Platform, PlatformConfigurationError, RequestContext
from beacon.logging_config import get_logger
from beacon.registry import register_platform

logger = get_logger(__name__)


@register_platform("slack")
class SlackPlatform(Platform):
    """
    Posts messages to Slack incoming webhooks.

    Each channel needs its own webhook URL, since a Slack incoming
    webhook is bound to one channel.

    Config:
        channel: Default channel(s)
        events: Per-event channel(s)
        webhooks: Mapping of channel name to incoming webhook URL
        timeout: Request timeout in seconds (default: 10)
    """

    DEFAULT_TIMEOUT: ClassVar[float] = 10

    def deliver(
        self,
        context: RequestContext | None,
        options: PlatformConfig | None,
        channels: list[str],
        message: Message
    ) -> None:
        """Post the message to each channel's webhook in turn."""
        for channel in channels:
            if options is None:
                raise PlatformConfigurationError(
                    "The slack platform must be configured before it can deliver"
                )
            url = options.webhooks.get(channel)
            if not url:
                raise PlatformConfigurationError(
                    f"No slack webhook configured for channel '{channel}'"
                )

            try:
                response = requests.post(
                    url,
                    json={"text": message.formatted},
                    timeout=options.extra("timeout", self.DEFAULT_TIMEOUT)
                )
                response.raise_for_status()
            except requests.RequestException as e:
                raise DeliveryError(f"Slack delivery to '{channel}' failed: {e}") from e

            logger.info("Sent '%s' notification to slack channel %s", message.event, channel)


# Export for dynamic importing
__all__ = ["SlackPlatform"]
