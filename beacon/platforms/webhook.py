"""
Generic JSON webhook platform for Beacon.
"""

import requests

from beacon.config import PlatformConfig
from beacon.core import DeliveryError, Message, Platform, PlatformConfigurationError, RequestContext
from beacon.logging_config import get_logger
from beacon.registry import register_platform

logger = get_logger(__name__)


@register_platform("webhook")
class WebhookPlatform(Platform):
    """
    Sends messages as JSON to arbitrary HTTP endpoints.

    Config:
        webhooks: Mapping of channel name to URL
        url: Fallback URL for channels without their own webhook
        method: HTTP method, POST or PUT (default: POST)
        headers: Optional HTTP headers
    """

    def deliver(
        self,
        context: RequestContext | None,
        options: PlatformConfig | None,
        channels: list[str],
        message: Message
    ) -> None:
        """Send the message payload to each channel's URL."""
        if options is None:
            raise PlatformConfigurationError(
                "The webhook platform must be configured before it can deliver"
            )

        method = str(options.extra("method", "POST")).upper()
        if method not in ("POST", "PUT"):
            raise PlatformConfigurationError(f"Unsupported HTTP method: {method}")
        headers = options.extra("headers") or {}
        actor = message.actor

        for channel in channels:
            url = options.webhooks.get(channel) or options.extra("url")
            if not url:
                raise PlatformConfigurationError(
                    f"No webhook URL configured for channel '{channel}'"
                )

            payload = {
                "event": message.event,
                "text": message.formatted,
                "user": actor.username if actor else None,
                "channel": channel,
            }

            try:
                response = requests.request(method, url, json=payload, headers=headers, timeout=10)
                response.raise_for_status()
            except requests.RequestException as e:
                raise DeliveryError(f"Webhook delivery to '{channel}' failed: {e}") from e

            logger.info("Webhook notification for '%s' sent to %s", message.event, url)


# Export for dynamic importing
__all__ = ["WebhookPlatform"]
