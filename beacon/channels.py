"""
Channel resolution: which channels of a platform receive a message.
"""

from collections.abc import Mapping

from beacon.config import ChannelSpec, PlatformConfig
from beacon.core import Message


def one_or_more(spec: ChannelSpec | None) -> list[str]:
    """Normalize a channel or list of channels to a list."""
    if not spec:
        return []
    if isinstance(spec, str):
        return [spec]
    return list(spec)


def resolve_channels(
    platforms: Mapping[str, PlatformConfig],
    platform_name: str,
    message: Message
) -> list[str]:
    """
    Resolve the channels a platform should deliver a message to.

    Default channels come first, then channels configured for the
    message's event. Duplicates are dropped, keeping the first occurrence.

    Args:
        platforms: Platform configurations by name
        platform_name: Platform to resolve for
        message: Message being delivered

    Returns:
        Ordered, de-duplicated channel names (empty if unconfigured)
    """
    options = platforms.get(platform_name)
    if options is None:
        return []

    channels = one_or_more(options.channel)
    channels += one_or_more(options.events.get(message.event))

    return list(dict.fromkeys(channels))
