"""
Beacon - A serialized notification dispatcher for application events.

This package turns discrete application events into human-readable
messages and delivers them to external messaging platforms such as
Slack, grouped by destination channel.
"""

__version__ = "0.1.0"
