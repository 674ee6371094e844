"""
Test doubles shared across the Beacon test suite.
"""

import threading
import time
from dataclasses import dataclass

from beacon.config import PlatformConfig
from beacon.core import Message, Platform, RequestContext


@dataclass
class Delivery:
    """One recorded call to a platform."""
    channels: list[str]
    message: Message
    started: float
    finished: float


class RecordingPlatform(Platform):
    """Platform that records deliveries instead of sending them."""

    def __init__(self, delay: float = 0.0, fail_on: str | None = None) -> None:
        self.delay = delay
        self.fail_on = fail_on
        self.seen: list[Delivery] = []
        self.active = 0
        self.max_active = 0
        self._lock = threading.Lock()

    def deliver(
        self,
        context: RequestContext | None,
        options: PlatformConfig,
        channels: list[str],
        message: Message
    ) -> None:
        with self._lock:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        started = time.monotonic()
        try:
            if self.delay:
                time.sleep(self.delay)
            if self.fail_on and self.fail_on in message.formatted:
                raise RuntimeError(f"refusing to deliver: {message.formatted}")
            with self._lock:
                self.seen.append(Delivery(list(channels), message, started, time.monotonic()))
        finally:
            with self._lock:
                self.active -= 1

    @property
    def texts(self) -> list[str]:
        return [delivery.message.formatted for delivery in self.seen]
