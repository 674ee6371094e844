"""
Per-scope delivery queues.

Each scope (one request, or the process for system events) owns a FIFO
queue drained by at most one worker thread at a time. Enqueueing never
waits for delivery, and delivery failures never reach the enqueuer.
"""

import threading
import time
from collections import deque
from collections.abc import Callable

from beacon.core import Message, RequestContext
from beacon.logging_config import get_logger

logger = get_logger(__name__)

GLOBAL_SCOPE = "__global__"


class DeliveryQueue:
    """
    Ordered queue of pending messages for one scope.

    Invariants:
    - At most one drain worker runs at a time (guarded by ``sending``)
    - Messages are delivered in enqueue order, one at a time
    - A failed message is logged and dropped, never retried
    """

    def __init__(
        self,
        name: str,
        send_one: Callable[[Message], None],
        on_empty: Callable[["DeliveryQueue"], bool] | None = None
    ) -> None:
        """
        Initialize the queue.

        Args:
            name: Scope identifier, used for logging and thread names
            send_one: Delivers a single message; may raise
            on_empty: Called by the worker when it runs out of messages,
                instead of ``stop_if_empty``; must return True if the
                worker should stop
        """
        self.name = name
        self.send_one = send_one
        self.on_empty = on_empty
        self._messages: deque[Message] = deque()
        self._sending = False
        self._cond = threading.Condition()

    @property
    def sending(self) -> bool:
        with self._cond:
            return self._sending

    @property
    def pending(self) -> int:
        with self._cond:
            return len(self._messages)

    def enqueue(self, message: Message) -> None:
        """Append a message and start draining if no drain is running."""
        with self._cond:
            self._messages.append(message)
            if self._sending:
                return
            self._sending = True

        worker = threading.Thread(
            target=self._drain,
            name=f"beacon-queue-{self.name}",
            daemon=True
        )
        worker.start()

    def stop_if_empty(self) -> bool:
        """
        Clear the sending flag if no messages are left.

        Returns:
            True if the queue is now idle
        """
        with self._cond:
            if self._messages:
                return False
            self._sending = False
            self._cond.notify_all()
            return True

    def _drain(self) -> None:
        while True:
            with self._cond:
                message = self._messages.popleft() if self._messages else None

            if message is None:
                stopped = self.on_empty(self) if self.on_empty else self.stop_if_empty()
                if stopped:
                    return
                continue

            try:
                self.send_one(message)
            except Exception:
                logger.error(
                    "Failed to deliver '%s' notification from queue '%s'",
                    message.event,
                    self.name,
                    exc_info=True
                )

    def wait_idle(self, timeout: float | None = None) -> bool:
        """
        Block until the queue is empty and nothing is being delivered.

        Returns:
            True if the queue went idle, False on timeout
        """
        with self._cond:
            return self._cond.wait_for(
                lambda: not self._sending and not self._messages,
                timeout=timeout
            )


class QueueRegistry:
    """
    Owns one DeliveryQueue per scope, created on first use.

    Requests are scoped by ``RequestContext.request_id``; events without
    a context share the queue registered under GLOBAL_SCOPE. A request's
    queue is dropped as soon as its worker drains it, so the registry
    only holds request queues with work in flight.

    Lock order is registry lock, then queue lock.
    """

    def __init__(self, send_one: Callable[[Message], None]) -> None:
        self.send_one = send_one
        self._queues: dict[str, DeliveryQueue] = {}
        self._lock = threading.Lock()

    @staticmethod
    def scope_of(context: RequestContext | None) -> str:
        return context.request_id if context else GLOBAL_SCOPE

    def enqueue(self, context: RequestContext | None, message: Message) -> DeliveryQueue:
        """
        Queue a message on its context's queue, creating the queue if needed.

        Returns:
            The queue the message was added to
        """
        scope = self.scope_of(context)
        with self._lock:
            queue = self._queues.get(scope)
            if queue is None:
                queue = DeliveryQueue(scope, self.send_one, on_empty=self._release)
                self._queues[scope] = queue
                logger.debug("Created delivery queue '%s'", scope)
            queue.enqueue(message)
        return queue

    def find(self, context: RequestContext | None) -> DeliveryQueue | None:
        """Get the live queue for a context, if it has one."""
        with self._lock:
            return self._queues.get(self.scope_of(context))

    def _release(self, queue: DeliveryQueue) -> bool:
        # Runs on the queue's worker. Holding the registry lock means no
        # enqueue can slip in between the emptiness check and the removal.
        with self._lock:
            if not queue.stop_if_empty():
                return False
            if queue.name != GLOBAL_SCOPE and self._queues.get(queue.name) is queue:
                del self._queues[queue.name]
                logger.debug("Released delivery queue '%s'", queue.name)
            return True

    def scopes(self) -> list[str]:
        with self._lock:
            return list(self._queues)

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until every known queue is idle, sharing one timeout."""
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._lock:
            queues = list(self._queues.values())

        for queue in queues:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            if not queue.wait_idle(remaining):
                return False
        return True
