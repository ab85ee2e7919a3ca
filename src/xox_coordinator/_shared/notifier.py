# Area: Shared
"""
xox_coordinator._shared.notifier — Session Change Broadcasts
============================================================

The coordinator pushes the serialized view of a session to everyone
subscribed to that session's channel. ``ChannelNotifier`` is the
in-process implementation: each subscriber gets its own queue.
"""

from __future__ import annotations
import logging
import threading
from contextlib import contextmanager
from queue import SimpleQueue
from typing import Any, Dict, Iterator, List, Protocol

logger = logging.getLogger("xox_coordinator.notifier")

CHANNEL_PREFIX = "session:"


def channel_key(session_id: Any) -> str:
    """Broadcast channel for a session, e.g. ``"session:42"``."""
    return f"{CHANNEL_PREFIX}{session_id}"


class Notifier(Protocol):
    """Protocol for the push transport."""

    def broadcast(self, payload: str, channel: str) -> None:
        """Deliver ``payload`` to all parties subscribed to ``channel``."""
        ...


class ChannelNotifier:
    """
    In-process pub/sub keyed by channel.

    Usage:
        notifier = ChannelNotifier()
        with notifier.subscribe(channel_key(1)) as queue:
            ...
            payload = queue.get(timeout=1)
    """

    def __init__(self):
        self._queues: Dict[str, List[SimpleQueue]] = {}
        self._lock = threading.Lock()

    @contextmanager
    def subscribe(self, channel: str) -> Iterator[SimpleQueue]:
        queue: SimpleQueue = SimpleQueue()
        with self._lock:
            self._queues.setdefault(channel, []).append(queue)
        try:
            yield queue
        finally:
            with self._lock:
                self._queues[channel].remove(queue)
                if not self._queues[channel]:
                    self._queues.pop(channel, None)

    def subscriber_count(self, channel: str) -> int:
        with self._lock:
            return len(self._queues.get(channel, []))

    def broadcast(self, payload: str, channel: str) -> None:
        with self._lock:
            queues = list(self._queues.get(channel, []))
        for queue in queues:
            queue.put(payload)
        logger.debug(f"Broadcast on {channel} to {len(queues)} subscriber(s)")
