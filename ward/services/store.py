"""
In-memory TTL store.

Holds short-lived state such as cached snapshots and alert cooldowns.
Entries expire lazily on read; purge_expired() drops them eagerly.

Not thread-safe. All access happens on the event loop thread and no
method awaits, so coroutines never observe a half-updated entry.
"""

import logging
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryTTLStore:
    """
    Dict-backed implementation of the TTLStore protocol.

    The clock is injectable so expiry can be tested without sleeping.

    Usage:
        store = InMemoryTTLStore()
        store.put("key", value, ttl=30)
        store.get("key")  # value, until 30s have passed
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Initialize an empty store.

        Args:
            clock: Returns current time in seconds (monotonic by default)
        """
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def put(self, key: str, value: Any, ttl: float) -> None:
        self._entries[key] = (self._clock() + ttl, value)

    def evict(self, key: str) -> None:
        self._entries.pop(key, None)

    def purge_expired(self) -> int:
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"Purged {len(expired)} expired entries")
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
