"""Explicit TTL cache for player resolutions.

Owners create an instance and pass it to whatever needs it; there is no
process-wide cache. The clock is injected so expiry can be driven in tests.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Dict, Generic, Hashable, Optional, Tuple, TypeVar

V = TypeVar("V")

Clock = Callable[[], float]


class ResolutionCache(Generic[V]):
    """Thread-safe mapping whose entries expire ``ttl_seconds`` after insertion.

    Expired entries are swept on insert at most once per TTL, so keys that are
    never read again do not accumulate. When ``max_entries`` is set, the oldest
    insertions are evicted to stay within it.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Clock = time.monotonic,
        max_entries: Optional[int] = None,
    ):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: Dict[Hashable, Tuple[float, V]] = {}
        self._next_sweep = clock() + ttl_seconds
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[V]:
        """Return the cached value, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    def set(self, key: Hashable, value: V) -> None:
        with self._lock:
            now = self._clock()
            if now >= self._next_sweep:
                self._purge_locked(now)
                self._next_sweep = now + self.ttl_seconds
            # Re-inserting moves the key to the back of the eviction order
            self._entries.pop(key, None)
            self._entries[key] = (now + self.ttl_seconds, value)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    del self._entries[next(iter(self._entries))]

    def get_or_resolve(self, key: Hashable, resolve: Callable[[], V]) -> Tuple[V, bool]:
        """
        Return ``(value, hit)``, calling ``resolve`` and storing its result on a miss.

        ``resolve`` runs outside the lock; concurrent misses on the same key may
        both resolve, and the later result wins.
        """
        cached = self.get(key)
        if cached is not None:
            return cached, True
        value = resolve()
        self.set(key, value)
        return value, False

    def invalidate(self, key: Optional[Hashable] = None) -> int:
        """Drop one key, or every entry when ``key`` is None. Returns the number dropped."""
        with self._lock:
            if key is None:
                dropped = len(self._entries)
                self._entries.clear()
                return dropped
            return 1 if self._entries.pop(key, None) is not None else 0

    def purge_expired(self) -> int:
        """Remove expired entries and return how many were removed."""
        with self._lock:
            return self._purge_locked(self._clock())

    def _purge_locked(self, now: float) -> int:
        expired = [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]
        for k in expired:
            del self._entries[k]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
