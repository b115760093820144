"""Base cache interface for in-memory cache implementations."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, Optional, Tuple
import threading

import structlog

from capcache.in_memory_cache.capacity import CapacityOptions
from capcache.in_memory_cache.entry import CacheData, CacheEntry
from capcache.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy
from capcache.metrics import CACHE_EVICTIONS, CACHE_HITS, CACHE_MISSES

logger = structlog.get_logger()


class BaseCache(ABC):
    """
    Abstract base class for cache implementations.

    Owns the entry store, the byte accounting and the capacity limits, and
    drives eviction. Subclasses only maintain their ranking structure through
    the `_track`, `_touch`, `_untrack`, `_victim` and `_reset` hooks, which are
    always called with the instance lock held.
    """

    policy: EvictionPolicy

    def __init__(self, capacity: int = 0, max_elements: int = 0, enable_metrics: bool = True):
        """
        Initialize the cache.

        Args:
            capacity: Maximum total bytes the cache can hold, 0 for unlimited
            max_elements: Maximum number of keys the cache can hold, 0 for unlimited
            enable_metrics: Record hit, miss and eviction counters

        Raises:
            InvalidCapacityError: If capacity is negative
            InvalidMaxElementsError: If max_elements is negative
        """
        self._options = CapacityOptions(capacity, max_elements)
        self._entries: Dict[Hashable, CacheEntry] = {}
        self._size = 0
        self._enable_metrics = enable_metrics
        self._lock = threading.RLock()

        logger.info(
            "Created in-memory cache",
            policy=self.policy.value,
            capacity=capacity,
            max_elements=max_elements
        )

    def get_key(self, key: Hashable) -> Tuple[Optional[Any], bool]:
        """
        Get a value from the cache by key.

        A hit counts as an access and bumps the key's rank, exactly like a set.

        Args:
            key: The key to look up

        Returns:
            A (value, found) pair; (None, False) if the key is not cached
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._record(CACHE_MISSES)
                return None, False

            self._touch(entry)
            self._record(CACHE_HITS)
            return entry.data, True

    def set_key(self, key: Hashable, val: CacheData) -> None:
        """
        Set a key-value pair in the cache.

        Replacing an existing key re-accounts its size and bumps its rank.
        Entries are evicted afterwards until the limits hold again.

        Args:
            key: The key to store
            val: The value to store, must expose size()
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                self._size += entry.replace(val)
                self._touch(entry)
            else:
                entry = CacheEntry(key, val)
                self._entries[key] = entry
                self._size += entry.size
                self._track(entry)

            self._check_capacity()

    def delete_key(self, key: Hashable) -> None:
        """
        Remove a key from the cache. Missing keys are ignored.

        Args:
            key: The key to remove
        """
        with self._lock:
            entry = self._entries.pop(key, None)
            if entry is None:
                return

            self._untrack(entry)
            self._size -= entry.size

    def evict(self, n: int) -> int:
        """
        Evict up to n entries in eviction-policy order.

        Args:
            n: Number of entries to evict

        Returns:
            The number of entries actually evicted
        """
        if n <= 0:
            return 0

        with self._lock:
            return self._evict(n, "explicit")

    def clear(self) -> None:
        """Clear all entries from the cache."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._reset()
            self._size = 0

        logger.info("Cleared in-memory cache", policy=self.policy.value, entries=count)

    def size(self) -> int:
        """
        Get the total declared size of the cached values.

        Returns:
            The number of bytes currently accounted in the cache
        """
        with self._lock:
            return self._size

    def elements_count(self) -> int:
        """
        Get the current number of keys in the cache.

        Returns:
            The number of keys currently in the cache
        """
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.elements_count()

    @property
    def capacity(self) -> int:
        """Get the maximum number of bytes the cache can hold."""
        with self._lock:
            return self._options.capacity

    def set_capacity(self, capacity: int) -> None:
        """
        Change the byte limit, evicting immediately if it is now exceeded.

        Args:
            capacity: New byte limit, 0 for unlimited
        """
        with self._lock:
            self._options.set_capacity(capacity)
            self._check_capacity()

        logger.info("Changed cache capacity", policy=self.policy.value, capacity=capacity)

    @property
    def max_elements(self) -> int:
        """Get the maximum number of keys the cache can hold."""
        with self._lock:
            return self._options.max_elements

    def set_max_elements(self, max_elements: int) -> None:
        """
        Change the element-count limit, evicting immediately if it is now exceeded.

        Args:
            max_elements: New element-count limit, 0 for unlimited
        """
        with self._lock:
            self._options.set_max_elements(max_elements)
            self._check_capacity()

        logger.info("Changed cache max elements", policy=self.policy.value, max_elements=max_elements)

    def full(self) -> bool:
        """Check whether either configured limit is currently met or exceeded."""
        with self._lock:
            return self._options.reached(self._size, len(self._entries))

    def _check_capacity(self) -> None:
        if self._options.unlimited:
            return

        while self._entries and self._options.exceeded(self._size, len(self._entries)):
            self._evict(1, "capacity")

    def _evict(self, n: int, reason: str) -> int:
        evicted = 0
        while evicted < n and self._entries:
            entry = self._victim()
            del self._entries[entry.key]
            self._untrack(entry)
            self._size -= entry.size
            evicted += 1

            logger.debug(
                "Evicted cache entry",
                policy=self.policy.value,
                key=entry.key,
                size=entry.size,
                reason=reason
            )
            if self._enable_metrics:
                CACHE_EVICTIONS.labels(policy=self.policy.value, reason=reason).inc()

        return evicted

    def _record(self, counter) -> None:
        if self._enable_metrics:
            counter.labels(policy=self.policy.value).inc()

    @abstractmethod
    def _track(self, entry: CacheEntry) -> None:
        """Link a newly stored entry into the ranking structure."""
        pass

    @abstractmethod
    def _touch(self, entry: CacheEntry) -> None:
        """Record an access to an entry that is already tracked."""
        pass

    @abstractmethod
    def _untrack(self, entry: CacheEntry) -> None:
        """Unlink an entry from the ranking structure."""
        pass

    @abstractmethod
    def _victim(self) -> CacheEntry:
        """Return the lowest-ranked entry. Only called on a non-empty cache."""
        pass

    @abstractmethod
    def _reset(self) -> None:
        """Drop the whole ranking structure."""
        pass
