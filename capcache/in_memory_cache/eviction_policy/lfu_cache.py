"""LFU (Least Frequently Used) cache implementation."""

from typing import Dict, Hashable, List, Optional, Tuple

from capcache.in_memory_cache.base import BaseCache
from capcache.in_memory_cache.entry import CacheEntry
from capcache.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy


class FrequencyNode:
    """Frequency bucket: every key that has been accessed `frequency` times."""

    __slots__ = ("frequency", "items", "prev", "next")

    def __init__(self, frequency: int):
        self.frequency = frequency
        # Insertion ordered, so the key that entered the bucket first is evicted first
        self.items: Dict[Hashable, CacheEntry] = {}
        self.prev: Optional['FrequencyNode'] = None
        self.next: Optional['FrequencyNode'] = None


class FrequencyList:
    """Doubly linked list of frequency buckets in ascending frequency order."""

    def __init__(self):
        # Dummy head and tail nodes
        self._head = FrequencyNode(0)
        self._tail = FrequencyNode(0)
        self._head.next = self._tail
        self._tail.prev = self._head

    @property
    def head(self) -> FrequencyNode:
        return self._head

    def first(self) -> Optional[FrequencyNode]:
        """Return the lowest-frequency bucket, or None if the list is empty."""
        node = self._head.next
        return None if node is self._tail else node

    def next_of(self, node: FrequencyNode) -> Optional[FrequencyNode]:
        nxt = node.next
        return None if nxt is self._tail else nxt

    def insert_after(self, node: FrequencyNode, frequency: int) -> FrequencyNode:
        """
        Create a bucket right after `node`.

        Args:
            node: The bucket (or the dummy head) to insert after
            frequency: Frequency of the new bucket

        Returns:
            The new bucket
        """
        bucket = FrequencyNode(frequency)
        bucket.prev = node
        bucket.next = node.next
        node.next.prev = bucket
        node.next = bucket
        return bucket

    def remove_node(self, node: FrequencyNode) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None

    def clear(self) -> None:
        self._head.next = self._tail
        self._tail.prev = self._head

    def __iter__(self):
        node = self._head.next
        while node is not self._tail:
            yield node
            node = node.next


class LFUCache(BaseCache):
    """
    Thread-safe O(1) LFU (Least Frequently Used) cache implementation.

    Keys sharing an access count live in one frequency bucket, and buckets
    are chained in ascending frequency order. An access moves a key into the
    neighbouring bucket (creating it if needed), so increment, insert and
    evict-minimum never search or sort. Empty buckets are unlinked
    immediately; the head bucket always holds the global minimum frequency.
    """

    policy = EvictionPolicy.LFU

    def __init__(self, capacity: int = 0, max_elements: int = 0, enable_metrics: bool = True):
        self._frequencies = FrequencyList()
        super().__init__(capacity, max_elements, enable_metrics)

    def frequency(self, key: Hashable) -> Optional[int]:
        """Get the access count of a key without counting it as an access."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            return entry.node.frequency

    def buckets(self) -> List[Tuple[int, List[Hashable]]]:
        """
        Snapshot of the frequency buckets.

        Returns:
            (frequency, keys) pairs from the lowest to the highest frequency
        """
        with self._lock:
            return [(node.frequency, list(node.items)) for node in self._frequencies]

    def _track(self, entry: CacheEntry) -> None:
        self._increment_frequency(entry)

    def _touch(self, entry: CacheEntry) -> None:
        self._increment_frequency(entry)

    def _untrack(self, entry: CacheEntry) -> None:
        self._remove_from_frequency_bucket(entry.node, entry.key)
        entry.node = None

    def _victim(self) -> CacheEntry:
        bucket = self._frequencies.first()
        return next(iter(bucket.items.values()))

    def _reset(self) -> None:
        self._frequencies.clear()

    def _increment_frequency(self, entry: CacheEntry) -> None:
        """
        Move an entry into the bucket for its next frequency.

        A new entry (no bucket yet) goes to the frequency-1 bucket at the head.

        Args:
            entry: The entry that was accessed
        """
        current: Optional[FrequencyNode] = entry.node
        if current is None:
            position = self._frequencies.head
            frequency = 1
            target = self._frequencies.first()
        else:
            position = current
            frequency = current.frequency + 1
            target = self._frequencies.next_of(current)

        if target is None or target.frequency != frequency:
            target = self._frequencies.insert_after(position, frequency)

        target.items[entry.key] = entry
        entry.node = target

        if current is not None:
            self._remove_from_frequency_bucket(current, entry.key)

    def _remove_from_frequency_bucket(self, bucket: FrequencyNode, key: Hashable) -> None:
        del bucket.items[key]
        # Clean up empty buckets
        if not bucket.items:
            self._frequencies.remove_node(bucket)
