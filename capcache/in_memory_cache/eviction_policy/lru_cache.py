"""LRU (Least Recently Used) cache implementation."""

from typing import Hashable, List, Optional

from capcache.in_memory_cache.base import BaseCache
from capcache.in_memory_cache.entry import CacheEntry
from capcache.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy


class Node:
    """Node for doubly linked list in LRU cache."""

    __slots__ = ("entry", "prev", "next")

    def __init__(self, entry: Optional[CacheEntry]):
        self.entry = entry
        self.prev: Optional['Node'] = None
        self.next: Optional['Node'] = None


class LRUCache(BaseCache):
    """
    Thread-safe LRU (Least Recently Used) cache implementation.

    Uses a hash map for O(1) key lookup and a doubly linked list
    to maintain access order for O(1) eviction. The head of the list
    is the most recently used entry, the tail is the next victim.
    """

    policy = EvictionPolicy.LRU

    def __init__(self, capacity: int = 0, max_elements: int = 0, enable_metrics: bool = True):
        # Dummy head and tail nodes for easier list manipulation
        self._head = Node(None)
        self._tail = Node(None)
        self._head.next = self._tail
        self._tail.prev = self._head
        super().__init__(capacity, max_elements, enable_metrics)

    def keys(self) -> List[Hashable]:
        """
        List the cached keys without touching their recency.

        Returns:
            Keys ordered from most to least recently used
        """
        with self._lock:
            keys = []
            node = self._head.next
            while node is not self._tail:
                keys.append(node.entry.key)
                node = node.next
            return keys

    def _track(self, entry: CacheEntry) -> None:
        node = Node(entry)
        entry.node = node
        self._add_to_head(node)

    def _touch(self, entry: CacheEntry) -> None:
        # Move to head (most recently used)
        self._remove_node(entry.node)
        self._add_to_head(entry.node)

    def _untrack(self, entry: CacheEntry) -> None:
        self._remove_node(entry.node)
        entry.node = None

    def _victim(self) -> CacheEntry:
        return self._tail.prev.entry

    def _reset(self) -> None:
        self._head.next = self._tail
        self._tail.prev = self._head

    def _add_to_head(self, node: Node) -> None:
        node.next = self._head.next
        node.prev = self._head
        self._head.next.prev = node
        self._head.next = node

    def _remove_node(self, node: Node) -> None:
        """
        Remove a node from the linked list.

        Args:
            node: The node to remove
        """
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None
