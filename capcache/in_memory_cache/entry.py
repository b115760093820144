"""Cache entry and payload capability shared by every eviction policy."""

from typing import Any, Hashable, Optional, Protocol, runtime_checkable

from capcache.in_memory_cache.exceptions import InvalidDataSizeError


@runtime_checkable
class CacheData(Protocol):
    """Payload stored in the cache. Only its byte size is ever inspected."""

    def size(self) -> int:
        ...


class CacheEntry:
    """A stored payload together with its declared size and policy position."""

    __slots__ = ("key", "data", "size", "node")

    def __init__(self, key: Hashable, data: CacheData):
        self.key = key
        self.data = data
        self.size = declared_size(key, data)
        # LRU list node or LFU frequency bucket, owned by the policy
        self.node: Optional[Any] = None

    def replace(self, data: CacheData) -> int:
        """
        Swap in a new payload.

        Args:
            data: The replacement payload

        Returns:
            The change in declared size (new size minus old size)
        """
        new_size = declared_size(self.key, data)
        delta = new_size - self.size
        self.data = data
        self.size = new_size
        return delta

    def __repr__(self) -> str:
        return f"CacheEntry(key={self.key!r}, size={self.size})"


def declared_size(key: Hashable, data: CacheData) -> int:
    """Read and validate the byte size a payload reports for itself."""
    size = data.size()
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise InvalidDataSizeError(key, size)
    return size
