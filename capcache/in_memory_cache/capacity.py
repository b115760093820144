"""Capacity limits for in-memory caches."""

from typing import Any

from capcache.in_memory_cache.exceptions import (
    InvalidCapacityError,
    InvalidMaxElementsError
)


def _is_limit(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class CapacityOptions:
    """
    Byte and element-count ceilings for a cache.

    Both limits are optional; zero means unlimited. The options object is not
    locked on its own, the owning cache serializes access to it.
    """

    def __init__(self, capacity: int = 0, max_elements: int = 0):
        """
        Initialize the limits.

        Args:
            capacity: Maximum total bytes to keep, 0 for unlimited
            max_elements: Maximum number of entries to keep, 0 for unlimited

        Raises:
            InvalidCapacityError: If capacity is negative or not an integer
            InvalidMaxElementsError: If max_elements is negative or not an integer
        """
        self._capacity = 0
        self._max_elements = 0
        self.set_capacity(capacity)
        self.set_max_elements(max_elements)

    @property
    def capacity(self) -> int:
        """Get the byte limit."""
        return self._capacity

    def set_capacity(self, capacity: int) -> None:
        if not _is_limit(capacity):
            raise InvalidCapacityError(capacity)
        self._capacity = capacity

    @property
    def max_elements(self) -> int:
        """Get the element-count limit."""
        return self._max_elements

    def set_max_elements(self, max_elements: int) -> None:
        if not _is_limit(max_elements):
            raise InvalidMaxElementsError(max_elements)
        self._max_elements = max_elements

    @property
    def unlimited(self) -> bool:
        return self._capacity == 0 and self._max_elements == 0

    def exceeded(self, size: int, count: int) -> bool:
        """
        Check whether the cache holds more than either limit allows.

        A single entry larger than the byte capacity is tolerated on its own.

        Args:
            size: Current total of declared bytes
            count: Current number of entries

        Returns:
            True if an entry must be evicted
        """
        return (self._capacity != 0 and size > self._capacity and count > 1) or \
            (self._max_elements != 0 and count > self._max_elements)

    def reached(self, size: int, count: int) -> bool:
        """Check whether either limit is met or exceeded."""
        return (self._capacity != 0 and size >= self._capacity) or \
            (self._max_elements != 0 and count >= self._max_elements)

    def __repr__(self) -> str:
        return f"CapacityOptions(capacity={self._capacity}, max_elements={self._max_elements})"
