"""Custom exceptions for in-memory cache configuration."""

from typing import Any, Hashable


class CacheConfigurationError(ValueError):
    """Base class for errors raised while configuring a cache."""


class InvalidEvictionPolicyError(CacheConfigurationError):
    """Raised when an invalid eviction policy is provided."""

    def __init__(self, policy: str):
        self.policy = policy
        super().__init__(f"Invalid eviction policy: {policy}. Supported policies: LRU, LFU")


class InvalidCapacityError(CacheConfigurationError):
    """Raised when an invalid byte capacity is provided."""

    def __init__(self, capacity: Any):
        self.capacity = capacity
        super().__init__(f"Invalid capacity: {capacity}. Must be a non-negative integer (0 means unlimited)")


class InvalidMaxElementsError(CacheConfigurationError):
    """Raised when an invalid max_elements is provided."""

    def __init__(self, max_elements: Any):
        self.max_elements = max_elements
        super().__init__(f"Invalid max_elements: {max_elements}. Must be a non-negative integer (0 means unlimited)")


class InvalidDataSizeError(CacheConfigurationError):
    """Raised when a cached payload reports a size that cannot be accounted."""

    def __init__(self, key: Hashable, size: Any):
        self.key = key
        self.size = size
        super().__init__(f"Invalid size {size!r} reported for key {key!r}. Must be a non-negative integer")
