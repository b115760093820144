"""In-memory cache service with support for multiple eviction policies."""

from capcache.in_memory_cache.cache_factory import create_cache, create_cache_from_settings
from capcache.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy
from capcache.in_memory_cache.base import BaseCache
from capcache.in_memory_cache.capacity import CapacityOptions
from capcache.in_memory_cache.entry import CacheData, CacheEntry
from capcache.in_memory_cache.eviction_policy.lru_cache import LRUCache
from capcache.in_memory_cache.eviction_policy.lfu_cache import LFUCache
from capcache.in_memory_cache.exceptions import (
    CacheConfigurationError,
    InvalidCapacityError,
    InvalidDataSizeError,
    InvalidEvictionPolicyError,
    InvalidMaxElementsError
)

__all__ = [
    "create_cache",
    "create_cache_from_settings",
    "EvictionPolicy",
    "BaseCache",
    "CapacityOptions",
    "CacheData",
    "CacheEntry",
    "LRUCache",
    "LFUCache",
    "CacheConfigurationError",
    "InvalidCapacityError",
    "InvalidDataSizeError",
    "InvalidEvictionPolicyError",
    "InvalidMaxElementsError",
]
