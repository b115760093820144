"""Capacity-bounded in-memory caches with pluggable LRU and LFU eviction."""

from capcache.in_memory_cache import (
    BaseCache,
    CacheData,
    EvictionPolicy,
    LFUCache,
    LRUCache,
    create_cache,
    create_cache_from_settings
)

__version__ = "1.0.0"

__all__ = [
    "BaseCache",
    "CacheData",
    "EvictionPolicy",
    "LFUCache",
    "LRUCache",
    "create_cache",
    "create_cache_from_settings",
]
