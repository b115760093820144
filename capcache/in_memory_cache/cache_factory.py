"""Factory for creating cache instances based on eviction policy."""

from typing import Dict, Optional, Type, Union

from capcache import config
from capcache.in_memory_cache.base import BaseCache
from capcache.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy
from capcache.in_memory_cache.eviction_policy.lfu_cache import LFUCache
from capcache.in_memory_cache.eviction_policy.lru_cache import LRUCache

_CACHE_CLASSES: Dict[EvictionPolicy, Type[BaseCache]] = {
    EvictionPolicy.LRU: LRUCache,
    EvictionPolicy.LFU: LFUCache,
}


def create_cache(
    eviction_policy: Union[EvictionPolicy, str] = EvictionPolicy.LRU,
    capacity: int = 0,
    max_elements: int = 0,
    enable_metrics: bool = True
) -> BaseCache:
    """
    Create a cache instance based on the specified eviction policy.

    Each call returns a new, independent cache; callers keep the handle.

    Args:
        eviction_policy: The eviction policy to use (LRU or LFU)
        capacity: Maximum total bytes the cache can hold, 0 for unlimited
        max_elements: Maximum number of keys the cache can hold, 0 for unlimited
        enable_metrics: Record Prometheus hit, miss and eviction counters

    Returns:
        A cache instance implementing the BaseCache interface

    Raises:
        InvalidEvictionPolicyError: If the eviction policy is not supported
        InvalidCapacityError: If capacity is invalid
        InvalidMaxElementsError: If max_elements is invalid
    """
    policy = EvictionPolicy.parse(eviction_policy)
    return _CACHE_CLASSES[policy](capacity, max_elements, enable_metrics)


def create_cache_from_settings(settings: Optional["config.Settings"] = None) -> BaseCache:
    """
    Create a cache configured from application settings.

    Args:
        settings: Settings to use. Defaults to the module-level settings
                  loaded from the environment.

    Returns:
        A new cache instance
    """
    if settings is None:
        settings = config.settings

    return create_cache(
        settings.eviction_policy,
        capacity=settings.capacity,
        max_elements=settings.max_elements,
        enable_metrics=settings.enable_metrics
    )
