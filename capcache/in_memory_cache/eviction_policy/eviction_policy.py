"""Eviction policy definitions for in-memory cache."""

from enum import Enum
from typing import Union

from capcache.in_memory_cache.exceptions import InvalidEvictionPolicyError


class EvictionPolicy(str, Enum):
    """Enumeration of supported eviction policies."""

    LRU = "LRU"  # Least Recently Used
    LFU = "LFU"  # Least Frequently Used

    @classmethod
    def parse(cls, policy: Union["EvictionPolicy", str]) -> "EvictionPolicy":
        """
        Normalize a policy given as an enum member or a case-insensitive name.

        Raises:
            InvalidEvictionPolicyError: If the policy is not supported
        """
        if isinstance(policy, cls):
            return policy
        if not isinstance(policy, str):
            raise InvalidEvictionPolicyError(str(policy))
        try:
            return cls(policy.strip().upper())
        except ValueError:
            raise InvalidEvictionPolicyError(policy) from None
