"""Prometheus metrics for in-memory caches."""

from prometheus_client import Counter

CACHE_HITS = Counter('capcache_hits_total', 'Total cache hits', ['policy'])
CACHE_MISSES = Counter('capcache_misses_total', 'Total cache misses', ['policy'])
CACHE_EVICTIONS = Counter('capcache_evictions_total', 'Total evicted cache entries', ['policy', 'reason'])
