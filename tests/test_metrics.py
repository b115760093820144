from prometheus_client import REGISTRY

from capcache import LFUCache, LRUCache
from conftest import item


def sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_hits_misses_and_evictions_are_counted():
    hits = sample("capcache_hits_total", policy="LRU")
    misses = sample("capcache_misses_total", policy="LRU")
    capacity_evictions = sample("capcache_evictions_total", policy="LRU", reason="capacity")
    explicit_evictions = sample("capcache_evictions_total", policy="LRU", reason="explicit")

    c = LRUCache(max_elements=1)
    c.set_key("a", item(1))
    c.get_key("a")
    c.get_key("b")
    c.set_key("b", item(1))
    c.evict(1)

    assert sample("capcache_hits_total", policy="LRU") == hits + 1
    assert sample("capcache_misses_total", policy="LRU") == misses + 1
    assert sample("capcache_evictions_total", policy="LRU", reason="capacity") == capacity_evictions + 1
    assert sample("capcache_evictions_total", policy="LRU", reason="explicit") == explicit_evictions + 1


def test_metrics_can_be_disabled():
    hits = sample("capcache_hits_total", policy="LFU")
    misses = sample("capcache_misses_total", policy="LFU")

    c = LFUCache(enable_metrics=False)
    c.set_key("a", item(1))
    c.get_key("a")
    c.get_key("missing")

    assert sample("capcache_hits_total", policy="LFU") == hits
    assert sample("capcache_misses_total", policy="LFU") == misses
