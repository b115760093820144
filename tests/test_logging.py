import logging

import structlog
from structlog.testing import capture_logs

from capcache import LFUCache, LRUCache
from capcache.logging_config import configure_logging
from conftest import item


def test_configure_logging():
    root = logging.getLogger()
    level = root.level
    try:
        configure_logging("debug")
        assert structlog.is_configured()
        assert root.level == logging.DEBUG
    finally:
        structlog.reset_defaults()
        root.setLevel(level)


def test_eviction_is_logged():
    with capture_logs() as logs:
        c = LRUCache(max_elements=1)
        c.set_key("a", item(1))
        c.set_key("b", item(1))

    evictions = [log for log in logs if log["event"] == "Evicted cache entry"]
    assert len(evictions) == 1
    assert evictions[0]["key"] == "a"
    assert evictions[0]["reason"] == "capacity"
    assert evictions[0]["log_level"] == "debug"


def test_lifecycle_is_logged():
    with capture_logs() as logs:
        c = LFUCache(capacity=10)
        c.set_capacity(20)
        c.clear()

    events = [log["event"] for log in logs]
    assert events == ["Created in-memory cache", "Changed cache capacity", "Cleared in-memory cache"]
    assert logs[0]["policy"] == "LFU"
