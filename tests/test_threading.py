import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from capcache import LFUCache, LRUCache
from conftest import item


@pytest.mark.parametrize("cache_cls", [LRUCache, LFUCache])
def test_concurrent_access_respects_limits(cache_cls):
    """Multiple threads hitting the same cache concurrently."""
    c = cache_cls(capacity=500, max_elements=40)

    def worker(i):
        for n in range(300):
            key = (i * 7 + n) % 64
            c.set_key(key, item(n % 13 + 1))
            c.get_key((key + 1) % 64)
            if n % 50 == 0:
                c.delete_key(key)
            assert c.elements_count() <= 40
            assert c.size() <= 500

    with ThreadPoolExecutor(max_workers=8) as pool:
        futures = [pool.submit(worker, i) for i in range(8)]
        for f in futures:
            f.result()

    assert c.elements_count() <= 40
    assert c.size() <= 500


@pytest.mark.parametrize("cache_cls", [LRUCache, LFUCache])
def test_byte_total_matches_entries_after_contention(cache_cls):
    c = cache_cls(max_elements=32)

    def worker(offset):
        for n in range(500):
            c.set_key((offset + n) % 48, item(offset + 1))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    total = 0
    for key in range(48):
        value, found = c.get_key(key)
        if found:
            total += value.size()
    assert total == c.size()


@pytest.mark.parametrize("cache_cls", [LRUCache, LFUCache])
def test_concurrent_clear(cache_cls):
    """Clearing while other threads read and write doesn't corrupt the cache."""
    c = cache_cls(max_elements=16)
    stop = threading.Event()

    def writer():
        n = 0
        while not stop.is_set():
            c.set_key(n % 20, item(2))
            c.get_key((n + 3) % 20)
            n += 1

    def clearer():
        for _ in range(50):
            c.clear()

    threads = [threading.Thread(target=writer) for _ in range(4)]
    for t in threads:
        t.start()
    clearer()
    stop.set()
    for t in threads:
        t.join(timeout=5)

    c.clear()
    assert c.elements_count() == 0
    assert c.size() == 0
