import pytest

from capcache import LFUCache, LRUCache


class Item:
    """Byte payload whose declared size is its length."""

    def __init__(self, payload: bytes):
        self.payload = payload

    def size(self) -> int:
        return len(self.payload)

    def __repr__(self):
        return f"Item({self.payload!r})"


def item(n: int, fill: bytes = b"x") -> Item:
    return Item(fill * n)


@pytest.fixture(params=[LRUCache, LFUCache], ids=["lru", "lfu"])
def cache_cls(request):
    return request.param
