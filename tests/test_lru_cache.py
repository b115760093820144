from capcache import LRUCache
from conftest import Item, item


def test_lru_eviction():
    """Inserting past max_elements evicts the least recently used key."""
    c = LRUCache(max_elements=2)

    val1 = Item(b"HelloWorld")
    val2 = Item(b"HelloWorld")
    val3 = Item(b"HelloWorld")

    c.set_key("k1", val1)
    assert c.elements_count() == 1
    c.set_key("k2", val2)
    assert c.elements_count() == 2
    c.set_key("k3", val3)
    assert c.elements_count() == 2

    assert c.get_key("k1") == (None, False)
    assert c.get_key("k2") == (val2, True)
    assert c.get_key("k3") == (val3, True)

    c.evict(1)
    assert c.elements_count() == 1
    c.evict(1)
    assert c.elements_count() == 0


def test_get_promotes_key():
    c = LRUCache(max_elements=3)
    c.set_key(1, item(1))  # [1]
    c.set_key(2, item(1))  # [2, 1]
    c.set_key(3, item(1))  # [3, 2, 1]
    assert c.keys() == [3, 2, 1]

    c.get_key(1)  # [1, 3, 2]
    assert c.keys() == [1, 3, 2]

    c.set_key(4, item(1))  # evicts 2
    assert c.keys() == [4, 1, 3]
    assert not c.get_key(2)[1]


def test_set_existing_promotes_key():
    c = LRUCache(max_elements=3)
    for key in "abc":
        c.set_key(key, item(1))

    c.set_key("a", item(2))
    assert c.keys() == ["a", "c", "b"]

    c.set_key("d", item(1))
    assert c.keys() == ["d", "a", "c"]


def test_recency_order_of_eviction():
    """A key is evicted strictly after every key not accessed since."""
    c = LRUCache()
    for i in range(10):
        c.set_key(i, item(1))
    for i in (7, 2, 9):
        c.get_key(i)

    order = []
    while c.elements_count():
        victim = c.keys()[-1]
        c.evict(1)
        order.append(victim)

    assert order == [0, 1, 3, 4, 5, 6, 8, 7, 2, 9]


def test_keys_does_not_touch_recency():
    c = LRUCache(max_elements=2)
    c.set_key("a", item(1))
    c.set_key("b", item(1))
    c.keys()
    c.set_key("c", item(1))
    assert c.keys() == ["c", "b"]


def test_delete_unlinks_node():
    c = LRUCache()
    for key in "abcd":
        c.set_key(key, item(1))

    c.delete_key("c")
    assert c.keys() == ["d", "b", "a"]
    c.delete_key("d")
    c.delete_key("a")
    assert c.keys() == ["b"]

    c.evict(1)
    assert c.keys() == []
    assert c.size() == 0


def test_byte_capacity_evicts_oldest_first():
    c = LRUCache(capacity=30)
    c.set_key("a", item(10))
    c.set_key("b", item(10))
    c.set_key("c", item(10))
    c.get_key("a")

    c.set_key("d", item(15))  # needs 15 bytes: evicts b then c
    assert c.keys() == ["d", "a"]
    assert c.size() == 25
