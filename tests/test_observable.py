from storefront.observable import Writable
from storefront.stores import ALL_CATEGORIES, ProductCache, category_filter

from .helpers import make_product


class TestWritable:

    def test_subscribe_receives_current_value(self):
        store = Writable(1)
        seen = []
        store.subscribe(seen.append)
        assert seen == [1]

    def test_set_and_update_notify(self):
        store = Writable(1)
        seen = []
        store.subscribe(seen.append)

        store.set(5)
        store.update(lambda v: v * 2)

        assert seen == [1, 5, 10]
        assert store.get() == 10

    def test_unsubscribe(self):
        store = Writable("a")
        seen = []
        unsubscribe = store.subscribe(seen.append)

        unsubscribe()
        store.set("b")
        unsubscribe()

        assert seen == ["a"]

    def test_all_subscribers_notified_in_order(self):
        store = Writable(0)
        calls = []
        store.subscribe(lambda v: calls.append(("first", v)))
        store.subscribe(lambda v: calls.append(("second", v)))

        store.set(1)

        assert calls[-2:] == [("first", 1), ("second", 1)]

    def test_unsubscribe_during_notification(self):
        store = Writable(0)
        seen = []
        handles = {}

        def once(v):
            seen.append(v)
            if v == 1:
                handles["once"]()

        handles["once"] = store.subscribe(once)
        store.subscribe(seen.append)

        store.set(1)
        store.set(2)

        assert seen == [0, 0, 1, 1, 2]


class TestProductCache:

    def test_has_get_set(self):
        cache = ProductCache()
        assert not cache.has()
        assert cache.get() == []

        cache.set([make_product(1), make_product(2)])

        assert cache.has()
        assert [p.id for p in cache.get()] == [1, 2]

    def test_backed_by_store(self):
        store = Writable([])
        cache = ProductCache(store)
        seen = []
        store.subscribe(seen.append)

        cache.set([make_product(7)])

        assert [p.id for p in seen[-1]] == [7]

    def test_category_filter(self):
        assert category_filter(ALL_CATEGORIES) is None
        assert category_filter("") is None
        assert category_filter("jewelery") == "jewelery"
