# tests/test_cache.py

from pokeportal.cache import ResponseCache, make_cache_key


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def test_cache_key_ignores_param_order():
    first = make_cache_key("/pokemon", {"limit": 20, "offset": 40})
    second = make_cache_key("/pokemon", {"offset": 40, "limit": 20})
    assert first == second


def test_cache_key_distinguishes_endpoint_and_values():
    base = make_cache_key("/pokemon", {"limit": 20, "offset": 0})
    assert base != make_cache_key("/pokemon", {"limit": 20, "offset": 20})
    assert base != make_cache_key("/pokemon-species", {"limit": 20, "offset": 0})


def test_cache_key_treats_missing_and_empty_params_alike():
    assert make_cache_key("/pokemon/25") == make_cache_key("/pokemon/25", {})


def test_get_returns_value_within_ttl():
    clock = FakeClock()
    cache = ResponseCache(clock=clock)
    cache.set("k", {"id": 1})

    clock.now += 299
    assert cache.get("k", ttl=300) == {"id": 1}


def test_entry_expires_at_ttl_boundary_but_is_not_deleted():
    clock = FakeClock()
    cache = ResponseCache(clock=clock)
    cache.set("k", {"id": 1})

    clock.now += 300
    assert cache.get("k", ttl=300) is None
    # Lazy invalidation: the stale entry is still held until overwritten
    assert "k" in cache
    assert len(cache) == 1
    # A longer TTL on read still sees it
    assert cache.get("k", ttl=600) == {"id": 1}


def test_set_overwrites_and_restamps():
    clock = FakeClock()
    cache = ResponseCache(clock=clock)
    cache.set("k", "old")
    clock.now += 500
    cache.set("k", "new")
    clock.now += 10
    assert cache.get("k", ttl=300) == "new"


def test_clear_removes_key():
    cache = ResponseCache()
    cache.set("k", 1)
    assert cache.clear("k") is True
    assert cache.get("k") is None
    assert cache.clear("k") is False


def test_cache_key_matches_wire_encoding_of_values():
    assert make_cache_key("/pokemon", {"limit": 20, "offset": 0}) == make_cache_key(
        "/pokemon", {"limit": "20", "offset": "0"}
    )
