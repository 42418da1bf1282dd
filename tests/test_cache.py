# tests/test_cache.py
import fnmatch
import json

from tracknest.core.cache import RedisCache


class FakeRedis:
    def __init__(self):
        self.data = {}

    def set(self, key, value):
        self.data[key] = value

    def setex(self, key, expire, value):
        self.data[key] = value

    def get(self, key):
        return self.data.get(key)

    def scan_iter(self, match):
        return iter(fnmatch.filter(list(self.data), match))

    def delete(self, *keys):
        for key in keys:
            self.data.pop(key, None)
        return len(keys)


def _cache():
    cache = RedisCache.__new__(RedisCache)
    cache.redis_client = FakeRedis()
    return cache


def test_set_and_get_round_trip_json():
    cache = _cache()
    assert cache.set_cache("charts:names", [{"chart_name": "A"}], 60)
    assert json.loads(cache.redis_client.data["charts:names"]) == [{"chart_name": "A"}]
    assert cache.get_cache("charts:names") == [{"chart_name": "A"}]
    assert cache.get_cache("missing") is None


def test_invalidate_drops_only_matching_keys():
    cache = _cache()
    cache.set_cache("charts:names", [])
    cache.set_cache("charts:Indie Picks:dates", [])
    cache.set_cache("other:key", 1)

    assert cache.invalidate("charts:*") == 2
    assert list(cache.redis_client.data) == ["other:key"]
    assert cache.invalidate("charts:*") == 0


def test_disabled_cache_is_a_no_op():
    cache = RedisCache.__new__(RedisCache)
    cache.redis_client = None
    assert not cache.set_cache("k", 1)
    assert cache.get_cache("k") is None
    assert cache.invalidate("*") == 0
