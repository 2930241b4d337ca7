from concurrent.futures import ThreadPoolExecutor

import pytest

from scalelab.core import conversions as conv
from scalelab.core.cache import GenerationCache
from scalelab.core.lut import GammaLUT, default_lut


def test_cache_evicts_oldest_insertion():
    cache = GenerationCache(max_size=2)
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.get("a") == 1  # reading does not refresh "a"
    cache.set("c", 3)
    assert "a" not in cache
    assert "b" in cache and "c" in cache
    assert len(cache) == 2


def test_cache_overwrite_does_not_evict():
    cache = GenerationCache(max_size=2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("b", 20)
    assert cache.get("a") == 1
    assert cache.get("b") == 20


def test_cache_stats_and_clear():
    cache = GenerationCache(max_size=4)
    cache.set("a", 1)
    cache.get("a")
    cache.get("missing")
    stats = cache.stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["hit_rate"] == pytest.approx(0.5)
    cache.clear()
    assert len(cache) == 0
    assert cache.stats()["hits"] == 0


def test_disabled_cache_stores_nothing():
    cache = GenerationCache(enabled=False)
    cache.set("a", 1)
    assert cache.get("a") is None
    cache.enabled = True
    cache.set("a", 1)
    cache.enabled = False
    assert len(cache) == 0


def test_cache_size_must_be_positive():
    with pytest.raises(ValueError):
        GenerationCache(max_size=0)


def test_cache_is_thread_safe():
    cache = GenerationCache(max_size=50)

    def work(i):
        cache.set(i, i)
        return cache.get(i)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(work, range(500)))
    assert len(cache) == 50


@pytest.mark.parametrize("v", [0.0, 0.001, 0.04, 0.2, 0.5, 0.77, 1.0])
def test_lut_matches_exact_transfer(v):
    lut = GammaLUT()
    assert lut.srgb_to_linear(v) == pytest.approx(conv.srgb_to_linear(v), abs=1e-3)
    assert lut.linear_to_srgb(v) == pytest.approx(conv.linear_to_srgb(v), abs=2e-3)
    assert lut.precise_srgb_to_linear(v) == conv.srgb_to_linear(v)


def test_lut_clamps_input():
    lut = GammaLUT(precision=16)
    assert lut.srgb_to_linear(-1.0) == 0.0
    assert lut.linear_to_srgb(2.0) == pytest.approx(1.0)


def test_lut_precision_validation():
    with pytest.raises(ValueError):
        GammaLUT(precision=1)


def test_default_lut_is_shared():
    assert default_lut() is default_lut()
