import pytest

from wiki_cache.cache.memo import memoize, wrap
from wiki_cache.cache.registry import CacheRegistry


@pytest.fixture
def registry(tmp_path):
    return CacheRegistry(tmp_path / "cacheroot", persistent=True, context=tmp_path, flush_at_exit=False)


def test_wrap_computes_each_key_once(registry):
    calls = []

    def backlinks(page):
        calls.append(page)
        return [page.upper()]

    cached = wrap(backlinks, "backlinks", registry)

    assert cached("index") == ["INDEX"]
    assert cached("index") == ["INDEX"]
    assert cached("todo") == ["TODO"]
    assert calls == ["index", "todo"]
    assert cached.cache is registry.open("backlinks")
    assert cached.__name__ == "backlinks"


def test_wrapped_results_survive_new_registry(registry, tmp_path):
    wrap(lambda page: len(page), "lengths", registry)("index")
    registry.close("lengths")

    calls = []

    def length(page):
        calls.append(page)
        return -1

    other = CacheRegistry(tmp_path / "cacheroot", persistent=True, flush_at_exit=False)

    assert wrap(length, "lengths", other)("index") == 5
    assert calls == []


def test_memoize_passes_cache_options(registry, tmp_path):
    @memoize("titles", registry, local=True)
    def title(page):
        return page.title()

    assert title("my page") == "My Page"
    assert title.cache.local is True
    assert title.cache.name != "titles"


def test_wrap_rejects_non_callable_immediately(registry):
    with pytest.raises(TypeError):
        wrap("not a function", "broken", registry)

    assert "broken" not in registry
