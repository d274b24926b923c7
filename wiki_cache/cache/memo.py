"""
Function memoization backed by a named cache.

:func:`wrap` turns a deterministic single-argument function into one that
consults a :class:`~wiki_cache.cache.store.Cache` before computing. Results
are stored with :meth:`Cache.set`, so they persist under the cache's normal
throttled write policy and survive across editor sessions.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

from .registry import CacheRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


def wrap(
    fn: Callable[[str], T],
    name: str,
    registry: CacheRegistry,
    **opts: Any,
) -> Callable[[str], T]:
    """Return ``fn`` memoized in the cache ``name`` opened from ``registry``."""

    if not callable(fn):
        raise TypeError(f"wrap expects a callable, got {type(fn).__name__}")

    cache = registry.open(name, **opts)

    @functools.wraps(fn)
    def cached(key: str) -> T:
        if cache.has(key):
            return cache.get(key)
        logger.debug("Cache %s miss for %r", cache.name, key)
        return cache.set(key, fn(key))

    cached.cache = cache  # type: ignore[attr-defined]
    return cached


def memoize(name: str, registry: CacheRegistry, **opts: Any):
    """Decorator form of :func:`wrap`."""

    def _decorate(fn: Callable[[str], T]) -> Callable[[str], T]:
        return wrap(fn, name, registry, **opts)

    return _decorate


__all__ = ["wrap", "memoize"]
