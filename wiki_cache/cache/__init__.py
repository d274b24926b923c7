"""
Persistent key-value caches shared across editor sessions.

Modules
=======

``store``
    Defines :class:`~wiki_cache.cache.store.Cache`, a single named cache with
    mtime-based staleness checks, keep-local merging, and throttled writes.
``registry``
    Provides :class:`~wiki_cache.cache.registry.CacheRegistry`, which hands out
    at most one live cache per name and owns open/close/clear/flush.
``naming``
    Derives context-scoped ("local") cache names from a project directory.
``memo``
    Wraps single-argument functions with get-or-compute semantics backed by a
    registry cache.
``disk``
    Low-level JSON file helpers used by :mod:`store` for the backing files.
"""

from .memo import memoize, wrap
from .naming import local_name
from .registry import CLEAR_ALL, CacheRegistry
from .store import FORMAT_VERSION, VALIDATE_KEY, Cache

__all__ = [
    "Cache",
    "CacheRegistry",
    "CLEAR_ALL",
    "FORMAT_VERSION",
    "VALIDATE_KEY",
    "local_name",
    "memoize",
    "wrap",
]
