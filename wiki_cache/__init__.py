"""Persistent memoization caches for the wiki editing extension."""

from __future__ import annotations

from .cache import Cache, CacheRegistry, local_name, memoize, wrap

__all__ = ["Cache", "CacheRegistry", "local_name", "memoize", "wrap"]
