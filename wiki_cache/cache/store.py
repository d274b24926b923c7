"""
Single named key-value cache with optional file persistence.

:class:`Cache` keeps its entries in ``data`` and mirrors them to
``<root>/<name>.json`` when ``persistent`` is set. Several editor processes
may share one backing file, so every accessor first calls :meth:`Cache.read`,
which reloads the file only when its mtime moved past the last one observed.
Reloaded entries never replace keys already held in memory.

Writes are throttled: :meth:`Cache.set` attempts a write, but it only reaches
disk once ``write_interval`` seconds have passed since the previous throttled
write. Until then the cache stays ``dirty`` and memory is authoritative.
Explicit flushes (``write(force=True)``) ignore the window.

On construction a persistent cache compares the ``"__validate"`` stamp in its
file with the expected one and wipes the file when they differ, so a format
bump never leaks old payloads to callers.
"""

from __future__ import annotations

import copy
import logging
import time
from pathlib import Path
from typing import Any, Callable

from wiki_cache.config import cache as cache_cfg

from . import disk

logger = logging.getLogger(__name__)

FORMAT_VERSION = "wiki-cache/1"
VALIDATE_KEY = "__validate"


def expected_stamp(validate: Any = None) -> Any:
    """Return the validation stamp a cache built with ``validate`` expects."""

    if validate is None:
        return FORMAT_VERSION
    if isinstance(validate, dict):
        stamp = copy.deepcopy(validate)
        stamp["_version"] = FORMAT_VERSION
        return stamp
    return copy.deepcopy(validate)


class Cache:
    """Named cache mirroring a JSON file on disk."""

    def __init__(
        self,
        name: str,
        root: str | Path | None = None,
        *,
        persistent: bool | None = None,
        local: bool = False,
        default: Any = None,
        validate: Any = None,
        write_interval: float | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.name = name
        self.persistent: bool = cache_cfg.PERSISTENT if persistent is None else bool(persistent)
        self.local = local
        self.default = default
        self.write_interval: float = (
            cache_cfg.WRITE_INTERVAL if write_interval is None else float(write_interval)
        )
        self._clock = clock

        self.data: dict[str, Any] = {}
        self.last_seen_mtime: int | None = None
        self.dirty = False
        self._last_write: float | None = None
        self._stamp: Any = None

        self.path: Path | None = None
        if not self.persistent:
            return

        self.path = disk.cache_path(root or cache_cfg.CACHE_ROOT, name)
        self._stamp = stamp = expected_stamp(validate)
        self.read()
        stored = self.data.get(VALIDATE_KEY)
        if VALIDATE_KEY not in self.data or type(stored) is not type(stamp) or stored != stamp:
            if self.data:
                logger.info("Cache %s failed validation; resetting %s", name, self.path)
            self.clear()
            self.dirty = True
            self.write(force=True)

    def __repr__(self) -> str:
        return (
            f"Cache(name={self.name!r}, persistent={self.persistent}, "
            f"entries={len(self.data)}, dirty={self.dirty})"
        )

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        self.read()
        return len(self.data)

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    def get(self, key: str, fallback: Any = None) -> Any:
        """Return the value under ``key``, materializing ``default`` on a miss."""

        self.read()
        if self.default is not None and key not in self.data:
            self.data[key] = copy.deepcopy(self.default)
        return self.data.get(key, fallback)

    def has(self, key: str) -> bool:
        self.read()
        return key in self.data

    def set(self, key: str, value: Any) -> Any:
        """Store ``value`` under ``key`` and return it."""

        if not isinstance(key, str):
            raise TypeError(f"Cache keys must be str, not {type(key).__name__}")
        self.read()
        self.data[key] = value
        self.dirty = True
        self.write()
        return value

    def clear(self) -> None:
        """
        Drop every entry and remove the backing file.

        A persistent cache keeps its validation stamp in memory so the next
        write produces a file later sessions accept.
        """

        self.data = {}
        if self._stamp is not None:
            self.data[VALIDATE_KEY] = copy.deepcopy(self._stamp)
        self.last_seen_mtime = None
        self.dirty = False
        if self.persistent and self.path is not None:
            disk.delete(self.path)
            logger.info("Cleared cache %s", self.name)

    # ------------------------------------------------------------------ #
    # Persistence
    # ------------------------------------------------------------------ #

    def read(self) -> None:
        """Merge the backing file into memory if it changed since last seen."""

        if not self.persistent or self.path is None:
            return
        current = disk.mtime(self.path)
        if current is None:
            return
        if self.last_seen_mtime is not None and current <= self.last_seen_mtime:
            return

        stored = disk.load(self.path)
        for key, value in stored.items():
            self.data.setdefault(key, value)
        self.last_seen_mtime = current
        logger.debug("Loaded %d entries for cache %s", len(stored), self.name)

    def write(self, force: bool = False) -> bool:
        """
        Persist ``data`` if dirty.

        Returns ``True`` when the file was rewritten. Without ``force`` the
        write is skipped inside the throttle window and the cache stays dirty.
        """

        if not self.persistent or self.path is None or not self.dirty:
            return False

        now = self._clock()
        throttled = not force and self._last_write is not None
        if throttled and now - self._last_write < self.write_interval:
            logger.debug("Deferred write for cache %s", self.name)
            return False

        self.read()
        disk.save(self.path, self.data)
        # Only a completed write opens the next throttle window.
        if not force:
            self._last_write = now
        current = disk.mtime(self.path)
        if current is not None and (self.last_seen_mtime is None or current > self.last_seen_mtime):
            self.last_seen_mtime = current
        self.dirty = False
        logger.debug("Wrote %d entries for cache %s", len(self.data), self.name)
        return True


__all__ = ["Cache", "FORMAT_VERSION", "VALIDATE_KEY", "expected_stamp"]
