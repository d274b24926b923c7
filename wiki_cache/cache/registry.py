"""Registry owning at most one live :class:`Cache` per name."""

from __future__ import annotations

import atexit
import logging
import time
from pathlib import Path
from typing import Any, Callable, Iterator, Union

from wiki_cache.config import cache as cache_cfg

from . import disk
from .naming import local_name
from .store import Cache

logger = logging.getLogger(__name__)

CLEAR_ALL = "ALL"

ContextSource = Union[str, Path, Callable[[], Union[str, Path, None]], None]


class CacheRegistry:
    """Process-wide map from cache name to its single open instance."""

    def __init__(
        self,
        root: str | Path | None = None,
        *,
        persistent: bool | None = None,
        context: ContextSource = None,
        write_interval: float | None = None,
        clock: Callable[[], float] = time.time,
        flush_at_exit: bool | None = None,
    ) -> None:
        self.root = Path(root or cache_cfg.CACHE_ROOT)
        self.persistent: bool = cache_cfg.PERSISTENT if persistent is None else bool(persistent)
        self._context = context
        self._write_interval = write_interval
        self._clock = clock
        self._caches: dict[str, Cache] = {}
        self._exit_hook_installed = False

        if cache_cfg.FLUSH_AT_EXIT if flush_at_exit is None else flush_at_exit:
            atexit.register(self.write_all)
            self._exit_hook_installed = True

    def __contains__(self, name: str) -> bool:
        return name in self._caches

    def __len__(self) -> int:
        return len(self._caches)

    def __iter__(self) -> Iterator[Cache]:
        return iter(list(self._caches.values()))

    def names(self) -> list[str]:
        return list(self._caches)

    # ------------------------------------------------------------------ #
    # Naming
    # ------------------------------------------------------------------ #

    def _resolve_context(self, context: ContextSource) -> str | Path | None:
        source = context if context is not None else self._context
        if callable(source):
            return source()
        return source

    def local_name(self, name: str, context: ContextSource = None) -> str:
        return local_name(name, self._resolve_context(context))

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def open(
        self,
        name: str,
        *,
        local: bool = False,
        context: ContextSource = None,
        **opts: Any,
    ) -> Cache:
        """Return the cache registered under ``name``, constructing it once."""

        resolved = self.local_name(name, context) if local else name
        try:
            return self._caches[resolved]
        except KeyError:
            pass

        opts.setdefault("persistent", self.persistent)
        opts.setdefault("write_interval", self._write_interval)
        opts.setdefault("clock", self._clock)
        instance = Cache(resolved, self.root, local=local, **opts)
        self._caches[resolved] = instance
        logger.debug("Opened cache %s", resolved)
        return instance

    def close(self, name: str, *, context: ContextSource = None) -> None:
        """Flush and forget ``name`` (or its local variant). Unknown names are ignored."""

        for candidate in (name, self.local_name(name, context)):
            instance = self._caches.pop(candidate, None)
            if instance is None:
                continue
            instance.write(force=True)
            logger.info("Closed cache %s", candidate)
            return

    def clear(self, name: str, *, context: ContextSource = None) -> None:
        """
        Clear ``name`` and its local variant, in memory and on disk.

        ``"ALL"`` clears every cache file under the root. A cache that is not
        open is opened first when persistence is enabled so its file is
        removed too. An empty name clears nothing.
        """

        if not name:
            return
        if name == CLEAR_ALL:
            self._clear_all()
            return

        for local in (False, True):
            candidate = self.local_name(name, context) if local else name
            instance = self._caches.get(candidate)
            if instance is None and self.persistent:
                instance = self.open(name, local=local, context=context)
            if instance is not None:
                instance.clear()

    def _clear_all(self) -> None:
        names = disk.list_names(self.root)
        for name in names:
            self.open(name).clear()
        logger.info("Cleared %d cache file(s) under %s", len(names), self.root)

    def write_all(self) -> list[str]:
        """
        Flush every open cache, ignoring the throttle window.

        A cache that fails with :class:`OSError` is logged and skipped so the
        rest still reach disk. Returns the names of the caches that failed.
        """

        failed: list[str] = []
        for instance in list(self._caches.values()):
            try:
                instance.write(force=True)
            except OSError as exc:
                logger.warning("Failed to flush cache %s: %s", instance.name, exc)
                failed.append(instance.name)
        return failed

    def shutdown(self) -> list[str]:
        """Flush and drop every cache, then detach the exit hook."""

        failed = self.write_all()
        self._caches.clear()
        if self._exit_hook_installed:
            atexit.unregister(self.write_all)
            self._exit_hook_installed = False
        return failed


__all__ = ["CacheRegistry", "CLEAR_ALL"]
