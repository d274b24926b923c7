import os
from pathlib import Path


def _default_root() -> Path:
    xdg = os.getenv("XDG_CACHE_HOME")
    base = Path(xdg) if xdg else Path.home() / ".cache"
    return base / "wiki"


def _as_bool(raw) -> bool:
    return str(raw).lower() in ("1", "true", "yes")


class CacheSettings:
    def __init__(self, config: dict | None = None) -> None:
        cache_cfg = (config or {}).get("wikicache", {}).get("cache", {})
        self.CACHE_ROOT: str = str(cache_cfg.get("root", os.getenv("WIKI_CACHE_ROOT", str(_default_root()))))
        self.PERSISTENT: bool = _as_bool(cache_cfg.get("persistent", os.getenv("WIKI_CACHE_PERSISTENT", "1")))
        self.WRITE_INTERVAL: float = float(
            cache_cfg.get("write_interval", os.getenv("WIKI_CACHE_WRITE_INTERVAL", "300"))
        )
        self.FLUSH_AT_EXIT: bool = _as_bool(
            cache_cfg.get("flush_at_exit", os.getenv("WIKI_CACHE_FLUSH_AT_EXIT", "1"))
        )
