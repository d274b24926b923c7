from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict


DEFAULT_CONFIG_PATH = Path("config.toml")


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the unified cache config (config.toml by default).

    ``WIKI_CACHE_CONFIG`` overrides the default location. Returns an empty
    dict when the file is missing so callers can fall back to environment
    variables.
    """
    if path is None:
        path = os.getenv("WIKI_CACHE_CONFIG") or DEFAULT_CONFIG_PATH
    target = Path(path)
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        return tomllib.load(handle)


__all__ = ["load_raw_config", "DEFAULT_CONFIG_PATH"]
