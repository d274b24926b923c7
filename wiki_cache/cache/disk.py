"""
On-disk layout for named caches.

Each cache lives in its own file under the configured cache root as a single
UTF-8 JSON object::

    <root>/<name>.json  ->  {"__validate": <stamp>, key: value, ...}

The helpers here are the only code that touches the filesystem. Callers
resolve a file with :func:`cache_path`, poll it with :func:`mtime`, read and
replace it wholesale with :func:`load` and :func:`save`, and drop it with
:func:`delete`. :func:`list_names` enumerates the caches present under a root.
"""

from __future__ import annotations

from pathlib import Path
import json
import os
from typing import Any, Dict, List

SUFFIX = ".json"


def cache_path(root: str | Path, name: str) -> Path:
    d = Path(root)
    d.mkdir(parents=True, exist_ok=True)
    return d / f"{name}{SUFFIX}"


def mtime(path: Path) -> int | None:
    """Return the modification time of ``path`` in nanoseconds, or ``None``."""

    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        return None


def load(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"Cache file {path} does not hold a JSON object")
    return raw


def save(path: Path, data: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        json.dump(data, f)
    # Readers in other processes only ever see a complete file.
    os.replace(tmp, path)


def delete(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass


def list_names(root: str | Path) -> List[str]:
    """Return the cache names stored under ``root``, sorted."""

    d = Path(root)
    if not d.is_dir():
        return []
    return sorted(p.stem for p in d.glob(f"*{SUFFIX}") if p.is_file())


__all__ = ["SUFFIX", "cache_path", "mtime", "load", "save", "delete", "list_names"]
