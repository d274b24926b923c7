"""Context-scoped cache names."""

from __future__ import annotations

import os
import re
from pathlib import Path

_WHITESPACE = re.compile(r"\s+")
_DRIVE = re.compile(r"^([A-Za-z]):")


def normalize_context(context: str | Path, *, windows: bool | None = None) -> str:
    """Flatten ``context`` into a string usable inside a single filename."""

    if windows is None:
        windows = os.name == "nt"
    flat = _WHITESPACE.sub("_", str(context))
    if windows:
        flat = _DRIVE.sub(lambda m: f"[{m.group(1).upper()}]", flat)
        return flat.replace("\\", "-")
    return flat.replace("/", "%")


def local_name(
    base: str,
    context: str | Path | None = None,
    *,
    windows: bool | None = None,
) -> str:
    """
    Return ``base`` namespaced by ``context``.

    ``context`` is the project root the cache belongs to; the current working
    directory is used when none is known, e.g. ``links`` + ``/home/me/wiki``
    -> ``links%home%me%wiki``.

    Separators become ``%`` (POSIX) or ``-`` (Windows) and whitespace runs
    become ``_``, all without escaping. Directories that differ only in those
    characters share a name: ``/a%b`` and ``/a/b``, or ``/my wiki`` and
    ``/my_wiki``. Every other pair of distinct directories gets distinct names.
    """

    if context is None:
        context = os.getcwd()
    return base + normalize_context(context, windows=windows)


__all__ = ["local_name", "normalize_context"]
