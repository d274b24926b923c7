from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .cache import disk
from .cache.naming import local_name
from .cache.registry import CLEAR_ALL, CacheRegistry
from .config import cache as cache_cfg


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m wiki_cache",
        description="Inspect and clear persistent wiki caches.",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Cache root directory (overrides WIKI_CACHE_ROOT and config.toml).",
    )
    subparsers = parser.add_subparsers(
        dest="command", metavar="<command>", required=True
    )

    subparsers.add_parser("list", help="List cache files under the cache root.")

    for command, help_text in (
        ("show", "Print the stored JSON object of a cache."),
        ("path", "Print the backing file path of a cache."),
    ):
        cmd = subparsers.add_parser(command, help=help_text)
        cmd.add_argument("name", help="Cache name.")
        cmd.add_argument(
            "--local",
            action="store_true",
            help="Resolve the name against a project directory.",
        )
        cmd.add_argument(
            "--context",
            type=Path,
            default=None,
            help="Project directory for --local (defaults to the current directory).",
        )

    clear_cmd = subparsers.add_parser(
        "clear", help=f"Clear a cache and its local variant, or {CLEAR_ALL} caches."
    )
    clear_cmd.add_argument("name", help=f"Cache name or {CLEAR_ALL}.")
    clear_cmd.add_argument(
        "--context",
        type=Path,
        default=None,
        help="Project directory used for the local variant (defaults to the current directory).",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    root = args.root or Path(cache_cfg.CACHE_ROOT)

    if args.command == "list":
        for name in disk.list_names(root):
            print(name)
        return

    if args.command in ("show", "path"):
        name = local_name(args.name, args.context) if args.local else args.name
        target = root / f"{name}{disk.SUFFIX}"
        if args.command == "path":
            print(target)
            return
        if not target.is_file():
            parser.error(f"No cache named {name} under {root}.")
        json.dump(disk.load(target), sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
        return

    if args.command == "clear":
        registry = CacheRegistry(
            root, persistent=True, context=args.context, flush_at_exit=False
        )
        try:
            registry.clear(args.name)
        finally:
            registry.shutdown()
        return

    parser.print_help()


__all__ = ["main", "build_parser"]
