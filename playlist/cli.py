"""Command line entry point: load a playlist and list its items."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from playlist.dispatcher import open_playlist
from playlist.errors import PlaylistError

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _setup_logging(verbose: bool) -> None:
    root = logging.getLogger("")
    level = logging.DEBUG if verbose else logging.INFO
    root.setLevel(level)
    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(console)
    for handler in root.handlers:
        handler.setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zoneplaylist", description="Load a playlist and list its items.")
    parser.add_argument("locator", help="Playlist file path or http(s) URL.")
    parser.add_argument("--name", default=None, help="Display name for the playlist.")
    parser.add_argument("--randomize", action="store_true", help="Shuffle the items after loading.")
    parser.add_argument("--base-dir", default=None, help="Directory for resolving .\\ and ./ locators.")
    parser.add_argument("--json", action="store_true", help="Print the playlist as JSON.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        reader = open_playlist(args.locator, args.name, args.randomize, base_dir=args.base_dir)
    except PlaylistError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(reader.to_dict(), indent=2))
        return 0

    label = reader.name or reader.source
    print(f"playlist={label!r} items={len(reader)} randomized={reader.randomized}")
    for idx, item in enumerate(reader, start=1):
        print(f"{idx}. {item.title or '-'} | {item.reference}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
