from __future__ import annotations

import os
import random
from urllib.parse import urlparse

from playlist.asx_reader import AsxReader
from playlist.base import PlaylistReader, require_source
from playlist.errors import InvalidArgumentError
from playlist.source import fetch_document

_READERS_BY_EXTENSION: dict[str, type[PlaylistReader]] = {
    ".asx": AsxReader,
    ".wax": AsxReader,
    ".wvx": AsxReader,
}


def detect_format(locator: str, payload: bytes | None = None) -> type[PlaylistReader]:
    raw = str(locator or "").strip()
    lower_name = (urlparse(raw).path or raw).replace("\\", "/").lower()

    for extension, reader in _READERS_BY_EXTENSION.items():
        if lower_name.endswith(extension):
            return reader

    if payload is not None:
        sniff = payload.lstrip()[:200].lower()
        if b"<asx" in sniff:
            return AsxReader

    raise InvalidArgumentError(f"unsupported playlist format: {locator}")


def open_playlist(
    locator: str | None,
    name: str | None = None,
    randomize: bool = False,
    *,
    base_dir: str | os.PathLike[str] | None = None,
    rng: random.Random | None = None,
) -> PlaylistReader:
    """Fetch ``locator`` once and load it with the matching reader."""
    source = require_source(locator)
    payload = fetch_document(source, base_dir=base_dir)
    reader_cls = detect_format(source, payload)
    return reader_cls(base_dir=base_dir, rng=rng).load(payload, source, name, randomize)
