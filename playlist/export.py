"""Playlist export helpers."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable

from playlist.base import PlaylistItem

_INVALID_FS_CHARS_RE = re.compile(r'[<>:"/\\|?*]')
_MULTISPACE_RE = re.compile(r"\s+")


def serialize_asx(items: Iterable[PlaylistItem], name: str | None = None) -> str:
    """Render items as an ASX 3.0 document."""
    root = ET.Element("ASX", {"VERSION": "3.0"})
    if name:
        ET.SubElement(root, "TITLE").text = name
    for item in items:
        entry = ET.SubElement(root, "ENTRY")
        if item.title is not None:
            ET.SubElement(entry, "TITLE").text = item.title
        ET.SubElement(entry, "REF", {"HREF": item.reference})
        if item.banner is not None:
            ET.SubElement(entry, "BANNER", {"HREF": item.banner})
        for key, value in item.parameters.items():
            ET.SubElement(entry, "PARAM", {"NAME": key, "VALUE": value})
    ET.indent(root)
    return ET.tostring(root, encoding="unicode") + "\n"


def write_asx(playlist_root: Path, playlist_name: str, items: Iterable[PlaylistItem]) -> Path:
    """Create or overwrite an ASX playlist file.

    Rules:
    - Playlist files live under ``playlist_root``.
    - Filename format is ``{playlist_name}.asx``.
    - Writes are atomic (temp file then replace).
    """
    root = Path(playlist_root)
    root.mkdir(parents=True, exist_ok=True)

    safe_name = sanitize_playlist_name(playlist_name) or "playlist"
    target_path = root / f"{safe_name}.asx"
    temp_path = root / f".{safe_name}.asx.tmp"

    temp_path.write_text(serialize_asx(items, playlist_name), encoding="utf-8")
    temp_path.replace(target_path)
    return target_path


def sanitize_playlist_name(name: str) -> str:
    """Return a filesystem-safe playlist name."""
    text = _INVALID_FS_CHARS_RE.sub("", str(name))
    text = _MULTISPACE_RE.sub(" ", text).strip()
    return text.rstrip(" .")
