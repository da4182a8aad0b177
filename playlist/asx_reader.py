"""Reader for ASX (Windows Media XML) playlists."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from playlist.base import PlaylistFormat, PlaylistItem, PlaylistReader
from playlist.errors import MalformedDocumentError, MissingRequiredFieldError
from playlist.source import resolve_reference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AsxItem(PlaylistItem):
    format: PlaylistFormat = PlaylistFormat.ASX


class AsxReader(PlaylistReader):
    """:class:`PlaylistReader` backed by an ASX document."""

    def parse(self, payload: bytes, source: str | None = None) -> list[PlaylistItem]:
        return list(parse_asx(payload, source, self.base_dir))


def parse_asx(
    payload: bytes | str,
    source: str | None = None,
    base_dir: str | os.PathLike[str] | None = None,
) -> list[AsxItem]:
    """Parse an ASX document into items in document order.

    Tag and attribute names are matched literally. Each ``ENTRY`` must carry a
    ``REF`` with an ``HREF``; a missing one fails the whole document.
    """
    try:
        root = ET.fromstring(payload)
    except ET.ParseError as exc:
        raise MalformedDocumentError(f"invalid ASX document: {exc}") from exc

    items: list[AsxItem] = []
    for index, entry in enumerate(root.iter("ENTRY")):
        item = _parse_entry(entry, index, source, base_dir)
        logger.debug("ASX entry %d: %s", index, item.reference)
        items.append(item)
    return items


def _parse_entry(
    entry: ET.Element,
    index: int,
    source: str | None,
    base_dir: str | os.PathLike[str] | None,
) -> AsxItem:
    title_elem = _first(entry, "TITLE")
    title = "".join(title_elem.itertext()) if title_elem is not None else None

    ref_elem = _first(entry, "REF")
    href = ref_elem.get("HREF") if ref_elem is not None else None
    if href is None or not href.strip():
        raise MissingRequiredFieldError("REF", "HREF", index)
    reference = resolve_reference(href, source, base_dir)

    banner = None
    banner_elem = _first(entry, "BANNER")
    if banner_elem is not None and banner_elem.get("HREF") is not None:
        banner = resolve_reference(banner_elem.get("HREF"), source, base_dir)

    parameters: dict[str, str] = {}
    for param in entry.iter("PARAM"):
        key = param.get("NAME")
        if key is None:
            raise MissingRequiredFieldError("PARAM", "NAME", index)
        parameters[key] = param.get("VALUE", "")

    return AsxItem(title=title, reference=reference, banner=banner, parameters=parameters)


def _first(entry: ET.Element, tag: str) -> ET.Element | None:
    # iter() includes the element itself; only descendants count.
    for elem in entry.iter(tag):
        if elem is not entry:
            return elem
    return None
