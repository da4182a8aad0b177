from __future__ import annotations

import logging
import os
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Sequence

from playlist.cursor import PlaylistCursor
from playlist.errors import InvalidArgumentError, PlaylistIndexError
from playlist.source import fetch_document

logger = logging.getLogger(__name__)


class PlaylistFormat(Enum):
    ASX = "asx"


class PlayerType(Enum):
    """Rendering component an item list is meant for."""

    UNKNOWN = "unknown"
    AUDIO = "audio"
    VIDEO = "video"


@dataclass(frozen=True)
class PlaylistItem:
    title: str | None
    reference: str
    format: PlaylistFormat
    banner: str | None = None
    # Read-only view; not part of the hash.
    parameters: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "reference": self.reference,
            "format": self.format.value,
            "banner": self.banner,
            "parameters": dict(self.parameters),
        }


class PlaylistReader(ABC):
    """Common navigation and metadata over a loaded playlist.

    Concrete readers implement :meth:`parse` for one document format;
    :meth:`read` fetches the source and builds a new reader from the parsed
    items. The item list is fixed at construction and the cursor is the only
    mutable state.
    """

    def __init__(
        self,
        items: Sequence[PlaylistItem] | None = None,
        name: str | None = None,
        *,
        source: str | None = None,
        randomized: bool = False,
        player_type: PlayerType = PlayerType.UNKNOWN,
        base_dir: str | os.PathLike[str] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._items: tuple[PlaylistItem, ...] = tuple(items or ())
        self._name = name
        self._source = source
        self._randomized = bool(randomized)
        self._cursor = PlaylistCursor()
        self.player_type = player_type
        self.base_dir = base_dir
        self._rng = rng

    @classmethod
    def from_source(
        cls,
        source: str | None,
        name: str | None = None,
        randomize: bool = False,
        *,
        base_dir: str | os.PathLike[str] | None = None,
        rng: random.Random | None = None,
    ) -> "PlaylistReader":
        return cls(base_dir=base_dir, rng=rng).read(source, name, randomize)

    @abstractmethod
    def parse(self, payload: bytes, source: str | None = None) -> list[PlaylistItem]:
        """Turn a raw document into items in document order."""
        raise NotImplementedError

    def read(
        self,
        source: str | None,
        name: str | None = None,
        randomize: bool = False,
    ) -> "PlaylistReader":
        """Load ``source`` and return a new, fully populated reader.

        The receiver is left untouched. Any fetch or parse error propagates;
        no partial playlist is ever returned.
        """
        locator = require_source(source)
        payload = fetch_document(locator, base_dir=self.base_dir)
        return self.load(payload, locator, name, randomize)

    def load(
        self,
        payload: bytes,
        source: str | None = None,
        name: str | None = None,
        randomize: bool = False,
    ) -> "PlaylistReader":
        """Build a new reader from an already fetched document."""
        items = self.parse(payload, source)
        if randomize:
            items = shuffled(items, self._rng)
        logger.info("Loaded %d playlist items from %s", len(items), source)
        return type(self)(
            items,
            name,
            source=source,
            randomized=randomize,
            player_type=self.player_type,
            base_dir=self.base_dir,
            rng=self._rng,
        )

    @property
    def items(self) -> list[PlaylistItem]:
        return list(self._items)

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def randomized(self) -> bool:
        return self._randomized

    @property
    def current_index(self) -> int:
        return self._cursor.position

    @property
    def current_item(self) -> PlaylistItem:
        if not self._items:
            raise PlaylistIndexError("playlist is empty")
        return self._items[self._cursor.position]

    def next_item(self) -> None:
        self._cursor.advance(len(self._items))

    def set_item(self, index: int) -> bool:
        """Select the item at ``index``.

        Out-of-range indexes leave the cursor where it was and return False.
        """
        return self._cursor.select(index, len(self._items))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "source": self._source,
            "randomized": self._randomized,
            "player_type": self.player_type.value,
            "current_index": self._cursor.position,
            "items": [item.to_dict() for item in self._items],
        }

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PlaylistItem]:
        return iter(self._items)


def require_source(source: str | None) -> str:
    text = str(source).strip() if source is not None else ""
    if not text:
        raise InvalidArgumentError("source is required")
    return text


def shuffled(items: Sequence[PlaylistItem], rng: random.Random | None = None) -> list[PlaylistItem]:
    """Return a uniformly shuffled copy of ``items``."""
    result = list(items)
    (rng or random.Random()).shuffle(result)
    return result
