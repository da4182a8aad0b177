"""Playlist loading errors."""

from __future__ import annotations


class PlaylistError(Exception):
    pass


class InvalidArgumentError(PlaylistError, ValueError):
    pass


class SourceUnavailableError(PlaylistError):
    """The playlist document could not be fetched."""

    def __init__(self, locator: str, reason: str) -> None:
        super().__init__(f"playlist source unavailable: {locator} ({reason})")
        self.locator = locator
        self.reason = reason


class MalformedDocumentError(PlaylistError, ValueError):
    pass


class MissingRequiredFieldError(MalformedDocumentError):
    def __init__(self, element: str, attribute: str, entry_index: int) -> None:
        super().__init__(f"ENTRY #{entry_index} is missing {element} {attribute}")
        self.element = element
        self.attribute = attribute
        self.entry_index = entry_index


class PlaylistIndexError(PlaylistError, IndexError):
    pass
