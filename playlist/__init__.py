"""Playlist readers and helpers."""

from playlist.asx_reader import AsxItem, AsxReader, parse_asx
from playlist.base import PlayerType, PlaylistFormat, PlaylistItem, PlaylistReader
from playlist.dispatcher import detect_format, open_playlist

__all__ = [
    "AsxItem",
    "AsxReader",
    "PlayerType",
    "PlaylistFormat",
    "PlaylistItem",
    "PlaylistReader",
    "detect_format",
    "open_playlist",
    "parse_asx",
]
