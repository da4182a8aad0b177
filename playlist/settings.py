"""Application settings constants."""

from __future__ import annotations

import os

# Seconds to wait for a remote playlist document before giving up.
PLAYLIST_FETCH_TIMEOUT_SECONDS = float(os.getenv("PLAYLIST_FETCH_TIMEOUT_SECONDS", "20"))

# User-Agent sent with remote playlist fetches.
PLAYLIST_USER_AGENT = os.getenv("PLAYLIST_USER_AGENT", "ZonePlayer/1.0")

# Directory that ``.\`` and ``./`` playlist locators are resolved against.
PLAYLIST_BASE_DIR = (os.getenv("PLAYLIST_BASE_DIR") or "").strip() or None
