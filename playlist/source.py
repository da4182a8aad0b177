"""Playlist locator normalization and document fetch."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path, PureWindowsPath
from urllib.parse import urljoin, urlparse
from urllib.request import url2pathname

import requests

from playlist import settings
from playlist.errors import MalformedDocumentError, SourceUnavailableError

logger = logging.getLogger(__name__)

_REMOTE_SCHEMES = frozenset({"http", "https"})
_DRIVE_PATH_RE = re.compile(r"^[A-Za-z]:[\\/]")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")


def absolute_path(locator: str, base_dir: str | os.PathLike[str] | None = None) -> str:
    """Resolve a ``.\\`` or ``./`` prefixed locator against ``base_dir``.

    ``base_dir`` falls back to ``PLAYLIST_BASE_DIR`` and then the process
    working directory. Any other locator is returned trimmed.
    """
    path = str(locator).strip()
    if not path.startswith((".\\", "./")):
        return path
    base = base_dir or settings.PLAYLIST_BASE_DIR or os.getcwd()
    return str(Path(base) / path[2:].replace("\\", "/"))


def is_remote(locator: str) -> bool:
    return urlparse(str(locator).strip()).scheme.lower() in _REMOTE_SCHEMES


def fetch_document(
    locator: str,
    *,
    base_dir: str | os.PathLike[str] | None = None,
    timeout: float | None = None,
) -> bytes:
    """Return the raw bytes of the playlist document at ``locator``."""
    resolved = absolute_path(locator, base_dir)
    logger.info("Open item: %s", resolved)
    if is_remote(resolved):
        return _fetch_remote(resolved, timeout)
    return _read_local(resolved)


def _fetch_remote(url: str, timeout: float | None) -> bytes:
    try:
        response = requests.get(
            url,
            headers={"User-Agent": settings.PLAYLIST_USER_AGENT},
            timeout=timeout if timeout is not None else settings.PLAYLIST_FETCH_TIMEOUT_SECONDS,
        )
    except requests.RequestException as exc:
        raise SourceUnavailableError(url, str(exc)) from exc
    if response.status_code != 200:
        raise SourceUnavailableError(url, f"HTTP {response.status_code}")
    return response.content


def _read_local(locator: str) -> bytes:
    path = _local_path(locator)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise SourceUnavailableError(locator, exc.strerror or str(exc)) from exc


def _local_path(locator: str) -> Path:
    parsed = urlparse(locator)
    if parsed.scheme.lower() == "file":
        return Path(url2pathname(parsed.path))
    return Path(locator)


def resolve_reference(
    value: str,
    source: str | None = None,
    base_dir: str | os.PathLike[str] | None = None,
) -> str:
    """Turn an entry reference into an absolute URI.

    Absolute URIs are kept as-is and Windows drive paths become ``file:``
    URIs. Relative values are joined to the playlist source.
    """
    text = (value or "").strip()
    if not text:
        raise MalformedDocumentError("empty reference")
    if _DRIVE_PATH_RE.match(text):
        return PureWindowsPath(text).as_uri()
    if _SCHEME_RE.match(text):
        return text
    if not source:
        raise MalformedDocumentError(f"relative reference without a source: {text}")

    origin = absolute_path(source, base_dir)
    if _SCHEME_RE.match(origin) and not _DRIVE_PATH_RE.match(origin):
        joined = urljoin(origin, text)
    else:
        parent = Path(origin).resolve().parent
        joined = (parent / text.replace("\\", "/")).resolve().as_uri()
    if not urlparse(joined).scheme:
        raise MalformedDocumentError(f"reference is not an absolute URI: {text}")
    return joined
