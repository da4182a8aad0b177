from __future__ import annotations

from pathlib import Path

import pytest
import requests

from playlist import settings, source
from playlist.errors import MalformedDocumentError, SourceUnavailableError
from playlist.source import absolute_path, fetch_document, is_remote, resolve_reference


class _FakeResponse:
    def __init__(self, status_code: int, content: bytes = b"") -> None:
        self.status_code = status_code
        self.content = content


def test_absolute_path_uses_explicit_base_dir(tmp_path) -> None:
    assert absolute_path(".\\lists\\a.asx", tmp_path) == str(tmp_path / "lists" / "a.asx")
    assert absolute_path("  ./a.asx ", tmp_path) == str(tmp_path / "a.asx")


def test_absolute_path_leaves_other_locators_alone(tmp_path) -> None:
    assert absolute_path(" http://x/a.asx ", tmp_path) == "http://x/a.asx"
    assert absolute_path("/srv/a.asx", tmp_path) == "/srv/a.asx"


def test_absolute_path_falls_back_to_configured_base_dir(tmp_path, monkeypatch) -> None:
    assert source.settings is settings
    monkeypatch.setattr(source.settings, "PLAYLIST_BASE_DIR", str(tmp_path))

    assert absolute_path("./a.asx") == str(tmp_path / "a.asx")


def test_is_remote() -> None:
    assert is_remote("http://x/a.asx") is True
    assert is_remote("HTTPS://x/a.asx") is True
    assert is_remote("file:///tmp/a.asx") is False
    assert is_remote("/tmp/a.asx") is False


def test_fetch_document_reads_relative_local_file(tmp_path) -> None:
    (tmp_path / "a.asx").write_bytes(b"<ASX/>")

    assert fetch_document("./a.asx", base_dir=tmp_path) == b"<ASX/>"


def test_fetch_document_reads_file_uri(tmp_path) -> None:
    target = tmp_path / "a.asx"
    target.write_bytes(b"<ASX/>")

    assert fetch_document(target.as_uri()) == b"<ASX/>"


def test_fetch_document_http(monkeypatch) -> None:
    calls: list[tuple[str, dict]] = []

    def fake_get(url, **kwargs):
        calls.append((url, kwargs))
        return _FakeResponse(200, b"<ASX/>")

    monkeypatch.setattr("playlist.source.requests.get", fake_get)
    monkeypatch.setattr(source.settings, "PLAYLIST_USER_AGENT", "TestAgent/2")

    payload = fetch_document("http://radio.example/a.asx", timeout=3)

    assert payload == b"<ASX/>"
    assert calls[0][0] == "http://radio.example/a.asx"
    assert calls[0][1]["timeout"] == 3
    assert calls[0][1]["headers"] == {"User-Agent": "TestAgent/2"}


def test_fetch_document_http_error_status(monkeypatch) -> None:
    monkeypatch.setattr("playlist.source.requests.get", lambda *args, **kwargs: _FakeResponse(404))

    with pytest.raises(SourceUnavailableError, match="HTTP 404"):
        fetch_document("http://radio.example/a.asx")


def test_fetch_document_http_transport_error(monkeypatch) -> None:
    def fake_get(*_args, **_kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr("playlist.source.requests.get", fake_get)

    with pytest.raises(SourceUnavailableError) as excinfo:
        fetch_document("https://radio.example/a.asx")

    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
    assert excinfo.value.locator == "https://radio.example/a.asx"


def test_fetch_document_logs_open(tmp_path, caplog) -> None:
    target = tmp_path / "a.asx"
    target.write_bytes(b"<ASX/>")

    with caplog.at_level("INFO", logger="playlist.source"):
        fetch_document(str(target))

    assert f"Open item: {target}" in caplog.text


def test_resolve_reference_keeps_absolute_uris() -> None:
    assert resolve_reference(" mms://media/a.wma ") == "mms://media/a.wma"


def test_resolve_reference_against_relative_local_source(tmp_path) -> None:
    resolved = resolve_reference("a.mp3", "./lists/main.asx", tmp_path)

    assert resolved == (tmp_path.resolve() / "lists" / "a.mp3").as_uri()


def test_resolve_reference_against_file_uri_source() -> None:
    assert resolve_reference("b.mp3", "file:///srv/lists/main.asx") == "file:///srv/lists/b.mp3"


def test_resolve_reference_rejects_empty() -> None:
    with pytest.raises(MalformedDocumentError):
        resolve_reference("  ", "http://x/a.asx")
