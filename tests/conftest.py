import sys
from pathlib import Path

import pytest


# Ensure tests can import project packages regardless of how pytest is invoked.
ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


SAMPLE_ASX = b"""<ASX VERSION="3.0">
  <TITLE>Morning Mix</TITLE>
  <ENTRY>
    <TITLE>Song A</TITLE>
    <REF HREF="http://x/a.mp3"/>
  </ENTRY>
  <ENTRY>
    <TITLE>Song B</TITLE>
    <REF HREF="http://x/b.mp3"/>
    <PARAM NAME="vol" VALUE="5"/>
  </ENTRY>
  <ENTRY>
    <TITLE>Song C</TITLE>
    <REF HREF="http://x/c.mp3"/>
    <BANNER HREF="http://x/c.png"/>
  </ENTRY>
</ASX>
"""


@pytest.fixture
def sample_asx() -> bytes:
    return SAMPLE_ASX


@pytest.fixture
def write_playlist(tmp_path):
    def _write(content: bytes, filename: str = "list.asx") -> Path:
        path = tmp_path / filename
        path.write_bytes(content)
        return path

    return _write
