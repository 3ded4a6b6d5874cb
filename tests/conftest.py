"""
Shared pytest fixtures for mimeconf tests.

Fixture Organization
--------------------
- **write_mime_types**: writes a mime.types file into tmp_path
- **registry**: an empty, quiet MimeRegistry
- **sample_lines**: a small database excerpt with comments, conflicts
  and malformed lines
"""

from pathlib import Path
from typing import Callable, List

import pytest

from mimeconf.registry.registry import MimeRegistry

SAMPLE_MIME_TYPES = """\
###############################################################################
#
#  MIME media types and the extensions that represent them.
#
###############################################################################

application/gzip\t\t\t\t\tgz
application/javascript\t\t\t\tjs mjs
application/json\t\t\t\t\tjson
application/x-gtar-compressed\t\t\ttgz taz
audio/basic\t\t\t\t\tau snd
text/csv\t\t\t\t\tcsv
text/html\t\t\t\t\thtml htm shtml
text/plain\t\t\t\t\tasc txt text pot brf srt
text/x-csrc\t\t\t\t\tc
application/csv\t\t\t\t\tcsv
font/ttf\t\t\t\t\tttf
application/font-sfnt\t\t\t\totf
this line is malformed!
application/vnd.lotus-1-2-3\t\t\t\t123 wk
"""


@pytest.fixture
def write_mime_types(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes text to tmp_path/mime.types."""

    def _write(text: str) -> Path:
        path = tmp_path / "mime.types"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def registry() -> MimeRegistry:
    """Create an empty registry without diagnostics."""
    return MimeRegistry()


@pytest.fixture
def sample_lines() -> List[str]:
    """Lines of a small mime.types excerpt, newlines kept."""
    return SAMPLE_MIME_TYPES.splitlines(keepends=True)
