import io
import os
import time
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

SAMPLE_LIST = """\
# Example blocklist, updated daily
// generated by a test

1.2.3.4
5.6.7.8
Example.com
ads.example.net
"""


def _capture_console() -> tuple[Console, io.StringIO]:
    """Create a Console that writes to a StringIO for test capturing."""
    buf = io.StringIO()
    return Console(file=buf, force_terminal=False, width=120), buf


def _mock_response(text: str = SAMPLE_LIST, status_code: int = 200) -> MagicMock:
    """Build a stand-in for an httpx.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.text = text
    response.content = text.encode("utf-8")
    return response


def _age_file(path: Path, seconds: float) -> None:
    """Set the mtime of *path* to *seconds* in the past."""
    past = time.time() - seconds
    os.utime(path, (past, past))


@pytest.fixture
def cache_file(tmp_path: Path) -> Path:
    return tmp_path / "list.txt"


@pytest.fixture
def fresh_cache(cache_file: Path) -> Path:
    """A cache file that was just written with SAMPLE_LIST."""
    cache_file.write_text(SAMPLE_LIST)
    return cache_file
