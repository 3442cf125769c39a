"""Fetch a remote list and keep a local cached copy of it.

The local file is only replaced when it is missing or older than the
configured maximum age. Writes go through a temporary file so a failed
download or write never leaves a truncated cache behind.
"""

import logging
import os
import stat
import tempfile
import time
from datetime import timedelta
from pathlib import Path

import httpx

from remote_list.errors import FetchError, PersistError
from remote_list.types import DataFilterFunc

log = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path.home() / ".cache" / "remote-list"
DEFAULT_MAX_AGE = timedelta(days=1)
DEFAULT_TIMEOUT = 30.0
DEFAULT_FILE_MODE = 0o644


def _as_timedelta(max_age: timedelta | float) -> timedelta:
    if isinstance(max_age, timedelta):
        return max_age
    return timedelta(seconds=max_age)


def cache_is_fresh(path: Path, max_age: timedelta | float, now: float | None = None) -> bool:
    """Check if *path* exists and is younger than *max_age*.

    Args:
        path: Local cache file.
        max_age: Maximum age, as a timedelta or a number of seconds.
        now: Current UNIX time; defaults to ``time.time()``.
    """
    try:
        mtime = path.stat().st_mtime
    except OSError:
        return False
    now = time.time() if now is None else now
    return now - mtime < _as_timedelta(max_age).total_seconds()


def download(url: str, timeout: float = DEFAULT_TIMEOUT) -> httpx.Response:
    """GET *url* and return the response with its body fully read.

    Raises:
        FetchError: On any transport error or a non-2xx status code.
    """
    try:
        response = httpx.get(url, follow_redirects=True, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(url, str(e)) from e

    if not response.is_success:
        raise FetchError(
            url,
            f"status code {response.status_code}",
            status_code=response.status_code,
        )
    return response


def write_cache(path: Path, data: bytes, mode: int | None = None) -> None:
    """Atomically replace *path* with *data*.

    When *mode* is None the permission bits of the existing file are kept,
    or ``DEFAULT_FILE_MODE`` is used for a new file.

    Raises:
        PersistError: If the directory, temp file or final rename fails.
    """
    tmp_name: str | None = None
    try:
        if mode is None:
            try:
                mode = stat.S_IMODE(path.stat().st_mode)
            except FileNotFoundError:
                mode = DEFAULT_FILE_MODE
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise PersistError(path, str(e)) from e


def refresh_if_stale(
    path: Path,
    url: str,
    max_age: timedelta | float,
    data_filter: DataFilterFunc | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> bool:
    """Download *url* into *path* unless the cached copy is still fresh.

    Args:
        path: Local cache file.
        url: Remote list location.
        max_age: Cache age at or beyond which the list is downloaded again.
        data_filter: Optional transform of the downloaded text before it is written.
        timeout: HTTP timeout in seconds.

    Returns:
        True if a new copy was written, False if the cache was fresh.

    Raises:
        FetchError: If the download fails.
        PersistError: If the cache file cannot be written.
    """
    if cache_is_fresh(path, max_age):
        log.debug("Cache %s is fresh, skipping download", path)
        return False

    log.info("Downloading %s", url)
    response = download(url, timeout=timeout)

    data = response.content
    if data_filter is not None:
        data = data_filter(response.text).encode("utf-8")

    write_cache(path, data)
    log.debug("Wrote %d bytes to %s", len(data), path)
    return True
