"""
Exceptions raised while constructing a RemoteList.

Queries on a ready list never raise; every failure below happens during
the fetch or load step and aborts construction.
"""

from pathlib import Path


class RemoteListError(Exception):
    """Base exception for all remote list errors."""


class FetchError(RemoteListError):
    """Raised when the remote list cannot be downloaded or returns a non-2xx status."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(f"list download failed for {url}: {message}")
        self.url = url
        self.status_code = status_code


class PersistError(RemoteListError):
    """Raised when the downloaded list cannot be written to the local cache file."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"could not write {path}: {message}")
        self.path = path


class LoadError(RemoteListError):
    """Raised when the local cache file cannot be read during initialization."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"error reading local file {path}: {message}")
        self.path = path
