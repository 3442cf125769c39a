"""Thread-safe, searchable in-memory copy of a cached remote list."""

import logging
import threading
from datetime import timedelta
from pathlib import Path

from remote_list.cache import DEFAULT_TIMEOUT, refresh_if_stale
from remote_list.errors import LoadError
from remote_list.matchers import Strategies

log = logging.getLogger(__name__)


class RemoteList:
    """A line-delimited remote list, cached on disk and held in memory.

    Construction downloads the list if the local copy is missing or stale,
    then loads it once. After that every public method takes the same lock,
    so a single instance can be shared across threads. Records added with
    ``add`` live in memory only.

    Raises:
        FetchError: If the list has to be downloaded and the download fails.
        PersistError: If the downloaded list cannot be written locally.
        LoadError: If the local copy cannot be read.
    """

    def __init__(
        self,
        local_path: str | Path,
        remote_url: str,
        max_age: timedelta | float,
        strategies: Strategies | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.local_path = Path(local_path)
        self.remote_url = remote_url
        self.max_age = max_age
        self.strategies = strategies or Strategies()
        self._lock = threading.Lock()
        self._records: set[str] = set()

        refresh_if_stale(
            self.local_path,
            self.remote_url,
            self.max_age,
            data_filter=self.strategies.data_filter,
            timeout=timeout,
        )
        self._load()

    def _load(self) -> None:
        try:
            text = self.local_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise LoadError(self.local_path, str(e)) from e

        for line in text.splitlines():
            parsed, include = self.strategies.data_line(line)
            if not include:
                continue
            self._records.add(parsed.strip())

        log.debug("Loaded %d records from %s", len(self._records), self.local_path)

    def has(self, term: str) -> bool:
        """Return True if *term* matches a record (case-insensitive by default)."""
        with self._lock:
            return self.strategies.has(self._records, term)

    def has_prefix(self, term: str) -> bool:
        """Return True if any record starts with *term*."""
        with self._lock:
            return self.strategies.has_prefix(self._records, term)

    def has_suffix(self, term: str) -> bool:
        """Return True if any record ends with *term*."""
        with self._lock:
            return self.strategies.has_suffix(self._records, term)

    def search(self, term: str) -> list[str]:
        """Return all records matching *term*, sorted."""
        with self._lock:
            return sorted(self.strategies.search(self._records, term))

    def add(self, value: str) -> None:
        """Add *value* (whitespace-stripped) to the in-memory records."""
        value = value.strip()
        with self._lock:
            self._records.add(value)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and self.has(term)

    def __repr__(self) -> str:
        return f"RemoteList({str(self.local_path)!r}, {self.remote_url!r})"

    def list(self) -> list[str]:
        """Return every record, sorted."""
        with self._lock:
            return sorted(self._records)
