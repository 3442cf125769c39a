"""Default match, search and line strategies, plus the Strategies bundle.

The defaults are pure functions over the record set. They hold no state and
can be shared between any number of RemoteList instances and threads.
"""

from dataclasses import dataclass, fields

from remote_list.types import DataFilterFunc, DataLineFunc, HasFunc, Records, SearchFunc

COMMENT_PREFIXES = ("#", "//")


def default_has(records: Records, term: str) -> bool:
    """Return True if any record equals *term*, ignoring case."""
    term = term.lower()
    return any(rec.lower() == term for rec in records)


def default_has_prefix(records: Records, term: str) -> bool:
    """Return True if any record starts with *term*, ignoring case."""
    term = term.lower()
    return any(rec.lower().startswith(term) for rec in records)


def default_has_suffix(records: Records, term: str) -> bool:
    """Return True if any record ends with *term*, ignoring case."""
    term = term.lower()
    return any(rec.lower().endswith(term) for rec in records)


def default_search(records: Records, term: str) -> list[str]:
    """Return every record containing *term* (case-insensitive), sorted."""
    term = term.lower()
    return sorted(rec for rec in records if term in rec.lower())


def default_data_line(line: str) -> tuple[str, bool]:
    """Pass *line* through, excluding blank lines and ``#`` / ``//`` comments."""
    include = bool(line.strip()) and not line.startswith(COMMENT_PREFIXES)
    return line, include


@dataclass(frozen=True)
class Strategies:
    """Pluggable strategies used by a RemoteList.

    Any field left out (or passed as None) falls back to its default. A
    ``data_filter`` of None means the downloaded payload is stored as-is.

    Attributes:
        has: Exact-match predicate.
        has_prefix: Prefix-match predicate.
        has_suffix: Suffix-match predicate.
        search: Search returning all matching records.
        data_filter: Applied to the downloaded text before it is cached.
        data_line: Applied to each cached line on load; returns (parsed, include).
    """

    has: HasFunc = default_has
    has_prefix: HasFunc = default_has_prefix
    has_suffix: HasFunc = default_has_suffix
    search: SearchFunc = default_search
    data_filter: DataFilterFunc | None = None
    data_line: DataLineFunc = default_data_line

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name != "data_filter" and getattr(self, f.name) is None:
                object.__setattr__(self, f.name, f.default)
