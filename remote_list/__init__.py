"""Searchable in-memory copy of a remote, locally cached line list."""

from remote_list.errors import FetchError, LoadError, PersistError, RemoteListError
from remote_list.matchers import (
    Strategies,
    default_data_line,
    default_has,
    default_has_prefix,
    default_has_suffix,
    default_search,
)
from remote_list.remote_list import RemoteList

__all__ = [
    "FetchError",
    "LoadError",
    "PersistError",
    "RemoteList",
    "RemoteListError",
    "Strategies",
    "default_data_line",
    "default_has",
    "default_has_prefix",
    "default_has_suffix",
    "default_search",
]
