"""Shared typed aliases for the record set and its pluggable strategies."""

from collections.abc import Callable
from typing import TypeAlias

Records: TypeAlias = set[str]

HasFunc: TypeAlias = Callable[[Records, str], bool]
SearchFunc: TypeAlias = Callable[[Records, str], list[str]]
DataFilterFunc: TypeAlias = Callable[[str], str]
DataLineFunc: TypeAlias = Callable[[str], tuple[str, bool]]
