"""Lookups: one key, several keys, or every key in the query."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .codec import decode_component
from .constants import FRAGMENT_MARK, PAIR_SEPARATOR, VALUE_SEPARATOR
from .matcher import find_entry, split_query
from .models import QueryValue
from .source import SourceResolver

logger = logging.getLogger(__name__)


def entry_names(text: str) -> list[str]:
    """
    Names of the entries after the first "?", left to right.

    Case is kept as found. Empty names are skipped and the fragment, if any,
    is ignored.
    """
    _, query = split_query(text)
    query = query[1:].split(FRAGMENT_MARK, 1)[0]
    if not query:
        return []
    names = []
    for pair in query.split(PAIR_SEPARATOR):
        name = pair.split(VALUE_SEPARATOR, 1)[0]
        if name:
            names.append(name)
    return names


class Reader:
    __slots__ = ("_resolver",)

    def __init__(self, resolver: SourceResolver) -> None:
        self._resolver = resolver

    def get_one(self, name: str, text: str | None = None) -> QueryValue:
        """Decoded value for name, True for a flag entry, False when absent."""
        entry = find_entry(name, self._resolver.resolve(text))
        if entry is None:
            logger.debug(f"Key not found: {name!r}")
            return False
        if entry.is_flag:
            return True
        return decode_component(entry.raw_value)

    def has(self, name: str, text: str | None = None) -> bool:
        return find_entry(name, self._resolver.resolve(text)) is not None

    def get_many(self, names: Iterable[str], text: str | None = None) -> dict[str, QueryValue]:
        resolved = self._resolver.resolve(text)
        return {name: self.get_one(name, resolved) for name in names}

    def get_all(self, text: str | None = None) -> dict[str, QueryValue]:
        resolved = self._resolver.resolve(text)
        names = entry_names(resolved)
        if not names:
            return {}
        return self.get_many(names, resolved)

    def names(self, text: str | None = None) -> list[str]:
        return entry_names(self._resolver.resolve(text))
