"""Upserts: add an entry or rewrite the existing one in place."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from .codec import encode_component, format_value
from .constants import PAIR_SEPARATOR, QUERY_MARK, VALUE_SEPARATOR
from .matcher import find_entry, split_query
from .models import EntriesInput, Entry
from .source import SourceResolver

logger = logging.getLogger(__name__)


def format_pair(name: str, value: Any = None) -> str:
    """`name=encoded` for a literal value, bare `name` for a flag."""
    literal = format_value(value)
    if literal is None:
        return name
    return f"{name}{VALUE_SEPARATOR}{encode_component(literal)}"


def upsert_pair(text: str, name: str, pair: str) -> str:
    """
    Put an already formatted pair into text.

    Without a query (no "?", or nothing after it) the pair starts one.
    An existing entry is replaced in place, keeping its delimiter.
    Otherwise the pair is appended.
    """
    prefix, query = split_query(text)
    if len(query) <= 1:
        return f"{prefix}{QUERY_MARK}{pair}"

    entry = find_entry(name, text, len(prefix))
    if entry is not None:
        logger.debug(f"Replacing entry {name!r} at {entry.start}:{entry.end}")
        return text[: entry.start] + entry.delimiter + pair + text[entry.end :]

    logger.debug(f"Appending entry {name!r}")
    return f"{text}{PAIR_SEPARATOR}{pair}"


def iter_entries(entries: EntriesInput) -> Iterator[tuple[str, Any]]:
    """(name, value) pairs from a mapping, names, Entry records or tuples."""
    if isinstance(entries, Mapping):
        yield from entries.items()
        return
    if isinstance(entries, str):
        raise TypeError("entries must be a mapping or a sequence, not a single string")
    for item in entries:
        if isinstance(item, str):
            yield item, None
        elif isinstance(item, Entry):
            yield item.name, item.value
        else:
            name, value = item
            yield name, value


class Writer:
    __slots__ = ("_resolver",)

    def __init__(self, resolver: SourceResolver) -> None:
        self._resolver = resolver

    def set_one(self, name: str, value: Any = None, text: str | None = None) -> str:
        return upsert_pair(self._resolver.resolve(text), name, format_pair(name, value))

    def set_encoded(self, name: str, raw_value: str | None, text: str | None = None) -> str:
        """Like set_one, for a value that is already percent-encoded."""
        pair = f"{name}{VALUE_SEPARATOR}{raw_value}" if raw_value else name
        return upsert_pair(self._resolver.resolve(text), name, pair)

    def set_many(self, entries: EntriesInput, text: str | None = None) -> str:
        result = self._resolver.resolve(text)
        for name, value in iter_entries(entries):
            result = self.set_one(name, value, result)
        return result
