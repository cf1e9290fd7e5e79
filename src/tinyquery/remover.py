"""Deletes: one key, several keys, or the whole query."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .matcher import find_entry, split_query
from .reader import Reader
from .source import SourceResolver
from .writer import Writer

logger = logging.getLogger(__name__)


class Remover:
    """
    Rebuilds the query without the removed keys.

    Surviving entries keep their original, still-encoded values and their
    first-seen spelling; later duplicates of a name collapse into the first.
    Removing a key that is not present returns the text unchanged.
    """

    __slots__ = ("_resolver", "_reader", "_writer")

    def __init__(self, resolver: SourceResolver, reader: Reader, writer: Writer) -> None:
        self._resolver = resolver
        self._reader = reader
        self._writer = writer

    def remove_one(self, name: str, text: str | None = None) -> str:
        resolved = self._resolver.resolve(text)
        prefix, query = split_query(resolved)
        names = self._reader.names(query)
        if not names:
            return prefix

        target = name.lower()
        if all(key.lower() != target for key in names):
            logger.debug(f"Key not present, nothing to remove: {name!r}")
            return resolved

        seen: set[str] = set()
        result = prefix
        for key in names:
            folded = key.lower()
            if folded == target or folded in seen:
                continue
            seen.add(folded)
            entry = find_entry(key, query)
            raw_value = entry.raw_value if entry is not None else None
            result = self._writer.set_encoded(key, raw_value, result)

        logger.debug(f"Removed {name!r}, {len(seen)} entries remain")
        return result

    def remove_many(self, names: Iterable[str], text: str | None = None) -> str:
        result = self._resolver.resolve(text)
        for name in names:
            result = self.remove_one(name, result)
        return result

    def remove_all(self, text: str | None = None) -> str:
        prefix, _ = split_query(self._resolver.resolve(text))
        return prefix
