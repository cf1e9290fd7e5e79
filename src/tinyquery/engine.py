"""
Query String Engine - All operations around one injected source.

    qs = QueryString(StaticSource("?page=2"))
    qs.get_one("page")                      # "2"
    qs.set_one("sort", "name")              # "?page=2&sort=name"
    qs.remove(KeyList(["page"]), "/?page=2&q=x")   # "/?q=x"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .config import TinyQueryConfig, build_source
from .models import (
    AllKeys,
    EntriesInput,
    EntryList,
    EntrySelector,
    KeyList,
    KeySelector,
    QueryValue,
    SingleEntry,
    SingleKey,
)
from .reader import Reader
from .remover import Remover
from .source import QuerySource, SourceResolver
from .writer import Writer

logger = logging.getLogger(__name__)

_ALL_KEYS = AllKeys()


class QueryString:
    __slots__ = ("_resolver", "_reader", "_writer", "_remover")

    def __init__(self, source: QuerySource | None = None) -> None:
        self._resolver = SourceResolver(source)
        self._reader = Reader(self._resolver)
        self._writer = Writer(self._resolver)
        self._remover = Remover(self._resolver, self._reader, self._writer)

    @classmethod
    def from_config(cls, config: TinyQueryConfig) -> QueryString:
        return cls(build_source(config))

    @property
    def source(self) -> QuerySource:
        return self._resolver.source

    def __repr__(self) -> str:
        return f"QueryString({self.source!r})"

    # -- read -------------------------------------------------------------

    def get_one(self, name: str, text: str | None = None) -> QueryValue:
        return self._reader.get_one(name, text)

    def get_many(self, names: Iterable[str], text: str | None = None) -> dict[str, QueryValue]:
        return self._reader.get_many(names, text)

    def get_all(self, text: str | None = None) -> dict[str, QueryValue]:
        return self._reader.get_all(text)

    def has(self, name: str, text: str | None = None) -> bool:
        return self._reader.has(name, text)

    def get(
        self, selector: KeySelector = _ALL_KEYS, text: str | None = None
    ) -> QueryValue | dict[str, QueryValue]:
        match selector:
            case SingleKey(name=name):
                return self.get_one(name, text)
            case KeyList(names=names):
                return self.get_many(names, text)
            case AllKeys():
                return self.get_all(text)
        raise TypeError(f"Unsupported key selector: {selector!r}")

    # -- write ------------------------------------------------------------

    def set_one(self, name: str, value: Any = None, text: str | None = None) -> str:
        return self._writer.set_one(name, value, text)

    def set_many(self, entries: EntriesInput, text: str | None = None) -> str:
        return self._writer.set_many(entries, text)

    def set(self, selector: EntrySelector, text: str | None = None) -> str:
        match selector:
            case SingleEntry(name=name, value=value):
                return self.set_one(name, value, text)
            case EntryList(entries=entries):
                return self.set_many(entries, text)
        raise TypeError(f"Unsupported entry selector: {selector!r}")

    # -- remove -----------------------------------------------------------

    def remove_one(self, name: str, text: str | None = None) -> str:
        return self._remover.remove_one(name, text)

    def remove_many(self, names: Iterable[str], text: str | None = None) -> str:
        return self._remover.remove_many(names, text)

    def remove_all(self, text: str | None = None) -> str:
        return self._remover.remove_all(text)

    def remove(self, selector: KeySelector = _ALL_KEYS, text: str | None = None) -> str:
        match selector:
            case SingleKey(name=name):
                return self.remove_one(name, text)
            case KeyList(names=names):
                return self.remove_many(names, text)
            case AllKeys():
                return self.remove_all(text)
        raise TypeError(f"Unsupported key selector: {selector!r}")
