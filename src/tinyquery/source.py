"""
Query Sources - Where an omitted text argument comes from.

Every operation accepts an optional text. When it is left out the resolver
asks its source for the current query, on every call. Sources are read-only.
"""

import os
from dataclasses import dataclass
from typing import Protocol

from .constants import DEFAULT_ENVIRON_VAR, QUERY_MARK


class QuerySource(Protocol):
    def current(self) -> str:
        """Current query string, "?" included, or "" when there is none."""
        ...


@dataclass(frozen=True, slots=True)
class StaticSource:
    """A fixed query string."""

    query: str = ""

    def current(self) -> str:
        return self.query


@dataclass(frozen=True, slots=True)
class EnvironSource:
    """
    The CGI-style query string in an environment variable.

    QUERY_STRING carries no leading "?", so one is added. Unset or empty
    variables give "" (headless processes).
    """

    var: str = DEFAULT_ENVIRON_VAR

    def current(self) -> str:
        raw = os.environ.get(self.var, "")
        if not raw or raw.startswith(QUERY_MARK):
            return raw
        return QUERY_MARK + raw


class SourceResolver:
    """Picks the explicit text when given, the source's query otherwise."""

    __slots__ = ("_source",)

    def __init__(self, source: QuerySource | None = None) -> None:
        self._source: QuerySource = source if source is not None else EnvironSource()

    @property
    def source(self) -> QuerySource:
        return self._source

    def resolve(self, text: str | None = None) -> str:
        if text is not None:
            return text
        return self._source.current()
