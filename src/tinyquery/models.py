# src/tinyquery/models.py
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

# Result of a single lookup: the decoded value, True for a flag, False if absent.
QueryValue: TypeAlias = str | bool


@dataclass(frozen=True, slots=True)
class Entry:
    """A name with an optional value, as passed to set_many."""

    name: str
    value: Any = None


EntriesInput: TypeAlias = Mapping[str, Any] | Sequence[str | Entry | tuple[str, Any]]


# ============================================================================
# Selectors for the dispatching get / set / remove
# ============================================================================


@dataclass(frozen=True, slots=True)
class SingleKey:
    name: str


@dataclass(frozen=True, slots=True)
class KeyList:
    names: Sequence[str]


@dataclass(frozen=True, slots=True)
class AllKeys:
    pass


@dataclass(frozen=True, slots=True)
class SingleEntry:
    name: str
    value: Any = None


@dataclass(frozen=True, slots=True)
class EntryList:
    entries: EntriesInput


KeySelector: TypeAlias = SingleKey | KeyList | AllKeys
EntrySelector: TypeAlias = SingleEntry | EntryList
