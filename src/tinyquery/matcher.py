"""
Key Matcher - Locates entries inside a query string.

A key matches after a "?" or "&" delimiter, case-insensitively, and must end
at "=", "&", "#" or the end of the text. The raw value runs up to the next
"&" or "#" and is returned still percent-encoded.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

from .constants import QUERY_MARK


@dataclass(frozen=True, slots=True)
class EntryMatch:
    """Span of one entry, delimiter included."""

    start: int
    end: int
    delimiter: str
    raw_value: str | None

    @property
    def is_flag(self) -> bool:
        return not self.raw_value


@lru_cache(maxsize=256)
def build_pattern(name: str) -> re.Pattern[str]:
    """Case-insensitive pattern for `?name` / `&name`, optionally `=value`."""
    return re.compile(
        r"([?&])" + re.escape(name) + r"(?:=([^&#]*))?(?=[&#]|\Z)",
        re.IGNORECASE,
    )


def find_entry(name: str, text: str, pos: int = 0) -> EntryMatch | None:
    """First entry for name at or after pos, scanning left to right."""
    match = build_pattern(name).search(text, pos)
    if match is None:
        return None
    return EntryMatch(
        start=match.start(),
        end=match.end(),
        delimiter=match.group(1),
        raw_value=match.group(2),
    )


def split_query(text: str) -> tuple[str, str]:
    """
    Split text into (prefix, query) at the first "?".

    The query keeps its leading "?" and is "" when there is none.
    """
    idx = text.find(QUERY_MARK)
    if idx < 0:
        return text, ""
    return text[:idx], text[idx:]
