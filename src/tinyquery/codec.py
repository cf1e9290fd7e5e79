"""
Value Codec - Percent-encoding for query values.

Values are encoded the way a browser's encodeURIComponent does it (UTF-8
octets, everything outside the unreserved set escaped) and decoded strictly:
a stray "%" or escaped octets that are not UTF-8 raise instead of passing
through. "+" is a literal plus, never a space.
"""

import math
import re
from urllib.parse import quote as _quote
from urllib.parse import unquote_to_bytes as _unquote_to_bytes

from .constants import URI_COMPONENT_SAFE
from .errors import QueryDecodeError

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_MAX_PLAIN_FLOAT = 1e21


def encode_component(value: str) -> str:
    """Percent-encode a value for use inside a query string."""
    return _quote(value, safe=URI_COMPONENT_SAFE)


def decode_component(raw: str) -> str:
    """
    Decode a percent-encoded value.

    Raises QueryDecodeError on an incomplete escape or invalid UTF-8.
    """
    if "%" not in raw:
        return raw

    bad = _MALFORMED_ESCAPE.search(raw)
    if bad is not None:
        raise QueryDecodeError(raw, f"incomplete escape at offset {bad.start()}")

    try:
        return _unquote_to_bytes(raw).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise QueryDecodeError(raw, "escaped octets are not valid UTF-8") from exc


def format_value(value: object) -> str | None:
    """
    Literal text for a value, or None when the value makes a flag entry.

    Strings and finite numbers are literals, zero included. None, booleans,
    empty strings, NaN/infinity and any other type are flags.

    Integral floats below 1e21 are written without a fractional part or
    exponent (1.0 -> "1", 1e16 -> "10000000000000000"); other floats use
    str().
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
            return str(int(value))
        return str(value)
    return None
