# src/tinyquery/errors.py
from __future__ import annotations


class TinyQueryError(Exception):
    """Base exception for all tinyquery errors."""
    code: str = "TINYQUERY-UNKNOWN"
    recoverable: bool = False

    def __init__(self, message: str, code: str | None = None, recoverable: bool | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code
        if recoverable is not None:
            self.recoverable = recoverable


class QueryDecodeError(TinyQueryError, ValueError):
    """Raised when a stored value is not valid percent-encoded UTF-8."""
    code = "TINYQUERY-DECODE"

    def __init__(self, raw_value: str, reason: str):
        super().__init__(f"Malformed percent-encoding in {raw_value!r}: {reason}")
        self.raw_value = raw_value
        self.reason = reason


class ConfigurationError(TinyQueryError):
    code = "TINYQUERY-CONFIG"


class ConfigError(ConfigurationError):
    pass
