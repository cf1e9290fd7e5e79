# src/tinyquery/constants.py

from __future__ import annotations

# Query syntax
QUERY_MARK = "?"
PAIR_SEPARATOR = "&"
VALUE_SEPARATOR = "="
FRAGMENT_MARK = "#"

# Characters left unescaped when encoding values (ECMAScript encodeURIComponent)
URI_COMPONENT_SAFE = "-_.!~*'()"

# Defaults
DEFAULT_CONFIG_FILENAME = "tinyquery.yaml"
DEFAULT_ENVIRON_VAR = "QUERY_STRING"
