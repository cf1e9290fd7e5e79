"""tinyquery - Read and write key/value pairs in URL query strings."""

from tinyquery.config import TinyQueryConfig, configure_logging, load_config
from tinyquery.engine import QueryString
from tinyquery.errors import ConfigError, QueryDecodeError, TinyQueryError
from tinyquery.matcher import split_query
from tinyquery.models import AllKeys, Entry, EntryList, KeyList, SingleEntry, SingleKey
from tinyquery.source import EnvironSource, QuerySource, StaticSource

# Module-level operations read the process environment when text is omitted.
_default = QueryString(EnvironSource())

get_one = _default.get_one
get_many = _default.get_many
get_all = _default.get_all
has = _default.has
set_one = _default.set_one
set_many = _default.set_many
remove_one = _default.remove_one
remove_many = _default.remove_many
remove_all = _default.remove_all


def default_engine() -> QueryString:
    return _default


__all__ = [
    "QueryString",
    "default_engine",
    "get_one",
    "get_many",
    "get_all",
    "has",
    "set_one",
    "set_many",
    "remove_one",
    "remove_many",
    "remove_all",
    "split_query",
    "Entry",
    "SingleKey",
    "KeyList",
    "AllKeys",
    "SingleEntry",
    "EntryList",
    "QuerySource",
    "StaticSource",
    "EnvironSource",
    "TinyQueryConfig",
    "load_config",
    "configure_logging",
    "TinyQueryError",
    "QueryDecodeError",
    "ConfigError",
]
