"""
Strict recursive-descent JSON parser.

Converts a complete, already-decoded text document into a tree of native
Python values (None, bool, float, str, list, dict). Every number becomes a
float, duplicate object keys keep their last value, and the first grammar
violation raises a JSONDecodeError carrying its kind and character position.
Trailing commas, comments and non-finite constants are rejected, and nesting
depth is bounded explicitly.
"""

from typing import Any

from rdjson._config import DEFAULT_MAX_DEPTH
from rdjson._config import ParseConfig
from rdjson._config import max_supported_depth
from rdjson._cursor import Cursor
from rdjson._encoder import dumps
from rdjson._errors import ErrorKind
from rdjson._errors import JSONDecodeError
from rdjson._errors import Position
from rdjson._parser import JsonParser
from rdjson._parser import ParseState
from rdjson._profiling import HotPathStats
from rdjson._profiling import clear_hot_path_stats
from rdjson._profiling import get_hot_path_stats
from rdjson._value import JsonValue
from rdjson._value import ValueKind
from rdjson._value import kind_of

__version__ = "0.1.0"


def parse(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> JsonValue:
    """
    Parses one JSON document into a value tree.

    Raises JSONDecodeError at the first grammar violation, including nesting
    deeper than ``max_depth`` arrays/objects.
    """
    return JsonParser(text, ParseConfig(max_depth=max_depth)).parse()


def loads(s: str, **kwargs: Any) -> JsonValue:
    """
    Parses JSON string into Python objects with strict standards compliance.

    Validates input type and delegates to parser with immutable configuration.
    """
    if not isinstance(s, str):
        raise TypeError(f"the JSON object must be str, not {type(s).__name__}")

    config = ParseConfig(**kwargs)
    return JsonParser(s, config).parse()


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Cursor",
    "ErrorKind",
    "HotPathStats",
    "JSONDecodeError",
    "JsonParser",
    "JsonValue",
    "ParseConfig",
    "ParseState",
    "Position",
    "ValueKind",
    "clear_hot_path_stats",
    "dumps",
    "get_hot_path_stats",
    "kind_of",
    "loads",
    "max_supported_depth",
    "parse",
]
