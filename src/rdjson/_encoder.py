"""
Canonical JSON encoding for value trees.

Produces one fixed textual form per tree: compact separators, object keys
in sorted order, shortest round-tripping float text. Parsing the output
yields a tree equal to the input.
"""

import math
from typing import Any
from typing import Final

_ESCAPED: Final = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Characters below this code point must be escaped inside strings
_CONTROL_LIMIT: Final = 0x20


def _encode_string(s: str) -> str:
    """Encode string with proper escape sequences."""
    result = ['"']
    for char in s:
        if char in _ESCAPED:
            result.append(_ESCAPED[char])
        elif ord(char) < _CONTROL_LIMIT:
            result.append(f"\\u{ord(char):04x}")
        else:
            result.append(char)
    result.append('"')
    return "".join(result)


def _encode_number(n: int | float) -> str:
    """Encode numeric values with JSON compliance."""
    if isinstance(n, float):
        if math.isnan(n) or math.isinf(n):
            msg = "Out of range float values are not JSON compliant"
            raise ValueError(msg)
        return repr(n)
    return str(n)


def _encode_array(arr: list[Any]) -> str:
    return "[" + ",".join(_encode_value(item) for item in arr) + "]"


def _encode_dict(d: dict[Any, Any]) -> str:
    """Encode dictionary with keys in sorted order."""
    for key in d:
        if not isinstance(key, str):
            msg = f"keys must be strings, not {type(key).__name__}"
            raise TypeError(msg)

    members = [
        f"{_encode_string(key)}:{_encode_value(value)}"
        for key, value in sorted(d.items(), key=lambda item: item[0])
    ]
    return "{" + ",".join(members) + "}"


def _encode_value(obj: Any) -> str:  # noqa: PLR0911
    """Encode any JSON-serializable value."""
    if obj is None:
        return "null"
    elif obj is True:
        return "true"
    elif obj is False:
        return "false"
    elif isinstance(obj, str):
        return _encode_string(obj)
    elif isinstance(obj, int | float):
        return _encode_number(obj)
    elif isinstance(obj, dict):
        return _encode_dict(obj)
    elif isinstance(obj, list):
        return _encode_array(obj)
    else:
        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg)


def dumps(obj: Any) -> str:
    """
    Serializes a value tree to its canonical JSON text.

    Accepts the types the parser produces (plus ``int``); anything else
    raises TypeError, and non-finite floats raise ValueError.
    """
    return _encode_value(obj)
