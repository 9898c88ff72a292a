"""
Test data generators for JSON parsing benchmarks.

Builds documents that stress each sub-parser separately:
- Object-heavy configuration documents
- Number-heavy arrays (signs, fractions, exponents)
- Strings full of escapes, including \\u escapes and surrogate pairs
- Nesting close to the default depth limit
"""

import json
import random
import string
from typing import Any

from rdjson import DEFAULT_MAX_DEPTH

# Seeded so every library sees the same documents within a run
_RNG = random.Random(20240615)
_ESCAPE_PROBABILITY = 0.3
_SIMPLE_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "config_document": _generate_config_document,
        "number_array": _generate_number_array,
        "escaped_strings": _generate_escaped_strings,
        "deep_nesting": _generate_deep_nesting,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def _generate_small_object() -> str:
    """Generates a small object of the kind config loaders hand over."""
    data = {
        "service": "ingest",
        "port": 8080,
        "debug": False,
        "timeout": 2.5,
        "replicas": None,
        "tags": ["alpha", "beta"],
    }
    return json.dumps(data)


def _generate_config_document() -> str:
    """Generates a large object with many nested sections (> 10KB)."""
    sections: dict[str, Any] = {}
    for i in range(120):
        sections[f"section_{i:03d}"] = {
            "enabled": _RNG.choice([True, False]),
            "weight": round(_RNG.uniform(0.0, 1.0), 4),
            "retries": _RNG.randint(0, 10),
            "endpoint": f"https://{_random_word(8)}.example.com/{_random_word(5)}",
            "labels": [_random_word(6) for _ in range(_RNG.randint(0, 4))],
            "fallback": None,
        }
    return json.dumps({"version": 3, "sections": sections}, indent=2)


def _generate_number_array() -> str:
    """Generates an array exercising every branch of the number grammar."""
    numbers: list[str] = []
    for _ in range(2000):
        sign = _RNG.choice(["", "-"])
        integer = str(_RNG.randint(0, 10**_RNG.randint(0, 12)))
        fraction = _RNG.choice(["", f".{_RNG.randint(0, 999999)}"])
        exponent = _RNG.choice(
            ["", f"e{_RNG.randint(-30, 30)}", f"E+{_RNG.randint(0, 30)}"]
        )
        numbers.append(f"{sign}{integer}{fraction}{exponent}")
    return "[" + ", ".join(numbers) + "]"


def _generate_escaped_strings() -> str:
    """Generates strings dense with simple, BMP and astral escapes."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(60):
            roll = _RNG.random()
            if roll < _ESCAPE_PROBABILITY:
                chars.append(_RNG.choice(_SIMPLE_ESCAPES))
            elif roll < _ESCAPE_PROBABILITY + 0.1:
                chars.append(f"\\u{_RNG.randint(0x00A0, 0xD7FF):04x}")
            elif roll < _ESCAPE_PROBABILITY + 0.15:
                # U+1F600 as a surrogate pair
                chars.append("\\ud83d\\ude00")
            else:
                chars.append(
                    _RNG.choice(string.ascii_letters + string.digits + " ")
                )
        return '"' + "".join(chars) + '"'

    members = [
        f'"key_{i}": {create_escaped_string()}' for i in range(200)
    ]
    return "{" + ", ".join(members) + "}"


def _generate_deep_nesting() -> str:
    """Generates alternating arrays/objects just inside the depth limit."""
    depth = DEFAULT_MAX_DEPTH - 1
    opening = []
    closing = []
    for level in range(depth):
        if level % 2:
            opening.append(f'{{"level_{level}": ')
            closing.append("}")
        else:
            opening.append("[")
            closing.append("]")
    return "".join(opening) + "null" + "".join(reversed(closing))


def _random_word(length: int) -> str:
    """Generates a random lowercase word of specified length."""
    return "".join(_RNG.choices(string.ascii_lowercase, k=length))
