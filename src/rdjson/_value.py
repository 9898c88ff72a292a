"""Value model produced by the parser."""

from enum import Enum

# Type aliases for domain concepts - recursive definition
JsonValue = (
    str | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)


class ValueKind(Enum):
    """The six cases a parsed JSON value can take."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: object) -> ValueKind:  # noqa: PLR0911
    """
    Classifies a value tree node into its JSON case.

    Booleans are tested before numbers since ``bool`` subclasses ``int``.
    """
    if value is None:
        return ValueKind.NULL
    elif isinstance(value, bool):
        return ValueKind.BOOL
    elif isinstance(value, int | float):
        return ValueKind.NUMBER
    elif isinstance(value, str):
        return ValueKind.STRING
    elif isinstance(value, list):
        return ValueKind.ARRAY
    elif isinstance(value, dict):
        return ValueKind.OBJECT
    else:
        msg = f"Object of type {type(value).__name__} is not a JSON value"
        raise TypeError(msg)
