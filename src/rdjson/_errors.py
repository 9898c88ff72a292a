"""Error taxonomy and the positioned decode error raised by the parser."""

from __future__ import annotations

from enum import Enum
from typing import Final
from typing import TypeAlias

Position: TypeAlias = int


class ErrorKind(Enum):
    """
    Grammar violations the parser can report.

    Every kind is fatal: the first one encountered aborts the parse.
    """

    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    UNEXPECTED_CHARACTER = "unexpected_character"
    INVALID_NUMBER_FORMAT = "invalid_number_format"
    UNTERMINATED_STRING = "unterminated_string"
    INVALID_ESCAPE_SEQUENCE = "invalid_escape_sequence"
    EXPECTED_COLON = "expected_colon"
    EXPECTED_COMMA_OR_BRACKET = "expected_comma_or_bracket"
    EXPECTED_COMMA_OR_BRACE = "expected_comma_or_brace"
    OBJECT_KEY_MUST_BE_STRING = "object_key_must_be_string"
    TRAILING_CHARACTERS = "trailing_characters"
    MAX_DEPTH_EXCEEDED = "max_depth_exceeded"


_MESSAGES: Final[dict[ErrorKind, str]] = {
    ErrorKind.UNEXPECTED_END_OF_INPUT: "Unexpected end of input",
    ErrorKind.UNEXPECTED_CHARACTER: "Unexpected character {detail!r}",
    ErrorKind.INVALID_NUMBER_FORMAT: "Invalid number format {detail!r}",
    ErrorKind.UNTERMINATED_STRING: "Unterminated string starting",
    ErrorKind.INVALID_ESCAPE_SEQUENCE: "Invalid escape sequence '\\{detail}'",
    ErrorKind.EXPECTED_COLON: "Expecting ':' delimiter",
    ErrorKind.EXPECTED_COMMA_OR_BRACKET: "Expecting ',' or ']' delimiter",
    ErrorKind.EXPECTED_COMMA_OR_BRACE: "Expecting ',' or '}}' delimiter",
    ErrorKind.OBJECT_KEY_MUST_BE_STRING: (
        "Expecting property name enclosed in double quotes"
    ),
    ErrorKind.TRAILING_CHARACTERS: "Extra data",
    ErrorKind.MAX_DEPTH_EXCEEDED: "Maximum nesting depth of {detail} exceeded",
}


class JSONDecodeError(ValueError):
    """
    Handles JSON parsing failures with precise position and context information.

    Carries the violation kind, the character index where it was detected,
    and line/column numbers computed from that index so callers can surface
    the failure to their own users verbatim.
    """

    def __init__(
        self,
        kind: ErrorKind,
        doc: str = "",
        pos: Position = 0,
        detail: str | int | None = None,
        msg: str | None = None,
    ) -> None:
        if not isinstance(kind, ErrorKind):
            raise TypeError("kind must be an ErrorKind")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.kind = kind
        self.doc = doc
        self.pos = pos
        self.detail = detail
        self.msg = msg if msg is not None else describe(kind, detail)

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(
            f"{self.msg} at line {self.lineno}, column {self.colno} (char {pos})"
        )

    def __reduce__(
        self,
    ) -> tuple[type[JSONDecodeError], tuple[object, ...]]:
        return (
            self.__class__,
            (self.kind, self.doc, self.pos, self.detail, self.msg),
        )


def describe(kind: ErrorKind, detail: str | int | None = None) -> str:
    """Renders the default human-readable message for an error kind."""
    return _MESSAGES[kind].format(detail=detail)
