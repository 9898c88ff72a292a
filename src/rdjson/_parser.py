"""
Recursive-descent JSON parser.

Reads one complete document from a Cursor and builds the value tree
bottom-up. There is no separate tokenizing pass: every sub-parser consumes
characters straight from the cursor, and the value dispatcher picks the
sub-parser from a single character of lookahead.
"""

import math
from enum import Enum
from typing import Final
from typing import NoReturn

from rdjson._config import ParseConfig
from rdjson._cursor import Cursor
from rdjson._errors import ErrorKind
from rdjson._errors import JSONDecodeError
from rdjson._errors import Position
from rdjson._profiling import ProfileContext
from rdjson._value import JsonValue

DIGITS: Final = frozenset("0123456789")
HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")
ESCAPES: Final = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

HIGH_SURROGATES: Final = range(0xD800, 0xDC00)
LOW_SURROGATES: Final = range(0xDC00, 0xE000)


class ParseState(Enum):
    """
    States of the implicit parse state machine.

    The recursion itself drives the transitions; the parser only records
    where it is so a failed parse can be inspected afterwards.
    """

    AWAITING_VALUE = "awaiting_value"
    IN_STRING = "in_string"
    IN_NUMBER = "in_number"
    IN_ARRAY_ELEMENT = "in_array_element"
    IN_ARRAY_SEPARATOR = "in_array_separator"
    IN_OBJECT_KEY = "in_object_key"
    AFTER_KEY = "after_key"
    IN_OBJECT_VALUE = "in_object_value"
    IN_OBJECT_SEPARATOR = "in_object_separator"
    DONE = "done"
    ERROR = "error"


class JsonParser:
    """
    Parses a single JSON document held in memory.

    An instance owns its cursor and mutates it in place, so it parses
    exactly one document and must not be shared between threads. Separate
    instances share no state.
    """

    def __init__(self, text: str, config: ParseConfig | None = None) -> None:
        if not isinstance(text, str):
            raise TypeError(
                f"the JSON object must be str, not {type(text).__name__}"
            )
        self.cursor = Cursor(text)
        self.config = config if config is not None else ParseConfig()
        self.state = ParseState.AWAITING_VALUE

    def _fail(
        self,
        kind: ErrorKind,
        pos: Position,
        detail: str | int | None = None,
        msg: str | None = None,
    ) -> NoReturn:
        self.state = ParseState.ERROR
        raise JSONDecodeError(kind, self.cursor.text, pos, detail, msg)

    def parse(self) -> JsonValue:
        """
        Parses the whole document.

        Exactly one value must be present; anything but whitespace after it
        is reported as extra data.
        """
        if self.state in (ParseState.DONE, ParseState.ERROR):
            raise RuntimeError("JsonParser instances parse a single document")

        cursor = self.cursor
        with ProfileContext("parse", cursor.length):
            value = self.parse_value(0)

            cursor.skip_whitespace()
            if not cursor.at_end():
                self._fail(ErrorKind.TRAILING_CHARACTERS, cursor.pos)

        self.state = ParseState.DONE
        return value

    def parse_value(self, depth: int) -> JsonValue:
        """Dispatches on the next significant character."""
        cursor = self.cursor
        cursor.skip_whitespace()
        self.state = ParseState.AWAITING_VALUE

        char = cursor.peek()
        if char is None:
            self._fail(ErrorKind.UNEXPECTED_END_OF_INPUT, cursor.pos)

        if char == '"':
            return self.parse_string()
        elif char == "{":
            return self.parse_object(depth + 1)
        elif char == "[":
            return self.parse_array(depth + 1)
        elif char in DIGITS or char == "-":
            return self.parse_number()
        elif char == "n":
            return self.parse_null()
        elif char == "t" or char == "f":
            return self.parse_bool()
        else:
            self._fail(ErrorKind.UNEXPECTED_CHARACTER, cursor.pos, char)

    def _match_literal(self, literal: str) -> None:
        """Consumes ``literal`` exactly, failing at the first mismatch."""
        cursor = self.cursor
        if cursor.startswith(literal):
            cursor.pos += len(literal)
            return

        for expected in literal:
            char = cursor.peek()
            if char is None:
                self._fail(ErrorKind.UNEXPECTED_END_OF_INPUT, cursor.pos)
            if char != expected:
                self._fail(ErrorKind.UNEXPECTED_CHARACTER, cursor.pos, char)
            cursor.advance()

    def parse_null(self) -> None:
        self._match_literal("null")
        return None

    def parse_bool(self) -> bool:
        literal = "true" if self.cursor.peek() == "t" else "false"
        self._match_literal(literal)
        return literal == "true"

    def parse_string(self) -> str:
        """
        Parses a string literal, resolving every escape sequence.

        Characters other than the quote and backslash are kept verbatim.
        """
        with ProfileContext("parse_string"):
            cursor = self.cursor
            start = cursor.pos
            self._match_literal('"')
            self.state = ParseState.IN_STRING

            chunks: list[str] = []
            while True:
                char = cursor.advance()
                if char is None:
                    self._fail(ErrorKind.UNTERMINATED_STRING, start)
                if char == '"':
                    return "".join(chunks)
                if char == "\\":
                    chunks.append(self._parse_escape(cursor.pos - 1))
                else:
                    chunks.append(char)

    def _parse_escape(self, backslash_pos: Position) -> str:
        """Decodes the escape whose backslash sits at ``backslash_pos``."""
        cursor = self.cursor
        selector = cursor.advance()
        if selector is None:
            self._fail(ErrorKind.UNEXPECTED_END_OF_INPUT, cursor.pos)

        if selector in ESCAPES:
            return ESCAPES[selector]
        elif selector == "u":
            return self._parse_unicode_escape(backslash_pos)
        else:
            self._fail(
                ErrorKind.INVALID_ESCAPE_SEQUENCE, backslash_pos, selector
            )

    def _read_hex_quad(self, backslash_pos: Position) -> str:
        """Consumes the four hex digits following ``\\u``."""
        cursor = self.cursor
        digits = ""
        for _ in range(4):
            char = cursor.advance()
            if char is None:
                self._fail(ErrorKind.UNEXPECTED_END_OF_INPUT, cursor.pos)
            if char not in HEX_DIGITS:
                self._fail(
                    ErrorKind.INVALID_ESCAPE_SEQUENCE,
                    backslash_pos,
                    f"u{digits}{char}",
                )
            digits += char
        return digits

    def _parse_unicode_escape(self, backslash_pos: Position) -> str:
        """
        Decodes ``\\uXXXX``, joining a high/low surrogate pair into one
        code point. Unpaired surrogates are rejected.
        """
        cursor = self.cursor
        digits = self._read_hex_quad(backslash_pos)
        code_point = int(digits, 16)

        if code_point in LOW_SURROGATES:
            self._fail(
                ErrorKind.INVALID_ESCAPE_SEQUENCE, backslash_pos, f"u{digits}"
            )
        if code_point not in HIGH_SURROGATES:
            return chr(code_point)

        low_pos = cursor.pos
        if cursor.peek() is None:
            self._fail(ErrorKind.UNEXPECTED_END_OF_INPUT, low_pos)
        if cursor.peek() != "\\" or cursor.peek_ahead(1) != "u":
            self._fail(
                ErrorKind.INVALID_ESCAPE_SEQUENCE, backslash_pos, f"u{digits}"
            )
        cursor.pos += 2

        low_digits = self._read_hex_quad(low_pos)
        low = int(low_digits, 16)
        if low not in LOW_SURROGATES:
            self._fail(
                ErrorKind.INVALID_ESCAPE_SEQUENCE,
                low_pos,
                f"u{low_digits}",
            )

        return chr(0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00))

    def _scan_digits(self, start: Position) -> None:
        """Consumes one or more ASCII digits."""
        cursor = self.cursor
        if cursor.peek() not in DIGITS:
            self._fail(
                ErrorKind.INVALID_NUMBER_FORMAT,
                start,
                cursor.text[start : cursor.pos],
            )
        while cursor.peek() in DIGITS:
            cursor.advance()

    def _scan_integer_part(self, start: Position) -> None:
        """Scans the integer part; a leading zero stands alone."""
        cursor = self.cursor
        if cursor.peek() == "0":
            cursor.advance()
            if cursor.peek() in DIGITS:
                self._fail(
                    ErrorKind.INVALID_NUMBER_FORMAT,
                    start,
                    cursor.text[start : cursor.pos + 1],
                )
        else:
            self._scan_digits(start)

    def parse_number(self) -> float:
        """
        Parses a number literal into a float.

        Integral literals become floats too; a literal too large for a
        double is rejected rather than turned into infinity.
        """
        with ProfileContext("parse_number"):
            cursor = self.cursor
            start = cursor.pos
            self.state = ParseState.IN_NUMBER

            if cursor.peek() == "-":
                cursor.advance()
            self._scan_integer_part(start)

            has_dot = False
            has_exponent = False
            while True:
                char = cursor.peek()
                if char == ".":
                    if has_dot or has_exponent:
                        self._fail(
                            ErrorKind.INVALID_NUMBER_FORMAT,
                            start,
                            cursor.text[start : cursor.pos + 1],
                        )
                    has_dot = True
                    cursor.advance()
                    self._scan_digits(start)
                elif char == "e" or char == "E":
                    if has_exponent:
                        self._fail(
                            ErrorKind.INVALID_NUMBER_FORMAT,
                            start,
                            cursor.text[start : cursor.pos + 1],
                        )
                    has_exponent = True
                    cursor.advance()
                    if cursor.peek() in ("+", "-"):
                        cursor.advance()
                    self._scan_digits(start)
                else:
                    break

            # The scan above only admits literals float() accepts.
            literal = cursor.text[start : cursor.pos]
            value = float(literal)
            if not math.isfinite(value):
                self._fail(ErrorKind.INVALID_NUMBER_FORMAT, start, literal)
            return value

    def _check_depth(self, depth: int) -> None:
        if depth > self.config.max_depth:
            self._fail(
                ErrorKind.MAX_DEPTH_EXCEEDED,
                self.cursor.pos,
                self.config.max_depth,
            )

    def parse_array(self, depth: int) -> list[JsonValue]:
        """Parses an array whose opening bracket sits at nesting ``depth``."""
        with ProfileContext("parse_array"):
            self._check_depth(depth)
            cursor = self.cursor
            self._match_literal("[")
            cursor.skip_whitespace()

            values: list[JsonValue] = []
            if cursor.peek() == "]":
                cursor.advance()
                return values

            while True:
                self.state = ParseState.IN_ARRAY_ELEMENT
                values.append(self.parse_value(depth))

                self.state = ParseState.IN_ARRAY_SEPARATOR
                cursor.skip_whitespace()
                char = cursor.peek()
                if char == "]":
                    cursor.advance()
                    return values
                if char != ",":
                    self._fail(ErrorKind.EXPECTED_COMMA_OR_BRACKET, cursor.pos)

                cursor.advance()
                cursor.skip_whitespace()
                if cursor.peek() == "]":
                    self._fail(
                        ErrorKind.EXPECTED_COMMA_OR_BRACKET,
                        cursor.pos,
                        msg="Illegal trailing comma before end of array",
                    )

    def parse_object(self, depth: int) -> dict[str, JsonValue]:
        """
        Parses an object whose opening brace sits at nesting ``depth``.

        A repeated key keeps the value from its last occurrence.
        """
        with ProfileContext("parse_object"):
            self._check_depth(depth)
            cursor = self.cursor
            self._match_literal("{")
            cursor.skip_whitespace()

            members: dict[str, JsonValue] = {}
            if cursor.peek() == "}":
                cursor.advance()
                return members

            while True:
                self.state = ParseState.IN_OBJECT_KEY
                if cursor.peek() != '"':
                    self._fail(ErrorKind.OBJECT_KEY_MUST_BE_STRING, cursor.pos)
                key = self.parse_string()

                self.state = ParseState.AFTER_KEY
                cursor.skip_whitespace()
                if cursor.peek() != ":":
                    self._fail(ErrorKind.EXPECTED_COLON, cursor.pos)
                cursor.advance()

                self.state = ParseState.IN_OBJECT_VALUE
                members[key] = self.parse_value(depth)

                self.state = ParseState.IN_OBJECT_SEPARATOR
                cursor.skip_whitespace()
                char = cursor.peek()
                if char == "}":
                    cursor.advance()
                    return members
                if char != ",":
                    self._fail(ErrorKind.EXPECTED_COMMA_OR_BRACE, cursor.pos)

                cursor.advance()
                cursor.skip_whitespace()
                if cursor.peek() == "}":
                    self._fail(
                        ErrorKind.EXPECTED_COMMA_OR_BRACE,
                        cursor.pos,
                        msg="Illegal trailing comma before end of object",
                    )
