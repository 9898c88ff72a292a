"""Character cursor over an in-memory JSON document."""

from typing import Final

from rdjson._errors import Position
from rdjson._profiling import ProfileContext

WHITESPACE: Final = frozenset(" \t\n\r")


class Cursor:
    """
    Owns the source text and the current read position.

    Positions are indices into the ``str`` itself, i.e. code points, so a
    multi-byte encoded character always occupies exactly one position.
    """

    def __init__(self, text: str) -> None:
        self.text: Final = text
        self.length: Final = len(text)
        self.pos: Position = 0

    def peek(self) -> str | None:
        """Returns current character without advancing, None at the end."""
        return self.text[self.pos] if self.pos < self.length else None

    def peek_ahead(self, offset: int) -> str | None:
        """Returns the character ``offset`` positions past the current one."""
        index = self.pos + offset
        return self.text[index] if index < self.length else None

    def advance(self) -> str | None:
        """Returns current character and advances position."""
        if self.pos >= self.length:
            return None
        char = self.text[self.pos]
        self.pos += 1
        return char

    def skip_whitespace(self) -> None:
        """Skips the four JSON whitespace characters and nothing else."""
        with ProfileContext("skip_whitespace"):
            text = self.text
            pos = self.pos
            while pos < self.length and text[pos] in WHITESPACE:
                pos += 1
            self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= self.length

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)
