"""Immutable parse configuration."""

import sys
from dataclasses import dataclass
from typing import Final

# Two interpreter frames per nesting level keeps this well under
# CPython's default recursion limit.
DEFAULT_MAX_DEPTH: Final = 256

FRAMES_PER_LEVEL: Final = 2
# Frames reserved for callers and for the leaf parsers below the deepest
# container.
STACK_HEADROOM: Final = 200


def max_supported_depth() -> int:
    """Returns the deepest nesting the current recursion limit can parse."""
    return (sys.getrecursionlimit() - STACK_HEADROOM) // FRAMES_PER_LEVEL


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    max_depth bounds how many arrays/objects may be nested inside each other;
    the document's outermost container sits at depth 1.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        ceiling = max_supported_depth()
        if self.max_depth > ceiling:
            raise ValueError(
                f"max_depth must be at most {ceiling} under the current "
                f"recursion limit of {sys.getrecursionlimit()}"
            )
