"""
Immutable input positions for the combinator engine.

A Position is a read-only view of the input text plus an offset. Parsers never
mutate a Position; every step that consumes input returns a new one.
"""

from attrs import field, frozen

from tagshell.exceptions.core import line_col


def _check_offset(instance: "Position", attribute, value: int) -> None:
    if not 0 <= value <= len(instance.text):
        raise ValueError(
            f"offset {value} out of range for input of length {len(instance.text)}"
        )


@frozen
class Position:
    """
    A location inside an input string.

    Params:
        text: The complete input being parsed
        offset: Number of characters already consumed
    """

    text: str = field(repr=False)
    offset: int = field(default=0, validator=_check_offset)

    @property
    def remaining(self) -> str:
        """The unconsumed part of the input."""
        return self.text[self.offset :]

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.offset)

    def peek(self, count: int = 1) -> str:
        """Return up to `count` characters at the current offset without consuming them."""
        return self.text[self.offset : self.offset + count]

    def advance(self, count: int) -> "Position":
        """
        Return a new Position `count` characters further on.

        The offset is clamped to the end of the input, so the result is always
        a valid Position.
        """
        if count < 0:
            raise ValueError("positions only move forward")
        return Position(self.text, min(self.offset + count, len(self.text)))

    def line_col(self) -> tuple[int, int]:
        """1-based (line, column) of the offset, for diagnostics."""
        return line_col(self.text, self.offset)
