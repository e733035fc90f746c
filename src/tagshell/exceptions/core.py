"""
Exception classes and failure values for tagshell.

Combinators report problems as `ParseFailure` values and never raise. The
exception types below are used at the edges of the library, where a failed
parse or a broken command has to be surfaced to a caller as a single error.
"""

from dataclasses import dataclass, field
from enum import Enum


class ErrorKind(Enum):
    """Kinds of parse failure a combinator can report."""

    EXPECTED_LITERAL = "expected_literal"
    EXPECTED_IDENTIFIER = "expected_identifier"
    EXPECTED_WHITESPACE = "expected_whitespace"
    EXPECTED_AT_LEAST_ONE = "expected_at_least_one"
    PREDICATE_REJECTED = "predicate_rejected"
    TAG_MISMATCH = "tag_mismatch"
    TRAILING_INPUT = "trailing_input"
    NESTING_TOO_DEEP = "nesting_too_deep"


@dataclass(frozen=True)
class ParseFailure:
    """
    Value-level description of a failed parse attempt.

    Params:
        kind: What went wrong
        offset: Character offset in the input where the failure occurred
        expected: Text or description of what was expected, if known
        found: Text actually found at the offset, if known
        alternatives: Failures of the branches of an `either`, in attempt order
        cause: Inner failure that this one wraps (e.g. for one_or_more)
    """

    kind: ErrorKind
    offset: int
    expected: str | None = None
    found: str | None = None
    alternatives: tuple["ParseFailure", ...] = field(default=(), compare=False)
    cause: "ParseFailure | None" = field(default=None, compare=False)

    def describe(self) -> str:
        """Return a short human-readable description of the failure."""
        if self.kind == ErrorKind.TAG_MISMATCH:
            return (
                f"closing tag '</{self.found}>' does not match "
                f"opening tag '<{self.expected}>'"
            )
        if self.kind == ErrorKind.TRAILING_INPUT:
            return f"unexpected trailing input {self.found!r}"
        if self.kind == ErrorKind.NESTING_TOO_DEEP:
            return "elements are nested too deeply to parse"

        message = self.kind.value.replace("_", " ")
        if self.expected is not None:
            message += f" {self.expected!r}"
        if self.found is not None:
            message += f", found {self.found!r}" if self.found else ", found end of input"
        return message

    def __str__(self) -> str:
        return f"{self.describe()} at offset {self.offset}"


def line_col(text: str, offset: int) -> tuple[int, int]:
    """Determine the 1-based line and column of an offset in text."""
    offset = min(max(offset, 0), len(text))
    line = text.count("\n", 0, offset) + 1
    last_newline = text.rfind("\n", 0, offset)
    return line, offset - last_newline


@dataclass
class ErrorContext:
    """
    Location information for a failure inside a source text.

    Params:
        offset: Character offset of the failure
        line: 1-based line number
        column: 1-based column number
        source_line: The full line of input containing the failure
        source_name: Name of the input (file path, "<stdin>", ...) if known
    """

    offset: int
    line: int
    column: int
    source_line: str
    source_name: str | None = None

    @classmethod
    def from_text(
        cls, text: str, offset: int, source_name: str | None = None
    ) -> "ErrorContext":
        """Build a context for `offset` within `text`."""
        line, column = line_col(text, offset)
        lines = text.split("\n")
        source_line = lines[line - 1] if line - 1 < len(lines) else ""
        return cls(
            offset=offset,
            line=line,
            column=column,
            source_line=source_line,
            source_name=source_name,
        )

    def format_location(self) -> str:
        """
        Format the location with a caret under the failing column.

        Returns:
            Multi-line string suitable for appending to an error message
        """
        where = f"{self.source_name}:" if self.source_name else "line "
        lines = [f"  at {where}{self.line}:{self.column} (offset {self.offset})"]
        if self.source_line:
            lines.append(f"    {self.source_line}")
            lines.append("    " + " " * (self.column - 1) + "^")
        return "\n".join(lines)


class TagShellError(Exception):
    """Base exception for all tagshell errors."""

    pass


class DocumentParseError(TagShellError):
    """Raised when a whole document cannot be parsed."""

    def __init__(self, failure: ParseFailure, text: str, source_name: str | None = None):
        """
        Initialize the exception.

        Params:
            failure: The terminal failure reported by the document assembler
            text: The full input that was being parsed
            source_name: Optional name of the input for messages
        """
        self.failure = failure
        self.context = ErrorContext.from_text(text, failure.offset, source_name)
        super().__init__(
            f"Parse error: {failure.describe()}\n{self.context.format_location()}"
        )

    @property
    def kind(self) -> ErrorKind:
        return self.failure.kind

    @property
    def offset(self) -> int:
        return self.failure.offset


class ProjectionError(TagShellError):
    """Raised when something other than a parsed Document is projected."""

    def __init__(self, received: object):
        self.received = received
        super().__init__(
            f"Cannot project {type(received).__name__}; expected a Document"
        )


class CommandExecutionError(TagShellError):
    """Raised when a projected command cannot be started."""

    def __init__(self, program_name: str, reason: str):
        """
        Initialize the exception.

        Params:
            program_name: The program that failed to start
            reason: The underlying reason for the failure
        """
        self.program_name = program_name
        self.reason = reason
        super().__init__(f"Cannot run '{program_name}': {reason}")


class ConfigurationError(TagShellError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str):
        super().__init__(message)
