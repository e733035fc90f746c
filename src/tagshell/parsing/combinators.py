"""
Parser combinators for tagshell.

This module provides the generic parsing primitives the tag grammar is built
from. A `Parser` wraps a function from `Position` to `Ok | Err`; combinators
take parsers and return new parsers.

Every combinator is pure: it keeps no state between calls, so applying the
same parser twice to the same position gives equal results. Failures are
returned as values and never raised. An `Err` always carries the position
the parser was called with, so a failed attempt cannot leak partial
consumption to its caller.
"""

from collections.abc import Callable
from dataclasses import replace
from typing import Any, Generic, TypeVar

from tagshell.core.position import Position
from tagshell.core.result import Err, Ok, ParseResult
from tagshell.core.types import ParseFunction, Predicate
from tagshell.exceptions.core import ErrorKind, ParseFailure

T = TypeVar("T")
U = TypeVar("U")


class Parser(Generic[T]):
    """
    A parsing capability: given a Position, produce a ParseResult.

    Params:
        parse_fn: Function from Position to Ok/Err
        name: Readable description used in repr and debugging output
    """

    __slots__ = ("_parse_fn", "name")

    def __init__(
        self, parse_fn: ParseFunction, name: str | None = None
    ):
        self._parse_fn = parse_fn
        self.name = name or getattr(parse_fn, "__name__", "parser")

    def __call__(self, position: Position) -> ParseResult[T]:
        return self._parse_fn(position)

    def parse(self, source: str | Position) -> ParseResult[T]:
        """
        Run the parser on a string or an existing Position.

        Params:
            source: Raw text (parsed from offset 0) or a Position

        Returns:
            Ok with the remaining position and value, or Err at the start position
        """
        position = source if isinstance(source, Position) else Position(source)
        return self._parse_fn(position)

    def __repr__(self) -> str:
        return f"Parser({self.name})"

    def __or__(self, other: "Parser[T]") -> "Parser[T]":
        return either(self, other)

    def map(self, fn: Callable[[T], U]) -> "Parser[U]":
        return map(self, fn)

    def pred(
        self, predicate: Callable[[T], bool], description: str | None = None
    ) -> "Parser[T]":
        return pred(self, predicate, description)

    def and_then(self, fn: Callable[[T], "Parser[U]"]) -> "Parser[U]":
        return and_then(self, fn)

    def label(self, kind: ErrorKind, expected: str | None = None) -> "Parser[T]":
        return label(self, kind, expected)


def literal(expected: str) -> Parser[str]:
    """
    Match exactly `expected` at the current position.

    The empty string matches everywhere without consuming input.
    """

    def parse_literal(position: Position) -> ParseResult[str]:
        if position.startswith(expected):
            return Ok(position.advance(len(expected)), expected)
        return Err(
            position,
            ParseFailure(
                ErrorKind.EXPECTED_LITERAL,
                position.offset,
                expected=expected,
                found=position.peek(len(expected)),
            ),
        )

    return Parser(parse_literal, f"literal({expected!r})")


def _any_char(position: Position) -> ParseResult[str]:
    """Consume a single character of any kind."""
    if position.at_end:
        return Err(
            position,
            ParseFailure(
                ErrorKind.EXPECTED_LITERAL,
                position.offset,
                expected="any character",
                found="",
            ),
        )
    return Ok(position.advance(1), position.peek())


any_char = Parser(_any_char, "any_char")


def succeed(value: T) -> Parser[T]:
    """Always succeed with `value`, consuming nothing."""
    return Parser(lambda position: Ok(position, value), f"succeed({value!r})")


def fail(kind: ErrorKind, expected: str | None = None) -> Parser[Any]:
    """Always fail with `kind` at the current position."""

    def parse_fail(position: Position) -> Err:
        return Err(
            position,
            ParseFailure(kind, position.offset, expected=expected, found=position.peek()),
        )

    return Parser(parse_fail, f"fail({kind.value})")


def end_of_input() -> Parser[None]:
    """Succeed only when nothing is left to consume."""

    def parse_end(position: Position) -> ParseResult[None]:
        if position.at_end:
            return Ok(position, None)
        return Err(
            position,
            ParseFailure(
                ErrorKind.TRAILING_INPUT, position.offset, found=position.remaining
            ),
        )

    return Parser(parse_end, "end_of_input")


def pair(parser1: Parser[T], parser2: Parser[U]) -> Parser[tuple[T, U]]:
    """Run two parsers in sequence and keep both values."""

    def parse_pair(position: Position) -> ParseResult[tuple[T, U]]:
        first = parser1(position)
        if not first.ok:
            return Err(position, first.failure)
        second = parser2(first.position)
        if not second.ok:
            return Err(position, second.failure)
        return Ok(second.position, (first.value, second.value))

    return Parser(parse_pair, f"pair({parser1.name}, {parser2.name})")


def map(parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    """Transform the value of a successful parse; failures pass through."""

    def parse_map(position: Position) -> ParseResult[U]:
        result = parser(position)
        if not result.ok:
            return result
        return Ok(result.position, fn(result.value))

    return Parser(parse_map, parser.name)


def left(parser1: Parser[T], parser2: Parser[Any]) -> Parser[T]:
    """Run both parsers and keep the first value."""
    return map(pair(parser1, parser2), lambda values: values[0])


def right(parser1: Parser[Any], parser2: Parser[U]) -> Parser[U]:
    """Run both parsers and keep the second value."""
    return map(pair(parser1, parser2), lambda values: values[1])


def pred(
    parser: Parser[T], predicate: Predicate, description: str | None = None
) -> Parser[T]:
    """
    Accept a parse only when `predicate` holds for its value.

    Params:
        parser: Parser whose value is checked
        predicate: Test applied to the parsed value
        description: What an accepted value looks like, for failure messages

    Returns:
        Parser failing with PREDICATE_REJECTED when the inner parser fails or
        the predicate does not hold
    """

    def parse_pred(position: Position) -> ParseResult[T]:
        result = parser(position)
        if result.ok and predicate(result.value):
            return result
        return Err(
            position,
            ParseFailure(
                ErrorKind.PREDICATE_REJECTED,
                position.offset,
                expected=description,
                found=str(result.value) if result.ok else position.peek(),
                cause=None if result.ok else result.failure,
            ),
        )

    return Parser(parse_pred, f"pred({parser.name})")


def either(parser1: Parser[T], parser2: Parser[T]) -> Parser[T]:
    """
    Try `parser1`, and if it fails try `parser2` from the same position.

    This is first-match, not longest-match. When both fail, the second
    alternative's failure is reported and both failures are kept in
    `failure.alternatives`.
    """

    def parse_either(position: Position) -> ParseResult[T]:
        first = parser1(position)
        if first.ok:
            return first
        second = parser2(position)
        if second.ok:
            return second
        return Err(
            position,
            replace(second.failure, alternatives=(first.failure, second.failure)),
        )

    return Parser(parse_either, f"either({parser1.name}, {parser2.name})")


def zero_or_more(parser: Parser[T]) -> Parser[list[T]]:
    """
    Apply `parser` until it fails and collect the values in order.

    Always succeeds. Repetition also stops when `parser` succeeds without
    consuming input; that zero-width value is not collected, which keeps the
    loop bounded by the input length.
    """

    def parse_many(position: Position) -> ParseResult[list[T]]:
        values: list[T] = []
        current = position
        while True:
            result = parser(current)
            if not result.ok or result.position.offset == current.offset:
                break
            values.append(result.value)
            current = result.position
        return Ok(current, values)

    return Parser(parse_many, f"zero_or_more({parser.name})")


def one_or_more(parser: Parser[T]) -> Parser[list[T]]:
    """Like zero_or_more, but fail with EXPECTED_AT_LEAST_ONE if nothing matches."""
    rest = zero_or_more(parser)

    def parse_some(position: Position) -> ParseResult[list[T]]:
        first = parser(position)
        if not first.ok:
            return Err(
                position,
                ParseFailure(
                    ErrorKind.EXPECTED_AT_LEAST_ONE,
                    position.offset,
                    expected=first.failure.expected,
                    found=position.peek(),
                    cause=first.failure,
                ),
            )
        more = rest(first.position)
        return Ok(more.position, [first.value, *more.value])

    return Parser(parse_some, f"one_or_more({parser.name})")


def and_then(parser: Parser[T], fn: Callable[[T], Parser[U]]) -> Parser[U]:
    """
    Sequence a parser whose shape depends on a previously parsed value.

    `fn` receives the value of `parser` and returns the parser to run next at
    the remaining position.
    """

    def parse_and_then(position: Position) -> ParseResult[U]:
        result = parser(position)
        if not result.ok:
            return result
        following = fn(result.value)(result.position)
        if not following.ok:
            return Err(position, following.failure)
        return following

    return Parser(parse_and_then, f"and_then({parser.name})")


def label(parser: Parser[T], kind: ErrorKind, expected: str | None = None) -> Parser[T]:
    """Report any failure of `parser` as `kind` at the position it started from."""

    def parse_label(position: Position) -> ParseResult[T]:
        result = parser(position)
        if result.ok:
            return result
        return Err(
            position,
            ParseFailure(
                kind,
                position.offset,
                expected=expected,
                found=position.peek(),
                cause=result.failure,
            ),
        )

    return Parser(parse_label, expected or parser.name)

