"""
Lexical atoms of the tag notation.

Whitespace, identifiers and quoted strings, each built only from the
primitives in `tagshell.parsing.combinators`.
"""

import string

from tagshell.exceptions.core import ErrorKind
from tagshell.parsing.combinators import (
    Parser,
    any_char,
    label,
    left,
    literal,
    map,
    one_or_more,
    pair,
    pred,
    right,
    zero_or_more,
)

WHITESPACE = frozenset(" \t\n")
NAME_START_CHARS = frozenset(string.ascii_letters)
NAME_CHARS = NAME_START_CHARS | frozenset(string.digits) | frozenset("._-")


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def is_name_start(char: str) -> bool:
    return char in NAME_START_CHARS


def is_name_char(char: str) -> bool:
    return char in NAME_CHARS


whitespace_char: Parser[str] = pred(any_char, is_whitespace, "whitespace")

whitespace0: Parser[list[str]] = zero_or_more(whitespace_char)

whitespace1: Parser[list[str]] = label(
    one_or_more(whitespace_char), ErrorKind.EXPECTED_WHITESPACE, "whitespace"
)

identifier: Parser[str] = label(
    map(
        pair(
            pred(any_char, is_name_start, "letter"),
            zero_or_more(pred(any_char, is_name_char, "name character")),
        ),
        lambda parts: parts[0] + "".join(parts[1]),
    ),
    ErrorKind.EXPECTED_IDENTIFIER,
    "identifier",
)

quoted_string: Parser[str] = map(
    right(
        literal('"'),
        left(zero_or_more(pred(any_char, lambda char: char != '"')), literal('"')),
    ),
    "".join,
)


def whitespace_wrap(parser: Parser) -> Parser:
    """Allow optional whitespace on both sides of `parser`."""
    return right(whitespace0, left(parser, whitespace0))
