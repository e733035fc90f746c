"""
Element grammar for the tag notation.

    element      := self_closing | container
    self_closing := "<" identifier "/>"
    container    := "<" identifier ">" (whitespace0 element)* whitespace0
                    "</" identifier ">"        ; identifiers must match
"""

from tagshell.core.position import Position
from tagshell.core.result import Err, Ok, ParseResult
from tagshell.exceptions.core import ErrorKind, ParseFailure
from tagshell.models import Container, Element, SelfClosing
from tagshell.parsing.atoms import identifier, whitespace0
from tagshell.parsing.combinators import (
    Parser,
    either,
    left,
    literal,
    map,
    pair,
    right,
)

# Input that does not start like a tag is not an element at all.
tag_start: Parser = pair(literal("<"), identifier)

self_closing_tag: Parser[Element] = map(
    right(literal("<"), left(identifier, literal("/>"))), SelfClosing
)

open_tag: Parser[str] = right(literal("<"), left(identifier, literal(">")))

_closing_name: Parser[str] = right(literal("</"), left(identifier, literal(">")))


def close_tag(expected_name: str) -> Parser[str]:
    """
    Match `</expected_name>`.

    Params:
        expected_name: Name taken from the matching open tag

    Returns:
        Parser that fails with TAG_MISMATCH, at the offset of the `</`, when
        a well-formed closing tag names a different element
    """

    def parse_close(position: Position) -> ParseResult[str]:
        result = _closing_name(position)
        if result.ok and result.value != expected_name:
            return Err(
                position,
                ParseFailure(
                    ErrorKind.TAG_MISMATCH,
                    position.offset,
                    expected=expected_name,
                    found=result.value,
                ),
            )
        return result

    return Parser(parse_close, f"close_tag({expected_name!r})")


def _container_body(name: str) -> Parser[Element]:
    """
    Parse the children of `<name>` and its closing tag.

    Each child is parsed exactly once, so a broken document costs no more
    than a valid one. Every nesting level adds a fixed number of stack
    frames; documents nested about a hundred levels deep parse fine.
    """
    closing = close_tag(name)

    def parse_body(position: Position) -> ParseResult[Element]:
        children: list[Element] = []
        current = position
        while True:
            current = whitespace0(current).position
            closed = closing(current)
            if closed.ok:
                return Ok(closed.position, Container(name, children))

            child = element(current)
            if not child.ok:
                # Something tag-like that does not parse is a broken child;
                # its failure says more than the missing close tag does.
                if tag_start(current).ok:
                    return Err(position, child.failure)
                return Err(position, closed.failure)
            children.append(child.value)
            current = child.position

    return Parser(parse_body, f"container_body({name!r})")


container_tag: Parser[Element] = open_tag.and_then(_container_body)

# Self-closing goes first: `either` is first-match.
element: Parser[Element] = either(self_closing_tag, container_tag)
