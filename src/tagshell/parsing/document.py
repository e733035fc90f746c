"""
Document assembly for the tag notation.

This module drives the element grammar over a whole input string:

    document := (whitespace0 element)* whitespace0

Parsing succeeds only if the entire input is consumed. There is no partial
result; a document either parses completely or not at all.
"""

import logging

from tagshell.core.position import Position
from tagshell.core.result import Err, Ok, ParseResult
from tagshell.exceptions.core import DocumentParseError, ErrorKind, ParseFailure
from tagshell.models import Container, Document, Element, SelfClosing
from tagshell.parsing.atoms import whitespace0
from tagshell.parsing.combinators import Parser, either, map, right, succeed
from tagshell.parsing.grammar import close_tag, element, tag_start

logger = logging.getLogger(__name__)


def _close_top_level(parsed: Element) -> Parser[Element]:
    """
    Turn `<name/> </name>` at top level into an empty Container.

    A closing tag that repeats the name of the self-closing tag right before
    it closes that tag. Only top-level elements do this; nested elements are
    left to the grammar so that `<b><b/></b>` keeps its usual meaning.
    """
    if not isinstance(parsed, SelfClosing):
        return succeed(parsed)
    closed = map(right(whitespace0, close_tag(parsed.name)), Container)
    return either(closed, succeed(parsed))


top_level_element: Parser[Element] = element.and_then(_close_top_level)


def try_parse_document(text: str) -> ParseResult[Document]:
    """
    Parse `text` into a Document without raising.

    Params:
        text: The complete input

    Returns:
        Ok(end position, Document) or Err(start position, failure). A failure
        is TRAILING_INPUT when the leftover text does not begin a tag;
        otherwise it is the failure of the element that was being parsed.
        Input nested deeper than the interpreter stack allows fails with
        NESTING_TOO_DEEP at the start of the offending top-level element.
    """
    start = Position(text)
    position = start
    elements: list[Element] = []

    while True:
        position = whitespace0(position).position
        if position.at_end:
            break

        try:
            result = top_level_element(position)
        except RecursionError:
            failure = ParseFailure(
                ErrorKind.NESTING_TOO_DEEP, position.offset, found=position.peek()
            )
            logger.warning("Document nesting exceeds the recursion limit: %s", failure)
            return Err(start, failure)
        if not result.ok:
            failure = result.failure
            if not tag_start(position).ok:
                failure = ParseFailure(
                    ErrorKind.TRAILING_INPUT,
                    position.offset,
                    found=position.remaining,
                    cause=result.failure,
                )
            logger.debug("Document parse failed: %s", failure)
            return Err(start, failure)

        elements.append(result.value)
        position = result.position

    logger.debug("Parsed %d top-level element(s)", len(elements))
    return Ok(position, Document(elements))


def parse_document(text: str, source_name: str | None = None) -> Document:
    """
    Parse `text` into a Document.

    Params:
        text: The complete input
        source_name: Optional name of the input, used in error messages

    Returns:
        The parsed Document, elements in textual order

    Raises:
        DocumentParseError: If any part of the input fails to parse
    """
    result = try_parse_document(text)
    if not result.ok:
        raise DocumentParseError(result.failure, text, source_name)
    return result.value


def serialize_document(document: Document) -> str:
    """Render a Document in the minimal surface grammar."""
    return document.to_markup()
