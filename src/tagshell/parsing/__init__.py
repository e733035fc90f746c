"""
tagshell parsing components.

This package provides the parser combinators, the lexical atoms and element
grammar built from them, and the document assembler that drives the grammar
over a whole input.
"""

from tagshell.parsing.atoms import (
    identifier,
    quoted_string,
    whitespace0,
    whitespace1,
    whitespace_char,
    whitespace_wrap,
)
from tagshell.parsing.combinators import (
    Parser,
    and_then,
    any_char,
    either,
    end_of_input,
    fail,
    label,
    left,
    literal,
    map,
    one_or_more,
    pair,
    pred,
    right,
    succeed,
    zero_or_more,
)
from tagshell.parsing.document import (
    parse_document,
    serialize_document,
    try_parse_document,
)
from tagshell.parsing.grammar import (
    close_tag,
    container_tag,
    element,
    open_tag,
    self_closing_tag,
    tag_start,
)

__all__ = [
    "Parser",
    "and_then",
    "any_char",
    "either",
    "end_of_input",
    "fail",
    "label",
    "left",
    "literal",
    "map",
    "one_or_more",
    "pair",
    "pred",
    "right",
    "succeed",
    "zero_or_more",
    "identifier",
    "quoted_string",
    "whitespace0",
    "whitespace1",
    "whitespace_char",
    "whitespace_wrap",
    "close_tag",
    "container_tag",
    "element",
    "open_tag",
    "self_closing_tag",
    "tag_start",
    "parse_document",
    "serialize_document",
    "try_parse_document",
]
