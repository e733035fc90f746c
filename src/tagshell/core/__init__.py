"""
Core tagshell building blocks.

This package provides the immutable input position and the parse result
types that every parser in the combinator engine consumes and returns.
"""

from tagshell.core.position import Position
from tagshell.core.result import Err, Ok, ParseResult
from tagshell.core.types import ParseFunction, Predicate

__all__ = [
    "Position",
    "Ok",
    "Err",
    "ParseResult",
    "ParseFunction",
    "Predicate",
]
