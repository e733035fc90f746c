"""
Parse results returned by every parser.

A parser either succeeds with `Ok(position, value)`, where `position` is the
remaining unconsumed input, or fails with `Err(position, failure)`, where
`position` is the position the parser was called with. Since the caller's
position is handed back unchanged, a failed attempt never leaks partial
consumption.
"""

from typing import Any, Generic, TypeVar

from attrs import frozen

from tagshell.core.position import Position
from tagshell.exceptions.core import ParseFailure

T = TypeVar("T")


@frozen
class Ok(Generic[T]):
    """Successful parse: the value and the position after it."""

    position: Position
    value: T

    ok = True

    @property
    def offset(self) -> int:
        return self.position.offset


@frozen
class Err:
    """Failed parse: the untouched starting position and what went wrong."""

    position: Position
    failure: ParseFailure

    ok = False

    @property
    def offset(self) -> int:
        return self.position.offset

    @property
    def value(self) -> Any:
        raise AttributeError(f"failed parse has no value: {self.failure}")


ParseResult = Ok[T] | Err
