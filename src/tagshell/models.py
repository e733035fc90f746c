"""
Parsed element tree of the tag notation.

Elements are immutable values; a Document holds the top-level elements in
the order they appear in the input.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from attrs import field, frozen


def _non_empty_name(instance, attribute, value: str) -> None:
    if not value:
        raise ValueError(f"{type(instance).__name__} requires a non-empty name")


@frozen
class Element(ABC):
    """A parsed tag. Use the `SelfClosing` and `Container` variants."""

    name: str = field(validator=_non_empty_name)

    @abstractmethod
    def to_markup(self) -> str:
        """Render the element in the minimal surface grammar."""


@frozen
class SelfClosing(Element):
    """An element written `<name/>`; it never has children."""

    @property
    def children(self) -> tuple[Element, ...]:
        return ()

    def to_markup(self) -> str:
        return f"<{self.name}/>"


@frozen
class Container(Element):
    """An element written `<name> ... </name>` wrapping zero or more children."""

    children: tuple[Element, ...] = field(default=(), converter=tuple)

    def to_markup(self) -> str:
        inner = " ".join(child.to_markup() for child in self.children)
        return f"<{self.name}>{inner}</{self.name}>"


@frozen
class Document:
    """Top-level elements in textual order; the order is the command order."""

    elements: tuple[Element, ...] = field(default=(), converter=tuple)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __getitem__(self, index: int) -> Element:
        return self.elements[index]

    def to_markup(self) -> str:
        """Serialize back into the minimal surface grammar."""
        return " ".join(element.to_markup() for element in self.elements)
