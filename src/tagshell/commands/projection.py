"""
Projection of parsed documents into CLI commands.

Every top-level element becomes one Command named after the element. The
names of a container's direct children, in order, become the command's
arguments. A self-closing element or an empty container projects to a
command with no arguments.
"""

import logging
import shlex
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from tagshell.exceptions.core import ProjectionError
from tagshell.models import Document, Element

logger = logging.getLogger(__name__)


class Command(BaseModel):
    """
    An instruction projected from one top-level element.

    Params:
        program_name: The program to run, taken from the element name
        args: Ordered arguments, taken from the element's children
    """

    model_config = ConfigDict(frozen=True)

    program_name: str = Field(min_length=1)
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        """The command as an argument vector, program first."""
        return [self.program_name, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.argv)


def elements_to_args(elements: Iterable[Element]) -> tuple[str, ...]:
    """Names of `elements`, in order, as command arguments."""
    return tuple(element.name for element in elements)


def project_element(element: Element) -> Command:
    return Command(program_name=element.name, args=elements_to_args(element.children))


def project(document: Document) -> list[Command]:
    """
    Project a parsed Document into commands, one per top-level element.

    Params:
        document: A fully parsed Document

    Returns:
        Commands in document order

    Raises:
        ProjectionError: If `document` is not a Document
    """
    if not isinstance(document, Document):
        raise ProjectionError(document)

    commands = [project_element(element) for element in document]
    logger.debug("Projected %d command(s)", len(commands))
    return commands


def commands_to_markup(commands: Sequence[Command]) -> str:
    """
    Render commands back into tag notation.

    A command without arguments becomes `<program/>`; one with arguments
    becomes a container wrapping a self-closing tag per argument.
    """
    rendered = []
    for command in commands:
        if not command.args:
            rendered.append(f"<{command.program_name}/>")
            continue
        inner = " ".join(f"<{arg}/>" for arg in command.args)
        rendered.append(f"<{command.program_name}>{inner}</{command.program_name}>")
    return " ".join(rendered)
