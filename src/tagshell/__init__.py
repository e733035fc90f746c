"""
tagshell - parse tag markup into CLI commands

tagshell provides a small parser-combinator library, the grammar for a
tag-only XML-like notation built from it, and a projection of parsed
documents into commands.
"""

from importlib.metadata import version

from tagshell.commands.projection import Command, project
from tagshell.exceptions.core import DocumentParseError, TagShellError
from tagshell.models import Container, Document, Element, SelfClosing
from tagshell.parsing.document import parse_document, try_parse_document

__version__ = version("tagshell")

__all__ = [
    "__version__",
    "Command",
    "Container",
    "Document",
    "DocumentParseError",
    "Element",
    "SelfClosing",
    "TagShellError",
    "parse_document",
    "project",
    "try_parse_document",
]
