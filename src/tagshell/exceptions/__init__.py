"""
tagshell exception classes.

This package provides the failure values reported by parsers and the
exception types raised at the library boundary.
"""

from tagshell.exceptions.core import (
    CommandExecutionError,
    ConfigurationError,
    DocumentParseError,
    ErrorContext,
    ErrorKind,
    ParseFailure,
    ProjectionError,
    TagShellError,
    line_col,
)

__all__ = [
    "TagShellError",
    "DocumentParseError",
    "ProjectionError",
    "CommandExecutionError",
    "ConfigurationError",
    "ErrorContext",
    "ErrorKind",
    "ParseFailure",
    "line_col",
]
