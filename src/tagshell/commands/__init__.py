"""
tagshell command projection and execution.

This package turns parsed documents into Command descriptors and runs them.
"""

from tagshell.commands.projection import (
    Command,
    commands_to_markup,
    elements_to_args,
    project,
    project_element,
)
from tagshell.commands.runner import run_command, run_commands

__all__ = [
    "Command",
    "commands_to_markup",
    "elements_to_args",
    "project",
    "project_element",
    "run_command",
    "run_commands",
]
