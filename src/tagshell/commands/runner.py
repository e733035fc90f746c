"""
Execution of projected commands.

This is the thin layer between the projector and the operating system: each
Command is run as a subprocess with its argument vector, no shell involved.
"""

import logging
import subprocess
from collections.abc import Iterable

from tagshell.commands.projection import Command
from tagshell.exceptions.core import CommandExecutionError

logger = logging.getLogger(__name__)


def run_command(command: Command, dry_run: bool = False) -> int:
    """
    Run a single command and wait for it to finish.

    Params:
        command: The command to execute
        dry_run: Only log what would run and report success

    Returns:
        The process exit code

    Raises:
        CommandExecutionError: If the program cannot be started
    """
    if dry_run:
        logger.info("Dry run: %s", command)
        return 0

    logger.info("Running: %s", command)
    try:
        completed = subprocess.run(command.argv, check=False)
    except FileNotFoundError as e:
        raise CommandExecutionError(command.program_name, "program not found") from e
    except PermissionError as e:
        raise CommandExecutionError(command.program_name, "permission denied") from e

    if completed.returncode != 0:
        logger.warning(
            "Command %s exited with status %d", command, completed.returncode
        )
    return completed.returncode


def run_commands(
    commands: Iterable[Command], dry_run: bool = False, stop_on_error: bool = True
) -> list[int]:
    """
    Run commands in order.

    Params:
        commands: Commands to execute, in document order
        dry_run: Only log what would run
        stop_on_error: Stop at the first command with a non-zero exit status

    Returns:
        Exit codes of the commands that were run
    """
    codes = []
    for command in commands:
        code = run_command(command, dry_run=dry_run)
        codes.append(code)
        if code != 0 and stop_on_error:
            logger.warning("Stopping after failed command %s", command)
            break
    return codes
