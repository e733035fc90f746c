"""
Command line interface for tagshell.

    tagshell parse FILE        print the parsed element tree
    tagshell commands FILE     print the projected commands
    tagshell run FILE          execute the projected commands

FILE may be `-` for standard input; `--text` parses inline markup instead.
"""

import json
import logging

import click
from rich.console import Console
from rich.tree import Tree

from tagshell import __version__
from tagshell.commands.projection import Command, project
from tagshell.commands.runner import run_commands
from tagshell.config import TagShellConfig
from tagshell.exceptions.core import TagShellError
from tagshell.models import Document, Element
from tagshell.parsing.document import parse_document

logger = logging.getLogger(__name__)

console = Console()
error_console = Console(stderr=True, style="bold red")

source_argument = click.argument(
    "source", type=click.File("r", encoding="utf-8"), required=False
)
text_option = click.option(
    "--text", "inline_text", default=None, help="Parse this markup instead of a file."
)


def _read_source(source, inline_text: str | None) -> tuple[str, str]:
    if inline_text is not None:
        if source is not None:
            raise click.UsageError("Give either SOURCE or --text, not both.")
        return inline_text, "<text>"
    if source is None:
        raise click.UsageError("Missing SOURCE (a file path, or - for stdin).")
    return source.read(), source.name


def _load(ctx: click.Context, source, inline_text: str | None) -> Document:
    text, name = _read_source(source, inline_text)
    try:
        return parse_document(text, source_name=name)
    except TagShellError as e:
        error_console.print(str(e), markup=False, highlight=False)
        ctx.exit(1)


def _exit_status(returncode: int) -> int:
    # subprocess reports death by signal N as -N; shells report 128 + N.
    return 128 - returncode if returncode < 0 else returncode


def _add_branch(tree: Tree, element: Element) -> None:
    branch = tree.add(element.to_markup() if not element.children else element.name)
    for child in element.children:
        _add_branch(branch, child)


@click.group()
@click.version_option(__version__, prog_name="tagshell")
@click.option(
    "--log-level",
    default=None,
    help="Logging level (overrides TAGSHELL_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Parse tag markup into commands and run them."""
    try:
        config = TagShellConfig.from_env().override(log_level=log_level)
    except TagShellError as e:
        raise click.UsageError(str(e)) from e

    logging.basicConfig(
        level=config.log_level_number, format="%(levelname)s: %(name)s: %(message)s"
    )
    ctx.obj = config


@cli.command()
@source_argument
@text_option
@click.pass_context
def parse(ctx: click.Context, source, inline_text: str | None):
    """Print the element tree of SOURCE."""
    document = _load(ctx, source, inline_text)
    tree = Tree("document")
    for element in document:
        _add_branch(tree, element)
    console.print(tree, markup=False, highlight=False)


@cli.command()
@source_argument
@text_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (overrides TAGSHELL_OUTPUT_FORMAT).",
)
@click.pass_context
def commands(ctx: click.Context, source, inline_text: str | None, output_format: str | None):
    """Print the commands projected from SOURCE."""
    config = ctx.obj.override(output_format=output_format)
    projected = project(_load(ctx, source, inline_text))

    if config.output_format == "json":
        click.echo(json.dumps([command.model_dump(mode="json") for command in projected], indent=2))
        return
    for command in projected:
        click.echo(str(command))


@cli.command()
@source_argument
@text_option
@click.option("--dry-run", is_flag=True, help="Print commands instead of running them.")
@click.option("--keep-going", is_flag=True, help="Continue after a command fails.")
@click.pass_context
def run(
    ctx: click.Context,
    source,
    inline_text: str | None,
    dry_run: bool,
    keep_going: bool,
):
    """Run the commands projected from SOURCE, in order."""
    config = ctx.obj.override(
        dry_run=dry_run or None,
        stop_on_error=False if keep_going else None,
    )
    projected: list[Command] = project(_load(ctx, source, inline_text))

    if config.dry_run:
        for command in projected:
            click.echo(str(command))

    try:
        codes = run_commands(
            projected, dry_run=config.dry_run, stop_on_error=config.stop_on_error
        )
    except TagShellError as e:
        error_console.print(str(e), markup=False, highlight=False)
        ctx.exit(1)

    failed = [code for code in codes if code != 0]
    if failed:
        logger.debug("%d command(s) failed", len(failed))
        ctx.exit(_exit_status(failed[0]))
