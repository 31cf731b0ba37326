"""Main CLI entry point for pj-builder."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from pjbuilder.core.builder import ProjectBuilder
from pjbuilder.core.errors import BuildError

# Operator messages go to stderr; stdout carries git's clone progress
console = Console(stderr=True)
logger = logging.getLogger("pjbuilder")


def _configure_logging() -> None:
    """Attach a single rich handler to the package logger."""
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=console, show_path=False))
    logger.setLevel(logging.INFO)


def _print_error(error: BaseException) -> None:
    """Print ``error`` followed by the chain of errors that caused it."""
    console.print(f"[red]Error:[/] {escape(str(error))}", soft_wrap=True)
    cause = error.__cause__
    while cause is not None:
        console.print(
            f"  [dim]caused by {type(cause).__name__}:[/] {escape(str(cause))}",
            soft_wrap=True,
        )
        cause = cause.__cause__


@click.command()
@click.argument("name")
def main(name: str):
    """Create a Go project named NAME in the current directory.

    Clones golang-standards/project-layout, renames every `_your_app_`
    directory to NAME, removes the template's README.md files and .git,
    and moves the result to ./NAME.

    \b
    Example:
      pj-builder myapp       Creates ./myapp with cmd/myapp/...
    """
    _configure_logging()
    logger.info("Go pj builder")

    try:
        ProjectBuilder().build(name)
    except BuildError as e:
        _print_error(e)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
