"""ccopy command line interface."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ccopy import __version__
from ccopy.config import get_settings
from ccopy.errors import CcopyError
from ccopy.evaluator import RunOptions
from ccopy.logging_utils import configure_logging
from ccopy.pipeline import copy_commands, print_commands, run_commands

app = typer.Typer(
    name="ccopy",
    help="Keep only the typed commands from console text in the clipboard.",
    add_completion=False,
)

err_console = Console(stderr=True)


def _fail(message: object, code: int = 1) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(message))}", markup=True, highlight=False)
    raise typer.Exit(code)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ccopy {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Strip output, messages and prompts from console text in the clipboard."""


@app.command("copy")
def copy(
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not report how many lines were copied"),
) -> None:
    """Write the command lines back to the clipboard."""

    configure_logging(get_settings().log_level)
    try:
        commands = copy_commands()
    except CcopyError as exc:
        _fail(exc)
    if not quiet:
        err_console.print(f"Copied {len(commands)} command line(s) to the clipboard.", highlight=False)


@app.command("print")
def print_() -> None:
    """Print the command lines without running them."""

    configure_logging(get_settings().log_level)
    print_commands()


@app.command("run")
def run(
    echo: bool = typer.Option(False, "--echo", "-e", help="Echo each command before running the script"),
    timeout: float | None = typer.Option(None, "--timeout", "-t", help="Seconds before the evaluator is killed"),
    cwd: Path | None = typer.Option(  # noqa: B008
        None,
        "--cwd",
        exists=True,
        file_okay=False,
        dir_okay=True,
        help="Working directory for the evaluator",
    ),
) -> None:
    """Run the command lines through the configured interpreter."""

    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        options = RunOptions(echo=echo, timeout=timeout, cwd=cwd)
    except ValidationError as exc:
        _fail(exc.errors()[0]["msg"], code=2)
    try:
        code = run_commands(options, settings=settings)
    except CcopyError as exc:
        _fail(exc)
    raise typer.Exit(code)


def cco() -> None:
    """Console script for ``ccopy copy``."""
    typer.run(copy)


def pco() -> None:
    """Console script for ``ccopy print``."""
    typer.run(print_)


def rco() -> None:
    """Console script for ``ccopy run``."""
    typer.run(run)
