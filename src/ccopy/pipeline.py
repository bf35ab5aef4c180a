"""Acquire, filter and dispose of clipboard commands.

The three entry points differ only in their sink: the shared step reads the
clipboard, extracts the command lines, and hands them to a sink.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import typer
from loguru import logger

from ccopy.clipboard import read_clipboard_lines, write_clipboard
from ccopy.config import Settings, get_settings
from ccopy.evaluator import RunOptions, evaluate
from ccopy.extractor import extract_commands

T = TypeVar("T")
Sink = Callable[[list[str]], T]


def process_clipboard(sink: Sink[T], *, read: Callable[[], list[str]] = read_clipboard_lines) -> T:
    """Read clipboard lines, extract commands and pass them to ``sink``."""

    lines = read()
    commands = extract_commands(lines)
    logger.debug("pipeline.extract lines={} commands={}", len(lines), len(commands))
    return sink(commands)


def clipboard_sink(commands: list[str]) -> list[str]:
    text = "\n".join(commands)
    write_clipboard(text)
    return commands


def print_sink(commands: list[str]) -> list[str]:
    for command in commands:
        typer.echo(command)
    return commands


def evaluator_sink(options: RunOptions, settings: Settings) -> Sink[int]:
    """Create a sink that runs the commands as one script."""

    def _sink(commands: list[str]) -> int:
        return evaluate(commands, options, settings)

    return _sink


def copy_commands() -> list[str]:
    """Replace the clipboard contents with only its command lines."""

    return process_clipboard(clipboard_sink)


def print_commands() -> list[str]:
    """Print the clipboard's command lines to stdout."""

    return process_clipboard(print_sink)


def run_commands(
    options: RunOptions | None = None,
    *,
    settings: Settings | None = None,
    **option_values: Any,
) -> int:
    """Run the clipboard's command lines through the evaluator.

    Options may be given as a ``RunOptions`` instance or as keyword arguments;
    keywords are validated before the clipboard is read.
    """

    if options is None:
        options = RunOptions(**option_values)
    elif option_values:
        options = RunOptions(**{**options.model_dump(), **option_values})
    settings = settings or get_settings()
    return process_clipboard(evaluator_sink(options, settings))
