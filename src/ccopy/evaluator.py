"""Hand reconstructed scripts to an external interpreter."""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

import typer
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from ccopy.config import Settings
from ccopy.errors import EvaluatorNotFoundError
from ccopy.extractor import PRIMARY_PROMPT


class RunOptions(BaseModel):
    """Options forwarded to the evaluator. Anything not listed here is rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    echo: bool = Field(
        default=False,
        description="Echo each command before the script runs; every line is shown with the primary prompt",
    )
    timeout: float | None = Field(default=None, gt=0, description="Seconds before the evaluator is killed")
    cwd: Path | None = Field(default=None, description="Working directory for the evaluator")


def build_script(commands: Sequence[str]) -> str:
    """Join command lines into a newline-terminated script body."""

    if not commands:
        return ""
    return "\n".join(commands) + "\n"


def resolve_interpreter(settings: Settings) -> list[str]:
    """Split the configured interpreter command and check it is runnable."""

    try:
        words = shlex.split(settings.interpreter)
    except ValueError as exc:
        raise EvaluatorNotFoundError(f"invalid interpreter command {settings.interpreter!r}: {exc}") from exc
    if not words:
        raise EvaluatorNotFoundError("interpreter command is empty")
    if shutil.which(words[0]) is None:
        raise EvaluatorNotFoundError(f"interpreter not found: {words[0]}")
    return words


def evaluate(commands: Sequence[str], options: RunOptions, settings: Settings) -> int:
    """Run ``commands`` as one script through the configured interpreter and return its exit code.

    The script is written to the interpreter's stdin while its stdout and stderr
    stay attached to ours, so errors raised inside the script surface exactly as
    the interpreter reports them.
    """

    command = resolve_interpreter(settings)
    script = build_script(commands)
    if options.echo:
        # Continuation lines are echoed with the primary prompt too.
        for line in commands:
            typer.echo(f"{PRIMARY_PROMPT}{line}")
        sys.stdout.flush()

    logger.info("evaluator.start command={} cwd={} timeout={}", command, options.cwd, options.timeout)
    # The interpreter is whatever the user configured; running it is the point.
    result = subprocess.run(  # noqa: S603
        command,
        input=script,
        text=True,
        cwd=options.cwd,
        timeout=options.timeout,
        check=False,
    )
    logger.info("evaluator.exit code={}", result.returncode)
    return result.returncode
