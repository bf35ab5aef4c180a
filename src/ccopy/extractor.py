"""Console transcript filtering.

Text copied from an interactive console mixes the lines a user typed with
output, warnings and errors. Typed lines are the ones that start with the
primary prompt ``"> "`` or the continuation prompt ``"+ "``; everything else is
dropped and the prompt itself is stripped from what remains.
"""

from __future__ import annotations

from collections.abc import Iterable

PRIMARY_PROMPT = "> "
CONTINUATION_PROMPT = "+ "
PROMPTS = (PRIMARY_PROMPT, CONTINUATION_PROMPT)
PROMPT_WIDTH = 2


def is_command_line(line: str) -> bool:
    """Return whether a transcript line was typed at a console prompt.

    The prompt must sit at column zero; indented or reformatted lines are not
    command lines.
    """

    return line.startswith(PROMPTS)


def extract_commands(lines: Iterable[str]) -> list[str]:
    """Keep prompt lines from ``lines`` and strip their two-character prompt.

    Order is preserved and the remainder of each kept line is returned verbatim,
    including leading and trailing whitespace.

    >>> extract_commands(["> sum(a,", "+ b)", "[1] 15"])
    ['sum(a,', 'b)']
    """

    return [line[PROMPT_WIDTH:] for line in lines if is_command_line(line)]
