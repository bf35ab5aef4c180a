"""System clipboard access."""

from __future__ import annotations

import re

import pyperclip
from loguru import logger

from ccopy.errors import ClipboardUnavailableError

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def read_clipboard_lines() -> list[str]:
    """Read the clipboard as a list of lines.

    An empty, unreadable or non-text clipboard reads as no lines.
    """

    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        logger.warning("clipboard.read.unavailable error={}", exc)
        return []

    if not isinstance(text, str) or not text:
        logger.warning("clipboard.read.empty")
        return []

    lines = split_lines(text)
    logger.debug("clipboard.read lines={}", len(lines))
    return lines


def write_clipboard(text: str) -> None:
    """Replace the clipboard contents with ``text`` exactly as given."""

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardUnavailableError(f"cannot write to the clipboard: {exc}") from exc
    logger.debug("clipboard.write chars={}", len(text))


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n``, ``\\r\\n`` and ``\\r`` only.

    Other Unicode line separators stay inside their line. A final terminator
    does not start an extra empty line.
    """

    lines = LINE_BREAK_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines
