from __future__ import annotations

import importlib
from pathlib import Path

import pytest

clipboard_module = importlib.import_module("ccopy.clipboard")
logging_module = importlib.import_module("ccopy.logging_utils")


class FakeClipboard:
    def __init__(self) -> None:
        self.text: str | None = ""
        self.writes: list[str] = []
        self.readable = True
        self.writable = True

    def paste(self) -> str | None:
        if not self.readable:
            raise clipboard_module.pyperclip.PyperclipException("no clipboard mechanism")
        return self.text

    def copy(self, text: str) -> None:
        if not self.writable:
            raise clipboard_module.pyperclip.PyperclipException("no clipboard mechanism")
        self.writes.append(text)
        self.text = text


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("CCOPY_INTERPRETER", "CCOPY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(logging_module, "_CONFIGURED_LEVEL", None)


@pytest.fixture
def fake_clipboard(monkeypatch: pytest.MonkeyPatch) -> FakeClipboard:
    clipboard = FakeClipboard()
    monkeypatch.setattr(clipboard_module.pyperclip, "paste", clipboard.paste)
    monkeypatch.setattr(clipboard_module.pyperclip, "copy", clipboard.copy)
    return clipboard
