"""Tests for the clipboard sink."""

import pyperclip
import pytest

from llm_context.clipboard import PyperclipClipboard
from llm_context.errors import ClipboardError


def test_copy_delegates_to_pyperclip(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    PyperclipClipboard().copy("hello")

    assert copied == ["hello"]


def test_copy_failure_raises_clipboard_error(monkeypatch):
    def broken(text):
        raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

    monkeypatch.setattr(pyperclip, "copy", broken)

    with pytest.raises(ClipboardError) as exc_info:
        PyperclipClipboard().copy("hello")

    assert "copy/paste mechanism" in str(exc_info.value)
