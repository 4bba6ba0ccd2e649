"""Shared fixtures: fake process runner and clipboard."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from llm_context.errors import ClipboardError


class FakeRunner:
    """Stands in for ToolRunner.

    `tools` maps program names to their resolved path; anything missing is
    "not installed". `results` maps program names to a CompletedProcess, an
    exception to raise, or a callable taking the call kwargs.
    """

    def __init__(self, tools=None, results=None):
        self.tools = dict(tools or {})
        self.results = dict(results or {})
        self.calls = []

    def which(self, name):
        return self.tools.get(name)

    def run(self, args, *, input=None, cwd=None, capture_stdout=True, stderr=subprocess.DEVNULL):
        args = list(args)
        self.calls.append({"args": args, "input": input, "cwd": cwd, "stderr": stderr})
        outcome = self.results.get(args[0])
        if outcome is None:
            raise FileNotFoundError(args[0])
        if isinstance(outcome, BaseException):
            raise outcome
        if callable(outcome):
            outcome = outcome(args=args, input=input, cwd=cwd)
        return outcome

    def calls_to(self, name):
        return [call for call in self.calls if call["args"][0] == name]


class FakeClipboard:
    def __init__(self, fail_with: str | None = None):
        self.fail_with = fail_with
        self.contents = []

    def copy(self, text):
        if self.fail_with is not None:
            raise ClipboardError(self.fail_with)
        self.contents.append(text)


def completed(args, returncode=0, stdout=""):
    return subprocess.CompletedProcess(args=args, returncode=returncode, stdout=stdout)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small project tree with a hidden .git directory."""
    (tmp_path / "a.go").write_text("package main")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("[core]\n")
    return tmp_path
