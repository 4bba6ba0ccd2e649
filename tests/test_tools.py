"""Tests for the real process runner."""

import sys

from llm_context.tools import ToolRunner


class TestToolRunner:
    def test_pipes_input_and_captures_stdout(self):
        result = ToolRunner().run(
            [sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read().upper())"],
            input="a.go\nb.go",
        )

        assert result.returncode == 0
        assert result.stdout == "A.GO\nB.GO"

    def test_non_zero_exit_is_returned(self):
        result = ToolRunner().run(
            [sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"],
        )

        assert result.returncode == 3
        assert result.stdout == ""
        assert result.stderr is None

    def test_runs_in_cwd(self, tmp_path):
        result = ToolRunner().run(
            [sys.executable, "-c", "import os; print(os.getcwd())"],
            cwd=tmp_path,
        )

        assert result.stdout.strip() == str(tmp_path.resolve())

    def test_which(self):
        runner = ToolRunner()

        assert runner.which("definitely-not-a-real-program-xyz") is None
