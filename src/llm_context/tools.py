"""
External process access for llm-context.

Calls to external programs go through a ToolRunner so the flow can be
exercised with a fake in tests.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import IO, Optional, Sequence, Union


class ToolRunner:
    """Thin wrapper over shutil.which and subprocess.run."""

    def which(self, name: str) -> Optional[str]:
        """Resolve a program on PATH.

        Args:
            name: Program name.

        Returns:
            Absolute path to the program, or None when it is not installed.
        """
        return shutil.which(name)

    def run(
        self,
        args: Sequence[str],
        *,
        input: Optional[str] = None,
        cwd: Optional[Path] = None,
        capture_stdout: bool = True,
        stderr: Union[int, IO[str], None] = subprocess.DEVNULL,
    ) -> subprocess.CompletedProcess[str]:
        """Run a program to completion.

        A non-zero exit status is reported through `returncode`, not raised.

        Args:
            args: Argument vector, program name first.
            input: Text piped to the program's stdin.
            cwd: Working directory.
            capture_stdout: Capture stdout into the result instead of inheriting it.
            stderr: Where the program's stderr goes; None inherits the terminal.

        Returns:
            The completed process with text stdout.

        Raises:
            OSError: If the program cannot be started.
        """
        return subprocess.run(
            list(args),
            input=input,
            cwd=cwd,
            stdout=subprocess.PIPE if capture_stdout else None,
            stderr=stderr,
            text=True,
            check=False,
        )
