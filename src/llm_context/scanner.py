"""
File enumeration module for llm-context.

Lists candidate files in the working directory, preferring ignore-aware tools:
fd first, then `git ls-files`, then a plain directory walk.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generator, Optional

from .config import FAST_LISTER_BINARY, VCS_BINARY
from .errors import ListingError
from .tools import ToolRunner


@dataclass
class FileListing:
    """Files discovered under a root, and which strategy found them."""

    source: str
    paths: list[str] = field(default_factory=list)

    def as_text(self) -> str:
        """Newline-joined paths, as fed to the selector."""
        return "\n".join(self.paths)

    def __len__(self) -> int:
        return len(self.paths)


def _split_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def list_with_fd(runner: ToolRunner, root: Path) -> Optional[list[str]]:
    """
    List regular files with fd.

    Args:
        runner: Process runner
        root: Directory to list

    Returns:
        Paths relative to root, or None if fd is missing or failed
    """
    if runner.which(FAST_LISTER_BINARY) is None:
        return None

    try:
        result = runner.run([FAST_LISTER_BINARY, "--type", "f"], cwd=root)
    except OSError:
        return None

    if result.returncode != 0:
        return None
    return _split_lines(result.stdout or "")


def list_with_git(runner: ToolRunner, root: Path) -> Optional[list[str]]:
    """
    List tracked files with git.

    Args:
        runner: Process runner, used to check git is on PATH
        root: Directory to list

    Returns:
        Paths relative to root, or None if git is missing, root is not inside
        a work tree, or listing failed
    """
    if runner.which(VCS_BINARY) is None:
        return None

    # GitPython probes the git executable at import time
    try:
        import git
    except ImportError:
        return None

    cmd = git.Git(str(root))
    try:
        cmd.rev_parse("--is-inside-work-tree")
        output = cmd.ls_files()
    except (git.GitCommandError, git.GitCommandNotFound):
        return None

    return _split_lines(output)


def _walk(current: Path, prefix: str) -> Generator[str, None, None]:
    with os.scandir(current) as entries:
        entries_list = sorted(entries, key=lambda e: e.name)

    for entry in entries_list:
        rel_path = os.path.join(prefix, entry.name) if prefix else entry.name

        if entry.is_dir(follow_symlinks=False):
            # Skip hidden directories like .git
            if entry.name.startswith("."):
                continue
            yield from _walk(Path(entry.path), rel_path)
        else:
            yield rel_path


def walk_files(root: Path) -> list[str]:
    """
    Walk a directory tree and collect every non-directory entry.

    Directories whose name starts with "." are skipped, except the root
    itself. Entries are visited depth-first in lexical order. Symlinked
    directories are listed but not descended into.

    Args:
        root: Directory to walk

    Returns:
        Paths relative to root

    Raises:
        ListingError: If any directory cannot be read
    """
    try:
        return list(_walk(root, ""))
    except OSError as e:
        raise ListingError(str(e)) from e


def list_files(runner: ToolRunner, root: Path) -> FileListing:
    """
    List files under root using the best available strategy.

    Returns:
        FileListing from the first strategy that succeeds

    Raises:
        ListingError: If the fallback walk fails
    """
    paths = list_with_fd(runner, root)
    if paths is not None:
        return FileListing(source=FAST_LISTER_BINARY, paths=paths)

    paths = list_with_git(runner, root)
    if paths is not None:
        return FileListing(source=VCS_BINARY, paths=paths)

    return FileListing(source="walk", paths=walk_files(root))
