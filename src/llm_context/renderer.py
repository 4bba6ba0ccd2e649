"""
Context document renderer.

Wraps each selected file in a Markdown code fence labeled by its path.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .config import INTRO_TEXT, get_fence_tag
from .utils import read_file_text

console = Console(soft_wrap=True, highlight=False, emoji=False)


@dataclass
class RenderedContext:
    """The assembled document plus what went into it."""

    text: str
    included: list[str] = field(default_factory=list)
    skipped: list[tuple[str, str]] = field(default_factory=list)

    @property
    def char_count(self) -> int:
        return len(self.text)


def render_file_block(path: str, content: str) -> str:
    """
    Render a single file as a labeled fenced block.

    Args:
        path: Path shown in the heading
        content: Raw file contents

    Returns:
        Heading, fenced content, and a trailing blank line
    """
    tag = get_fence_tag(path)
    return f"## File: {path}\n```{tag}\n{content}\n```\n\n"


def render_context(
    paths: Iterable[str],
    root: Path,
    reader: Callable[[Path], str] = read_file_text,
) -> RenderedContext:
    """
    Assemble the context document for the selected files.

    Files that cannot be read are reported with a warning and left out;
    the remaining files keep their selection order.

    Args:
        paths: Selected paths, relative to root
        root: Directory the paths are relative to
        reader: Function returning a file's text, raising OSError on failure

    Returns:
        RenderedContext with the document text and per-file outcome
    """
    parts = [INTRO_TEXT]
    rendered = RenderedContext(text="")

    for path in paths:
        if not path:
            continue

        try:
            content = reader(root / path)
        except OSError as e:
            console.print(
                f"[yellow]Warning: Could not read file {escape(path)}: {escape(str(e))}[/yellow]"
            )
            rendered.skipped.append((path, str(e)))
            continue

        parts.append(render_file_block(path, content))
        rendered.included.append(path)

    rendered.text = "".join(parts)
    return rendered
