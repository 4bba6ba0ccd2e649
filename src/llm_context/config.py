"""
Configuration constants and defaults for llm-context.

There are no config files: everything the tool needs is fixed here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# Opening sentence of every context document
INTRO_TEXT = "I am providing the following files as context:\n\n"

# Fence tag used for files without an extension
DEFAULT_FENCE_TAG = "text"

# External programs
SELECTOR_BINARY = "fzf"
FAST_LISTER_BINARY = "fd"
VCS_BINARY = "git"

# Exit status fzf uses when the user aborts (Ctrl-C / Esc)
SELECTOR_CANCELLED_EXIT_CODE = 130

# Number of lines shown in the preview pane
PREVIEW_LINES = 20

# Separator printed before the document when the clipboard is unavailable
FALLBACK_SEPARATOR = "-" * 27


@dataclass(frozen=True)
class SelectorConfig:
    """Presentation settings for the interactive selector."""

    binary: str = SELECTOR_BINARY
    height: str = "80%"
    layout: str = "reverse"
    border: bool = True
    preview_lines: int = PREVIEW_LINES

    @property
    def preview_command(self) -> str:
        """Shell command fzf runs for the hovered entry."""
        return f"head -n {self.preview_lines} {{}}"

    def to_args(self) -> list[str]:
        """Build the full selector command line.

        Returns:
            Argument vector, program name first.
        """
        args = [
            self.binary,
            "--multi",
            f"--height={self.height}",
            f"--layout={self.layout}",
        ]
        if self.border:
            args.append("--border")
        args.append(f"--preview={self.preview_command}")
        return args


def get_fence_tag(path: str) -> str:
    """
    Get the code fence tag for a file path.

    The tag is the extension of the last path component, lower-cased and
    without its leading dot. Dotfiles count as all-extension, so `.bashrc`
    is tagged `bashrc`.

    Args:
        path: File path as listed (relative or absolute)

    Returns:
        Fence tag, or DEFAULT_FENCE_TAG when there is no extension
    """
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot == -1:
        return DEFAULT_FENCE_TAG
    return name[dot + 1:].lower() or DEFAULT_FENCE_TAG
