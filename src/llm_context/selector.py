"""
Interactive selector adapter.

Pipes the file listing into fzf and reads back the chosen paths.
"""

from __future__ import annotations

from .config import SELECTOR_CANCELLED_EXIT_CODE, SelectorConfig
from .errors import MissingDependencyError, SelectionCancelled, SelectorError
from .tools import ToolRunner


def ensure_selector(runner: ToolRunner, config: SelectorConfig | None = None) -> str:
    """Check that the selector binary is on PATH.

    Args:
        runner: Process runner.
        config: Selector settings (defaults apply when None).

    Returns:
        Resolved path of the selector binary.

    Raises:
        MissingDependencyError: If the binary cannot be found.
    """
    config = config or SelectorConfig()
    resolved = runner.which(config.binary)
    if resolved is None:
        raise MissingDependencyError(config.binary)
    return resolved


def parse_selection(output: str) -> list[str]:
    """Turn selector stdout into an ordered list of paths.

    Args:
        output: Raw stdout captured from the selector.

    Returns:
        Non-empty, whitespace-trimmed entries in selection order.
    """
    entries = (line.strip() for line in output.strip().split("\n"))
    return [entry for entry in entries if entry]


def select_files(
    runner: ToolRunner,
    listing_text: str,
    config: SelectorConfig | None = None,
) -> list[str]:
    """Run the interactive selector over a newline-delimited listing.

    The selector draws its UI on the inherited stderr so it stays visible
    while stdout is captured.

    Args:
        runner: Process runner.
        listing_text: Candidate paths, one per line.
        config: Selector settings (defaults apply when None).

    Returns:
        Selected paths in the order the selector printed them.

    Raises:
        SelectionCancelled: If the user aborted the selection.
        SelectorError: If the selector failed to start or exited with an error.
    """
    config = config or SelectorConfig()
    args = config.to_args()

    try:
        result = runner.run(args, input=listing_text, stderr=None)
    except OSError as e:
        raise SelectorError(str(e)) from e

    if result.returncode == SELECTOR_CANCELLED_EXIT_CODE:
        raise SelectionCancelled()
    if result.returncode != 0:
        raise SelectorError(
            f"exit status {result.returncode}", returncode=result.returncode
        )

    return parse_selection(result.stdout or "")
