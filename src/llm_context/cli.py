"""
CLI entry point for llm-context.

Pick files with fzf and copy them to the clipboard as LLM-ready context.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .clipboard import PyperclipClipboard
from .config import FALLBACK_SEPARATOR, SelectorConfig
from .errors import (
    ClipboardError,
    ListingError,
    MissingDependencyError,
    SelectionCancelled,
    SelectorError,
)
from .renderer import render_context
from .scanner import list_files
from .selector import ensure_selector, select_files
from .tools import ToolRunner

# Initialize CLI app
app = typer.Typer(
    name="llm-context",
    help="Interactively pick files and copy them to the clipboard as LLM context.",
    add_completion=False,
)

console = Console(soft_wrap=True, highlight=False, emoji=False)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"llm-context version {__version__}")
        raise typer.Exit()


def copy_context(
    runner: ToolRunner,
    clipboard: PyperclipClipboard,
    root: Path,
    selector_config: Optional[SelectorConfig] = None,
    verbose: bool = False,
) -> int:
    """
    Run the select-and-copy flow.

    Args:
        runner: Process runner used for fd, git and fzf
        clipboard: Clipboard sink
        root: Directory to list files from
        selector_config: fzf presentation settings
        verbose: Print diagnostics about each stage

    Returns:
        Process exit code
    """
    selector_config = selector_config or SelectorConfig()

    # 1. Check for the selector
    try:
        selector_path = ensure_selector(runner, selector_config)
    except MissingDependencyError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    if verbose:
        console.print(f"[dim]Using selector at {escape(selector_path)}[/dim]")

    # 2. List candidate files
    try:
        listing = list_files(runner, root)
    except ListingError as e:
        console.print(f"[red]Error listing files: {escape(str(e))}[/red]")
        return 1

    if verbose:
        console.print(f"[dim]Listed {len(listing)} files via {listing.source}[/dim]")

    # 3. Let the user pick
    try:
        selected = select_files(runner, listing.as_text(), selector_config)
    except SelectionCancelled:
        return 0
    except SelectorError as e:
        console.print(f"[red]Error running {selector_config.binary}: {escape(str(e))}[/red]")
        return 1

    if not selected:
        console.print("No files selected.")
        return 0

    # 4. Build the document
    rendered = render_context(selected, root)

    if verbose and rendered.skipped:
        console.print(f"[dim]Skipped {len(rendered.skipped)} unreadable files[/dim]")

    # 5. Copy to clipboard, printing the document if that fails
    try:
        clipboard.copy(rendered.text)
    except ClipboardError as e:
        console.print(f"[yellow]⚠️  Failed to copy to clipboard: {escape(str(e))}[/yellow]")
        console.print("Here is the output instead:")
        console.print(FALLBACK_SEPARATOR)
        typer.echo(rendered.text, color=True)
        return 0

    console.print(
        f"[green]✅ Copied {len(rendered.included)} files to clipboard "
        f"({rendered.char_count} chars)![/green]"
    )
    return 0


@app.command()
def pick(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Print which listing strategy was used and other diagnostics.",
    ),
    version: bool = typer.Option(
        False,
        "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """
    Select files from the current directory and copy them as LLM context.

    Files are listed with fd, git ls-files, or a directory walk (first that
    works), picked in fzf (TAB to mark several), then copied to the clipboard
    as Markdown code blocks labeled by path.
    """
    exit_code = copy_context(
        runner=ToolRunner(),
        clipboard=PyperclipClipboard(),
        root=Path.cwd(),
        verbose=verbose,
    )
    if exit_code:
        raise typer.Exit(exit_code)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
