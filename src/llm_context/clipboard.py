"""System clipboard access for llm-context."""

from __future__ import annotations

import pyperclip

from .errors import ClipboardError


class PyperclipClipboard:
    """Clipboard sink backed by pyperclip."""

    def copy(self, text: str) -> None:
        """Place text on the system clipboard.

        Raises:
            ClipboardError: If no clipboard mechanism is available or the copy fails.
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e)) from e
