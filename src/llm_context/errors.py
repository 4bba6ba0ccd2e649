"""Exception types raised by llm-context modules."""

from __future__ import annotations


class LlmContextError(Exception):
    """Base class for all llm-context errors."""

    pass


class MissingDependencyError(LlmContextError):
    """A required external program is not on PATH."""

    def __init__(self, binary: str):
        self.binary = binary
        super().__init__(f"{binary} is not installed or not in your PATH")


class ListingError(LlmContextError):
    """File enumeration failed."""

    pass


class SelectorError(LlmContextError):
    """The interactive selector could not be launched or exited with an error."""

    def __init__(self, message: str, returncode: int | None = None):
        self.returncode = returncode
        super().__init__(message)


class SelectionCancelled(LlmContextError):
    """The user aborted the interactive selection."""

    pass


class ClipboardError(LlmContextError):
    """Writing to the system clipboard failed."""

    pass
