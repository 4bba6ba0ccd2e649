"""
llm-context: Pick project files with fzf and copy them as LLM-ready context.

The selected files are wrapped in Markdown code fences labeled by path and
placed on the system clipboard, ready to paste into a chat interface.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
