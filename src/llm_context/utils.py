"""
Utility functions for llm-context.

Decodes file contents robustly so a stray Latin-1 file does not abort a copy.
"""

from __future__ import annotations

from pathlib import Path

import chardet

_UTF8_BOM = b"\xef\xbb\xbf"


def detect_encoding(data: bytes) -> str:
    """Detect a likely text encoding for raw file bytes.

    UTF-8 is preferred and `chardet` is only consulted when strict UTF-8
    decoding fails, which keeps UTF-8 files from being misread as CP1252.

    Args:
        data: File contents.

    Returns:
        A normalized encoding label (e.g., `"utf-8"`, `"utf-8-sig"`, `"windows-1252"`).
    """
    if not data:
        return "utf-8"

    if data.startswith(_UTF8_BOM):
        return "utf-8-sig"

    try:
        data.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    result = chardet.detect(data)
    encoding_any = result.get("encoding")

    if not isinstance(encoding_any, str) or not encoding_any:
        return "utf-8"

    encoding = encoding_any.lower()
    if encoding in ("ascii", "utf-8", "utf8"):
        return "utf-8"

    return encoding


def decode_text(data: bytes) -> str:
    """Decode file bytes to text, never failing on bad sequences.

    Args:
        data: File contents.

    Returns:
        Decoded text; undecodable bytes become U+FFFD.
    """
    encoding = detect_encoding(data)
    try:
        return data.decode(encoding, errors="replace")
    except LookupError:
        # chardet can name codecs Python does not ship
        return data.decode("utf-8", errors="replace")


def read_file_text(file_path: Path) -> str:
    """Read a whole file as text.

    Args:
        file_path: Path to the file to read.

    Returns:
        File contents as text.

    Raises:
        OSError: If the file cannot be read (missing, permission, directory...).
    """
    return decode_text(file_path.read_bytes())
