"""
Text processing utilities for résumé content.

Small string helpers shared by the editing and rendering contexts.
"""

import re
from typing import List

_URL_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


def split_delimited(text: str, delimiter: str = ",") -> List[str]:
    """
    Split delimited text into trimmed, non-empty items.

    Args:
        text: Raw delimited string (e.g., "Python, SQL, , Docker")
        delimiter: Item separator

    Returns:
        Items in original order with surrounding whitespace removed

    Example:
        >>> split_delimited("Python, SQL, , Docker")
        ['Python', 'SQL', 'Docker']
    """
    if not text:
        return []
    return [item.strip() for item in text.split(delimiter) if item.strip()]


def strip_url_scheme(url: str) -> str:
    """
    Remove a leading http:// or https:// for display.

    Example:
        >>> strip_url_scheme("https://github.com/jane")
        'github.com/jane'
    """
    return _URL_SCHEME.sub("", url or "")


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        "short"
        >>> truncate_display("this is a very long string", 10)
        "this is..."
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
