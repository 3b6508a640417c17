"""Blank-line normalization applied before every transformation."""

import re
from typing import Optional

# Three or more consecutive line breaks
_EXCESS_BREAKS = re.compile(r"\n{3,}")


def normalize_text(text: Optional[str]) -> str:
    """Collapse every run of three or more line breaks into exactly two.

    No other whitespace is touched. The function is total (None becomes the
    empty string) and idempotent.

    Args:
        text: Raw entry text

    Returns:
        Text with excess blank lines collapsed to a single blank line

    Example:
        >>> normalize_text("a\\n\\n\\n\\nb")
        'a\\n\\nb'
    """
    if not text:
        return ""
    return _EXCESS_BREAKS.sub("\n\n", text)
