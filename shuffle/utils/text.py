"""Plain-text helpers shared by the normalizer, reflow engine and serializers."""

from typing import List


def split_lines(text: str) -> List[str]:
    """Split text on ``\\n`` only.

    Unlike str.splitlines(), this keeps a trailing empty segment and does not
    treat other characters (\\r, \\x0b, \\u2028, ...) as line boundaries, so
    the segment count always equals ``text.count("\\n") + 1``.
    """
    return text.split("\n")


def is_blank(line: str) -> bool:
    """True for empty or whitespace-only lines."""
    return not line.strip()


def split_words(paragraph: str) -> List[str]:
    """Split a paragraph into space-delimited words, dropping empty tokens.

    Example:
        >>> split_words("  two  spaces ")
        ['two', 'spaces']
    """
    return [word for word in paragraph.split(" ") if word]
