"""Utility functions for numeric guards and plain-text splitting."""

from .numbers import clamp, is_finite_number, positive_or_none
from .text import is_blank, split_lines, split_words

__all__ = [
    # Numbers
    "clamp",
    "is_finite_number",
    "positive_or_none",
    # Text
    "is_blank",
    "split_lines",
    "split_words",
]
