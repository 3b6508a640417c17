"""Domain models for the Shuffle journal."""

from .models import (
    DEFAULT_FONT_SIZE,
    DEFAULT_HORIZONTAL_PADDING,
    DEFAULT_WIDTH,
    MAX_FONT_SIZE,
    MAX_WIDTH,
    MIN_FONT_SIZE,
    MIN_WIDTH,
    Entry,
)

__all__ = [
    "Entry",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_HORIZONTAL_PADDING",
    "DEFAULT_WIDTH",
    "MAX_FONT_SIZE",
    "MAX_WIDTH",
    "MIN_FONT_SIZE",
    "MIN_WIDTH",
]
