"""Core domain models for journal entries.

This module defines:
- Entry: a user-authored note with its display preferences
- Editor bounds shared by the entry model, configuration, and transform layer
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from shuffle.logging import get_logger
from shuffle.utils.numbers import clamp

logger = get_logger(__name__, component="domain")

# Editor bounds (pixels)
MIN_FONT_SIZE = 8
MAX_FONT_SIZE = 36
DEFAULT_FONT_SIZE = 16

MIN_WIDTH = 300
MAX_WIDTH = 1800
DEFAULT_WIDTH = 1125

# 16px of textarea padding on each side
DEFAULT_HORIZONTAL_PADDING = 32


class Entry(BaseModel):
    """A journal entry as supplied by the entry store.

    The transformation core only reads ``text``, ``width`` and ``font_size``;
    identity, date, tags and description are carried for the surrounding
    application and never touched here.
    """

    id: str = Field(..., description="Entry identifier")
    title: str = Field("", description="Entry title")
    text: str = Field("", description="Free-form entry body")
    date: str = Field(..., description="Entry date (ISO-8601 string)")
    description: Optional[str] = Field(None, description="Optional short description")
    tags: List[str] = Field(default_factory=list, description="Optional tags")
    width: Optional[float] = Field(None, description="Editor width in pixels")
    font_size: Optional[float] = Field(None, alias="fontSize", description="Editor font size in pixels")

    model_config = {"populate_by_name": True}

    @field_validator("id", "date")
    @classmethod
    def strip_required(cls, v: str) -> str:
        """Strip whitespace from identity fields."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Field cannot be empty or whitespace-only")
        return stripped

    @field_validator("width")
    @classmethod
    def clamp_width(cls, v: Optional[float]) -> Optional[float]:
        """Clamp width into the editor's resizable range."""
        if v is None:
            return None
        return clamp(v, MIN_WIDTH, MAX_WIDTH)

    @field_validator("font_size")
    @classmethod
    def clamp_font_size(cls, v: Optional[float]) -> Optional[float]:
        """Clamp font size into the editor's supported range."""
        if v is None:
            return None
        clamped = clamp(v, MIN_FONT_SIZE, MAX_FONT_SIZE)
        if clamped != v:
            bound = "minimum" if clamped == MIN_FONT_SIZE else "maximum"
            logger.warning(
                f"Font size limited to {bound} of {clamped}px",
                extra={
                    "event": "entry.font_size.clamped",
                    "requested_font_size": v,
                    "applied_font_size": clamped,
                },
            )
        return clamped

    @property
    def effective_width(self) -> float:
        """Editor width, falling back to the default width."""
        return self.width if self.width else DEFAULT_WIDTH

    @property
    def effective_font_size(self) -> float:
        """Editor font size, falling back to the default font size."""
        return self.font_size if self.font_size else DEFAULT_FONT_SIZE
