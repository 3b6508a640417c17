"""Data models for the transformation layer.

This module defines the request the transformer consumes and the resolved
reflow settings it derives from it, plus the result of a run.
"""

from dataclasses import dataclass
from typing import Optional, Union

from shuffle.domain.models import DEFAULT_FONT_SIZE, DEFAULT_HORIZONTAL_PADDING, Entry
from shuffle.reflow.measurement import MeasureFn, Measurer
from shuffle.serialization.models import FormatKind


@dataclass
class TransformRequest:
    """Everything needed to transform one piece of text.

    Attributes:
        text: Raw entry text
        format: Output format name or FormatKind
        preserve_margins: Reproduce on-screen wrapping (reflow) when possible
        render_width: Width of the rendering surface in pixels
        font_size: Font size in pixels
        measurer: TextMeasurer or callable ``(text, font_size) -> width``
        horizontal_padding: Pixels subtracted from render_width before reflow
        compact: Force compact/indented JSON; None keeps the default policy
    """

    text: str
    format: Union[str, FormatKind] = FormatKind.MARKDOWN
    preserve_margins: bool = True
    render_width: Optional[float] = None
    font_size: float = DEFAULT_FONT_SIZE
    measurer: Optional[Measurer] = None
    horizontal_padding: float = 0.0
    compact: Optional[bool] = None

    @classmethod
    def from_entry(
        cls,
        entry: Entry,
        format: Union[str, FormatKind],
        preserve_margins: bool = True,
        measurer: Optional[Measurer] = None,
        horizontal_padding: float = DEFAULT_HORIZONTAL_PADDING,
        compact: Optional[bool] = None,
    ) -> "TransformRequest":
        """Build a request from an entry's text and display preferences."""
        return cls(
            text=entry.text,
            format=format,
            preserve_margins=preserve_margins,
            render_width=entry.effective_width,
            font_size=entry.effective_font_size,
            measurer=measurer,
            horizontal_padding=horizontal_padding,
            compact=compact,
        )


@dataclass(frozen=True)
class ReflowSettings:
    """Validated inputs for one reflow pass.

    Attributes:
        available_width: Usable width in pixels, padding already removed (> 0)
        font_size: Font size clamped into the editor range
        measure: Measurement function
    """

    available_width: float
    font_size: float
    measure: MeasureFn


@dataclass(frozen=True)
class TransformResult:
    """Outcome of one transformation.

    Attributes:
        output: Transformed string
        format: Resolved output format (None when the format was unknown)
        reflowed: True only when on-screen wrapping was actually applied
    """

    output: str
    format: Optional[FormatKind]
    reflowed: bool
