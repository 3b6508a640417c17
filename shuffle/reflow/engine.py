"""Greedy word-wrap reflow engine.

Reconstructs, as plain text with explicit line breaks, the wrapping a
proportional-font renderer of a given pixel width would produce on screen:

1. Split the text on line breaks into paragraphs
2. Leave blank paragraphs empty (no reflow)
3. Greedily pack each paragraph's words into lines no wider than the
   available width, never splitting a word
4. Join lines with a format-aware line break, paragraphs with a blank line

The engine is stateless and performs no caching; each call measures afresh.
"""

from typing import List

from shuffle.logging import get_logger
from shuffle.utils.numbers import is_finite_number
from shuffle.utils.text import is_blank, split_lines, split_words

from .exceptions import MeasurementError
from .measurement import MeasureFn

logger = get_logger(__name__, component="reflow")

PARAGRAPH_SEPARATOR = "\n\n"


def _measure(measure: MeasureFn, fragment: str, font_size: float) -> float:
    """Call the measurer, converting failures into MeasurementError."""
    try:
        width = measure(fragment, font_size)
    except MeasurementError:
        raise
    except Exception as e:
        raise MeasurementError(
            f"Measurer failed for fragment of length {len(fragment)}: {e}",
            fragment=fragment,
            font_size=font_size,
        ) from e

    if not is_finite_number(width) or width < 0:
        raise MeasurementError(
            f"Measurer returned unusable width: {width!r}",
            fragment=fragment,
            font_size=font_size,
        )
    return float(width)


def wrap_paragraph(
    paragraph: str,
    available_width: float,
    font_size: float,
    measure: MeasureFn,
) -> List[str]:
    """Greedily pack a paragraph's words into visual lines.

    A word wider than ``available_width`` is placed alone on its own line.

    Args:
        paragraph: One logical line of text
        available_width: Usable line width in pixels (padding already removed)
        font_size: Font size passed through to the measurer
        measure: Measurement function ``(text, font_size) -> width``

    Returns:
        Visual lines in order; empty list for a blank paragraph

    Raises:
        MeasurementError: If the measurer fails or returns an unusable width
    """
    lines: List[str] = []
    current = ""

    for word in split_words(paragraph):
        candidate = f"{current} {word}" if current else word
        if _measure(measure, candidate, font_size) <= available_width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word

    if current:
        lines.append(current)

    return lines


def reflow_text(
    text: str,
    available_width: float,
    font_size: float,
    measure: MeasureFn,
    line_break: str = "\n",
) -> str:
    """Re-wrap text to match on-screen line breaks.

    Args:
        text: Normalized text to reflow
        available_width: Usable line width in pixels (caller subtracts padding)
        font_size: Font size passed through to the measurer
        measure: Measurement function ``(text, font_size) -> width``
        line_break: Marker joining visual lines inside a paragraph
            (``"  \\n"`` for Markdown hard breaks, ``"\\n"`` otherwise)

    Returns:
        Reflowed text, paragraphs separated by a blank line

    Raises:
        MeasurementError: If the measurer fails or returns an unusable width

    Example:
        >>> reflow_text("aa bb cc", 5, 16, lambda s, _: len(s))
        'aa bb\\ncc'
    """
    paragraphs = []
    line_count = 0

    for paragraph in split_lines(text):
        if is_blank(paragraph):
            paragraphs.append("")
            continue
        lines = wrap_paragraph(paragraph, available_width, font_size, measure)
        line_count += len(lines)
        paragraphs.append(line_break.join(lines))

    logger.debug(
        "Reflowed text",
        extra={
            "event": "reflow.text.reflowed",
            "paragraph_count": len(paragraphs),
            "line_count": line_count,
            "available_width": available_width,
            "font_size": font_size,
        },
    )

    return PARAGRAPH_SEPARATOR.join(paragraphs)
