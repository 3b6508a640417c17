"""Text transformation service.

Runs the full pipeline for one request:
1. Normalize blank lines
2. Resolve the output format (unknown formats pass the normalized text through)
3. Reflow to on-screen line breaks when margins are preserved and a usable
   measurer and width are available
4. Serialize into the requested format

Every step is pure. Missing or failing measurement degrades to the
non-reflowed output instead of raising.
"""

import logging
from typing import Optional, Tuple, Union

from shuffle.domain.models import (
    DEFAULT_FONT_SIZE,
    DEFAULT_HORIZONTAL_PADDING,
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
    Entry,
)
from shuffle.logging import get_logger
from shuffle.normalization import normalize_text
from shuffle.reflow import ReflowError, reflow_text, resolve_measure
from shuffle.reflow.measurement import Measurer
from shuffle.serialization import FormatKind, serialize
from shuffle.utils.numbers import clamp, is_finite_number, positive_or_none

from .models import ReflowSettings, TransformRequest, TransformResult

logger = get_logger(__name__, component="transform")


class TextTransformer:
    """Transforms entry text into Markdown, LaTeX, JSON, JSON-separated or HTML.

    Stateless: a single instance may serve any number of requests, from any
    number of threads.
    """

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        """Initialize TextTransformer.

        Args:
            logger_instance: Logger instance (defaults to module logger)
        """
        self.logger = logger_instance or logger

    def run(self, request: TransformRequest) -> str:
        """Transform the request's text into its output format.

        Args:
            request: Text, format, margin preference and rendering context

        Returns:
            Transformed string
        """
        return self.run_with_details(request).output

    def run_with_details(self, request: TransformRequest) -> TransformResult:
        """Transform the request and report whether reflow actually ran."""
        normalized = normalize_text(request.text)

        kind = FormatKind.parse(request.format)
        if kind is None:
            self.logger.warning(
                f"Unknown output format {request.format!r}, returning normalized text",
                extra={
                    "event": "transform.format.unknown",
                    "requested_format": str(request.format),
                },
            )
            return TransformResult(output=normalized, format=None, reflowed=False)

        reflowed = self._try_reflow(normalized, kind, request) if request.preserve_margins else None

        if reflowed is not None:
            output = serialize(
                reflowed,
                kind,
                compact=self._reflowed_compact(kind, request.compact),
                drop_blank_lines=True,
            )
        else:
            compact = request.compact if request.compact is not None else not request.preserve_margins
            output = serialize(
                normalized,
                kind,
                compact=compact,
                hard_breaks=not request.preserve_margins,
            )

        self.logger.debug(
            "Transform completed",
            extra={
                "event": "transform.completed",
                "output_format": kind.value,
                "preserve_margins": request.preserve_margins,
                "reflow_applied": reflowed is not None,
                "input_length": len(request.text or ""),
                "output_length": len(output),
            },
        )

        return TransformResult(output=output, format=kind, reflowed=reflowed is not None)

    def _try_reflow(self, text: str, kind: FormatKind, request: TransformRequest) -> Optional[str]:
        """Reflow text, or return None when reflow is unavailable or fails."""
        settings, reason = resolve_reflow_settings(request)
        if settings is None:
            self.logger.debug(
                f"Reflow unavailable ({reason}), using normalized text",
                extra={"event": "transform.reflow.skipped", "reason": reason},
            )
            return None

        try:
            return reflow_text(
                text,
                settings.available_width,
                settings.font_size,
                settings.measure,
                line_break=kind.line_break,
            )
        except ReflowError as e:
            self.logger.warning(
                f"Reflow failed, using normalized text: {e}",
                extra={"event": "transform.reflow.failed", "error_type": type(e).__name__},
            )
            return None

    @staticmethod
    def _reflowed_compact(kind: FormatKind, compact: Optional[bool]) -> bool:
        """Compactness for reflowed output: single-line json, indented json-separated."""
        if compact is not None:
            return compact
        return kind is FormatKind.JSON


def resolve_reflow_settings(request: TransformRequest) -> Tuple[Optional[ReflowSettings], str]:
    """Validate the request's reflow inputs.

    Returns:
        (settings, "") when reflow can run, else (None, reason)
    """
    measure = resolve_measure(request.measurer)
    if measure is None:
        return None, "no measurer"

    render_width = positive_or_none(request.render_width)
    if render_width is None:
        return None, "render width unavailable"

    padding = request.horizontal_padding if is_finite_number(request.horizontal_padding) else 0.0
    available_width = render_width - max(padding, 0.0)
    if available_width <= 0:
        return None, "no room left after padding"

    font_size = positive_or_none(request.font_size)
    if font_size is None:
        return None, "font size unavailable"

    applied_font_size = clamp(font_size, MIN_FONT_SIZE, MAX_FONT_SIZE)
    if applied_font_size != font_size:
        bound = "minimum" if applied_font_size == MIN_FONT_SIZE else "maximum"
        logger.warning(
            f"Font size limited to {bound} of {applied_font_size}px",
            extra={
                "event": "transform.font_size.clamped",
                "requested_font_size": request.font_size,
                "applied_font_size": applied_font_size,
            },
        )

    return (
        ReflowSettings(
            available_width=available_width,
            font_size=applied_font_size,
            measure=measure,
        ),
        "",
    )


_default_transformer = TextTransformer()


def transform(
    text: str,
    format: Union[str, FormatKind],
    preserve_margins: bool = True,
    *,
    render_width: Optional[float] = None,
    font_size: float = DEFAULT_FONT_SIZE,
    measurer: Optional[Measurer] = None,
    horizontal_padding: float = 0.0,
    compact: Optional[bool] = None,
) -> str:
    """Transform text into the requested format.

    Args:
        text: Raw entry text
        format: markdown, latex, json, json-separated or html
        preserve_margins: Reproduce on-screen wrapping when a measurer and
            render width are supplied; when False, Markdown gains hard breaks
            and JSON is compact
        render_width: Rendering surface width in pixels
        font_size: Font size in pixels
        measurer: TextMeasurer or callable ``(text, font_size) -> width``
        horizontal_padding: Pixels to subtract from render_width
        compact: Override JSON compactness

    Returns:
        Transformed string

    Example:
        >>> transform("Hello world\\n\\nThis is Shuffle.", "latex", True)
        '\\\\begin{document}\\nHello world\\n\\nThis is Shuffle.\\n\\\\end{document}'
    """
    return _default_transformer.run(
        TransformRequest(
            text=text,
            format=format,
            preserve_margins=preserve_margins,
            render_width=render_width,
            font_size=font_size,
            measurer=measurer,
            horizontal_padding=horizontal_padding,
            compact=compact,
        )
    )


def transform_entry(
    entry: Entry,
    format: Union[str, FormatKind],
    preserve_margins: bool = True,
    measurer: Optional[Measurer] = None,
    horizontal_padding: float = DEFAULT_HORIZONTAL_PADDING,
) -> str:
    """Transform an entry using its own width and font size.

    The entry is never modified.
    """
    return _default_transformer.run(
        TransformRequest.from_entry(
            entry,
            format,
            preserve_margins=preserve_margins,
            measurer=measurer,
            horizontal_padding=horizontal_padding,
        )
    )
