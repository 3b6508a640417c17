"""Format serializers mapping normalized (optionally reflowed) text to output encodings.

Every serializer is total over strings. JSON encodings always produce valid
JSON, and an unrecognized format passes the text through unchanged.
"""

import json
from typing import Any, Callable, Dict, Union

from shuffle.logging import get_logger
from shuffle.utils.text import is_blank, split_lines

from .models import MARKDOWN_HARD_BREAK, FormatKind

logger = get_logger(__name__, component="serialization")

LATEX_PREAMBLE = "\\begin{document}"
LATEX_POSTAMBLE = "\\end{document}"
HTML_LINE_BREAK = "<br>"
JSON_INDENT = 2
JSON_CONTENT_KEY = "content"


def _dump_json(payload: Dict[str, Any], compact: bool) -> str:
    if compact:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(payload, ensure_ascii=False, indent=JSON_INDENT)


def to_markdown(text: str, hard_breaks: bool = False) -> str:
    """Markdown output.

    Without hard breaks the text is returned as-is. With hard breaks every
    non-blank line ends in exactly two spaces so renderers keep the line
    break; blank lines are left alone.
    """
    if not hard_breaks:
        return text
    return "\n".join(
        line if is_blank(line) else line.rstrip(" ") + MARKDOWN_HARD_BREAK
        for line in split_lines(text)
    )


def to_latex(text: str) -> str:
    """Wrap text in a LaTeX document environment."""
    return f"{LATEX_PREAMBLE}\n{text}\n{LATEX_POSTAMBLE}"


def to_json(text: str, compact: bool = False) -> str:
    """Encode text as ``{"content": text}``."""
    return _dump_json({JSON_CONTENT_KEY: text}, compact)


def line_label(index: int) -> str:
    """Key for the 1-based line ``index`` in json-separated output."""
    return f"line {index}"


def to_json_separated(text: str, compact: bool = False, drop_blank_lines: bool = False) -> str:
    """Encode each line under its own ``"line N"`` key, in order.

    Args:
        text: Text to encode
        compact: Single-line output instead of 2-space indentation
        drop_blank_lines: Keep only non-blank lines, stripped (the view of
            visual lines used after reflow)
    """
    lines = split_lines(text)
    if drop_blank_lines:
        lines = [line.strip() for line in lines if not is_blank(line)]

    payload = {line_label(index): line for index, line in enumerate(lines, start=1)}
    return _dump_json(payload, compact)


def to_html(text: str) -> str:
    """Wrap text in a single ``<div>`` with every line break replaced by ``<br>``."""
    body = text.replace("\n", HTML_LINE_BREAK)
    return f"<div>{body}</div>"


def serialize(
    text: str,
    format: Union[str, FormatKind, None],
    compact: bool = False,
    *,
    hard_breaks: bool = False,
    drop_blank_lines: bool = False,
) -> str:
    """Serialize text into the requested output format.

    Args:
        text: Normalized (optionally reflowed) text
        format: Output format name or FormatKind
        compact: For JSON formats, emit a single line instead of indenting
        hard_breaks: For Markdown, append a two-space hard break to each
            non-blank line
        drop_blank_lines: For json-separated, encode only non-blank lines

    Returns:
        Serialized string; the unchanged text when the format is unknown
    """
    kind = FormatKind.parse(format)

    if kind is None:
        logger.warning(
            f"Unknown output format {format!r}, passing text through",
            extra={"event": "serialization.format.unknown", "requested_format": str(format)},
        )
        return text

    serializers: Dict[FormatKind, Callable[[], str]] = {
        FormatKind.MARKDOWN: lambda: to_markdown(text, hard_breaks=hard_breaks),
        FormatKind.LATEX: lambda: to_latex(text),
        FormatKind.JSON: lambda: to_json(text, compact=compact),
        FormatKind.JSON_SEPARATED: lambda: to_json_separated(
            text, compact=compact, drop_blank_lines=drop_blank_lines
        ),
        FormatKind.HTML: lambda: to_html(text),
    }

    return serializers[kind]()

