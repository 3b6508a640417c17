"""Format serializers for Markdown, LaTeX, JSON, JSON-separated and HTML output."""

from .models import MARKDOWN_HARD_BREAK, FormatKind
from .service import (
    line_label,
    serialize,
    to_html,
    to_json,
    to_json_separated,
    to_latex,
    to_markdown,
)

__all__ = [
    "FormatKind",
    "MARKDOWN_HARD_BREAK",
    "serialize",
    "line_label",
    "to_markdown",
    "to_latex",
    "to_json",
    "to_json_separated",
    "to_html",
]
