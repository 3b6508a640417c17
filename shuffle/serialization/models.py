"""Output format definitions."""

from enum import Enum
from typing import Optional, Union

# Two trailing spaces force a line break in Markdown
MARKDOWN_HARD_BREAK = "  "


class FormatKind(str, Enum):
    """Supported output encodings."""

    MARKDOWN = "markdown"
    LATEX = "latex"
    JSON = "json"
    JSON_SEPARATED = "json-separated"
    HTML = "html"

    @classmethod
    def parse(cls, value: Union[str, "FormatKind", None]) -> Optional["FormatKind"]:
        """Resolve a format name, returning None for unknown values.

        Matching ignores case and surrounding whitespace.

        Example:
            >>> FormatKind.parse(" JSON-Separated ")
            <FormatKind.JSON_SEPARATED: 'json-separated'>
            >>> FormatKind.parse("rtf") is None
            True
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def line_break(self) -> str:
        """Marker joining visual lines within a reflowed paragraph."""
        if self is FormatKind.MARKDOWN:
            return MARKDOWN_HARD_BREAK + "\n"
        return "\n"

    @property
    def display_name(self) -> str:
        """Label used when reporting an export, e.g. 'Markdown' or 'Json-separated'."""
        return self.value[:1].upper() + self.value[1:]
