"""Text-measurement capability injected into the reflow engine.

A measurer answers one question: how wide, in pixels, does a text fragment
render at a given font size? The editor answers it with a live canvas; this
module provides headless stand-ins so reflow can run without a rendering
surface:

- MonospaceMeasurer: fixed advance per character
- ProportionalMeasurer: per-glyph sans-serif advance widths
- CachingMeasurer: opt-in memoization around any pure measurer

Measurement caching policy: the reflow engine never caches. Wrapping a
measurer in CachingMeasurer is an explicit caller decision and is only
correct when the wrapped measurer is a pure function of (text, font_size).
"""

import unicodedata
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Callable, Dict, Optional, Union

MeasureFn = Callable[[str, float], float]

# Helvetica advance widths for printable ASCII (U+0020..U+007E), 1/1000 em
_HELVETICA_WIDTHS = (
    278, 278, 355, 556, 556, 889, 667, 191, 333, 333, 389, 584, 278, 333, 278, 278,
    556, 556, 556, 556, 556, 556, 556, 556, 556, 556, 278, 278, 584, 584, 584, 556,
    1015, 667, 667, 722, 722, 667, 611, 778, 722, 278, 500, 667, 556, 833, 722, 778,
    667, 778, 722, 667, 611, 722, 667, 944, 667, 667, 611, 278, 278, 278, 469, 556,
    333, 556, 556, 500, 556, 556, 278, 556, 556, 222, 222, 500, 222, 833, 556, 556,
    556, 556, 333, 500, 278, 556, 500, 722, 500, 500, 500, 334, 260, 334, 584,
)

SANS_SERIF_WIDTHS: Dict[str, int] = {
    chr(code): width for code, width in zip(range(0x20, 0x7F), _HELVETICA_WIDTHS)
}

UNITS_PER_EM = 1000
DEFAULT_GLYPH_WIDTH = 556
WIDE_GLYPH_WIDTH = 1000


class TextMeasurer(ABC):
    """Base class for text-measurement collaborators.

    Implementations must be consistent: the same (text, font_size) always
    yields the same width, otherwise reflow output is not deterministic.
    """

    @abstractmethod
    def measure(self, text: str, font_size: float) -> float:
        """Return the rendered width of text at font_size, in pixels."""
        raise NotImplementedError

    def __call__(self, text: str, font_size: float) -> float:
        return self.measure(text, font_size)


Measurer = Union[TextMeasurer, MeasureFn]


class MonospaceMeasurer(TextMeasurer):
    """Every character advances by ``char_width_ratio * font_size`` pixels."""

    def __init__(self, char_width_ratio: float = 0.6):
        if char_width_ratio <= 0:
            raise ValueError(f"char_width_ratio must be positive, got: {char_width_ratio}")
        self.char_width_ratio = char_width_ratio

    def measure(self, text: str, font_size: float) -> float:
        return len(text) * (self.char_width_ratio * font_size)


class ProportionalMeasurer(TextMeasurer):
    """Approximates a sans-serif renderer with a glyph advance-width table.

    Width rules per character:
    - printable ASCII: Helvetica advance widths
    - accented Latin: width of the base letter (NFD decomposition)
    - combining marks: zero width
    - East Asian wide/fullwidth: one em
    - anything else: ``default_width``
    """

    def __init__(
        self,
        widths: Optional[Dict[str, int]] = None,
        default_width: int = DEFAULT_GLYPH_WIDTH,
        units_per_em: int = UNITS_PER_EM,
    ):
        self.widths = dict(widths) if widths is not None else dict(SANS_SERIF_WIDTHS)
        self.default_width = default_width
        self.units_per_em = units_per_em

    def measure(self, text: str, font_size: float) -> float:
        units = sum(self._glyph_units(ch) for ch in text)
        return units * font_size / self.units_per_em

    def _glyph_units(self, ch: str) -> int:
        width = self.widths.get(ch)
        if width is not None:
            return width
        if unicodedata.combining(ch):
            return 0
        if unicodedata.east_asian_width(ch) in ("W", "F"):
            return WIDE_GLYPH_WIDTH
        base = unicodedata.normalize("NFD", ch)[0]
        return self.widths.get(base, self.default_width)


class CachingMeasurer(TextMeasurer):
    """Least-recently-used memoization around a pure measurer.

    Only wrap measurers whose output depends solely on (text, font_size).
    """

    def __init__(self, inner: Measurer, max_entries: int = 4096):
        measure = resolve_measure(inner)
        if measure is None:
            raise ValueError("CachingMeasurer requires a callable measurer")
        self.inner = inner
        self._cached = lru_cache(maxsize=max_entries)(measure)

    def measure(self, text: str, font_size: float) -> float:
        return self._cached(text, font_size)

    def cache_info(self):
        """Hit/miss statistics of the underlying LRU cache."""
        return self._cached.cache_info()

    def cache_clear(self) -> None:
        self._cached.cache_clear()


def resolve_measure(measurer: Optional[Measurer]) -> Optional[MeasureFn]:
    """Turn a measurer object or plain callable into a measure function.

    Returns None when the capability is missing or unusable, which the
    transform layer treats as "reflow unavailable".
    """
    if measurer is None:
        return None
    measure = getattr(measurer, "measure", None)
    if callable(measure):
        return measure
    if callable(measurer):
        return measurer
    return None
