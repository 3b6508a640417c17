"""Deterministic measurers for reflow tests.

RecordingMeasurer gives every character the same width (independent of
font size by default) so expected line breaks can be worked out by
counting characters, and it records every call so tests can assert on
measurement traffic.
"""

from typing import List, Tuple

from shuffle.reflow.measurement import TextMeasurer


class RecordingMeasurer(TextMeasurer):
    """Fixed width per character; records (text, font_size) for every call."""

    def __init__(self, width_per_char: float = 1.0, scale_with_font: bool = False):
        self.width_per_char = width_per_char
        self.scale_with_font = scale_with_font
        self.calls: List[Tuple[str, float]] = []

    def measure(self, text: str, font_size: float) -> float:
        self.calls.append((text, font_size))
        width = len(text) * self.width_per_char
        if self.scale_with_font:
            width *= font_size
        return width


class FailingMeasurer(TextMeasurer):
    """Raises on every call, like a canvas context that went away."""

    def __init__(self, exc: Exception = None):
        self.exc = exc or RuntimeError("canvas unavailable")
        self.calls = 0

    def measure(self, text: str, font_size: float) -> float:
        self.calls += 1
        raise self.exc
