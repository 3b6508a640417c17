"""Line reflow engine reproducing on-screen word wrapping as explicit line breaks.

This module provides:
- reflow_text / wrap_paragraph: greedy word wrap over measured widths
- TextMeasurer and headless measurers (monospace, proportional, caching)
- build_measurer: factory driven by MeasurementConfig
- MeasurementError: raised when the measurer is unusable
"""

from .engine import reflow_text, wrap_paragraph
from .exceptions import MeasurementError, ReflowError
from .factory import build_measurer
from .measurement import (
    CachingMeasurer,
    MeasureFn,
    Measurer,
    MonospaceMeasurer,
    ProportionalMeasurer,
    TextMeasurer,
    resolve_measure,
)

__all__ = [
    "reflow_text",
    "wrap_paragraph",
    "build_measurer",
    "resolve_measure",
    "TextMeasurer",
    "MonospaceMeasurer",
    "ProportionalMeasurer",
    "CachingMeasurer",
    "MeasureFn",
    "Measurer",
    "MeasurementError",
    "ReflowError",
]
