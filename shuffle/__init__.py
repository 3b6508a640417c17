"""Shuffle: journal entry text transformation with visual line-break reflow."""

from .domain import Entry
from .normalization import normalize_text
from .reflow import (
    CachingMeasurer,
    MeasurementError,
    MonospaceMeasurer,
    ProportionalMeasurer,
    TextMeasurer,
    reflow_text,
)
from .serialization import FormatKind, serialize
from .transform import TextTransformer, TransformRequest, transform, transform_entry

__version__ = "0.1.0"

__all__ = [
    "Entry",
    "FormatKind",
    "TextTransformer",
    "TransformRequest",
    "TextMeasurer",
    "MonospaceMeasurer",
    "ProportionalMeasurer",
    "CachingMeasurer",
    "MeasurementError",
    "normalize_text",
    "reflow_text",
    "serialize",
    "transform",
    "transform_entry",
]
