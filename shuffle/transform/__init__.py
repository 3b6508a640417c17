"""Text transformation pipeline: normalize, optionally reflow, serialize.

This module provides:
- TransformRequest: Inputs for one transformation
- ReflowSettings: Validated reflow inputs derived from a request
- TransformResult: Output of one run and whether reflow was applied
- TextTransformer: Service running the pipeline
- transform / transform_entry: Functional entry points
"""

from .models import ReflowSettings, TransformRequest, TransformResult
from .service import TextTransformer, resolve_reflow_settings, transform, transform_entry

__all__ = [
    "TextTransformer",
    "TransformRequest",
    "ReflowSettings",
    "TransformResult",
    "resolve_reflow_settings",
    "transform",
    "transform_entry",
]
