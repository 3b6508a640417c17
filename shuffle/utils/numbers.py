"""Numeric guards for pixel widths and font sizes.

Widths and font sizes arrive from UI state, config files and CLI flags, so
they may be missing, non-numeric, or non-finite. These helpers let callers
treat such values as "unavailable" instead of crashing.
"""

import math
import numbers
from typing import Any, Optional


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into the closed range [lower, upper].

    Example:
        >>> clamp(40, 8, 36)
        36
    """
    return max(lower, min(value, upper))


def is_finite_number(value: Any) -> bool:
    """Return True for real, finite numbers (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def positive_or_none(value: Any) -> Optional[float]:
    """Return value as a float if it is finite and > 0, else None.

    Example:
        >>> positive_or_none(12)
        12.0
        >>> positive_or_none(float("inf")) is None
        True
    """
    if not is_finite_number(value) or value <= 0:
        return None
    return float(value)
