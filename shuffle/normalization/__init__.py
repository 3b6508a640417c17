"""Text normalization applied as the first step of every transformation."""

from .service import normalize_text

__all__ = ["normalize_text"]
