"""Test helper utilities for Shuffle tests."""

from .stub_measurer import FailingMeasurer, RecordingMeasurer

__all__ = ["RecordingMeasurer", "FailingMeasurer"]
