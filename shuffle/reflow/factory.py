"""Factory function for building the configured text measurer."""

import logging

from shuffle.config.models import MeasurementConfig

from .measurement import CachingMeasurer, MonospaceMeasurer, ProportionalMeasurer, TextMeasurer

logger = logging.getLogger(__name__)


def build_measurer(measurement_config: MeasurementConfig) -> TextMeasurer:
    """Instantiate the measurer described by measurement_config.

    Args:
        measurement_config: Strategy, monospace ratio and cache settings

    Returns:
        A TextMeasurer, wrapped in CachingMeasurer when caching is enabled

    Raises:
        ValueError: If the strategy is not supported

    Example:
        >>> measurer = build_measurer(MeasurementConfig(strategy="monospace"))
        >>> measurer.measure("abc", 10)
        18.0
    """
    strategy = str(measurement_config.strategy).lower()

    if strategy == "monospace":
        measurer: TextMeasurer = MonospaceMeasurer(measurement_config.char_width_ratio)
    elif strategy == "proportional":
        measurer = ProportionalMeasurer()
    else:
        raise ValueError(
            f"Unknown measurement strategy: {measurement_config.strategy}. "
            "Supported strategies: monospace, proportional"
        )

    if measurement_config.cache:
        measurer = CachingMeasurer(measurer, max_entries=measurement_config.cache_size)

    logger.debug(
        "Created text measurer",
        extra={
            "strategy": strategy,
            "cached": measurement_config.cache,
            "measurer_class": type(measurer).__name__,
        },
    )

    return measurer
