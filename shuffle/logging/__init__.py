"""Logging and observability configuration for structured event emission."""

import logging
from typing import Optional


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges the component field with per-call extra fields."""

    def process(self, msg, kwargs):
        """Process log call, merging adapter extra with call extra."""
        extra = kwargs.get("extra", {})

        # Call's extra takes precedence
        kwargs["extra"] = {**self.extra, **extra}

        return msg, kwargs


def get_logger(name: str, component: Optional[str] = None):
    """Get a logger with optional default component field.

    Args:
        name: Logger name (typically __name__)
        component: Optional component identifier to inject into all logs

    Returns:
        Logger or ComponentLoggerAdapter instance

    Example:
        >>> logger = get_logger(__name__, component="reflow")
        >>> logger.debug("Paragraph wrapped", extra={"event": "reflow.paragraph.wrapped"})
    """
    logger = logging.getLogger(name)

    if component:
        return ComponentLoggerAdapter(logger, {"component": component})

    return logger
