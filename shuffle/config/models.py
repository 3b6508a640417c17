"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from shuffle.domain.models import (
    DEFAULT_FONT_SIZE,
    DEFAULT_HORIZONTAL_PADDING,
    DEFAULT_WIDTH,
    MAX_FONT_SIZE,
    MAX_WIDTH,
    MIN_FONT_SIZE,
    MIN_WIDTH,
)
from shuffle.serialization.models import FormatKind


class MeasurementStrategy(str, Enum):
    """Headless text-measurement strategies."""

    PROPORTIONAL = "proportional"
    MONOSPACE = "monospace"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class TransformConfig(BaseModel):
    """Default transformation settings."""

    format: FormatKind = Field(FormatKind.MARKDOWN, description="Output format")
    preserve_margins: bool = Field(
        True, description="Reproduce on-screen line wrapping in the output"
    )
    compact: Optional[bool] = Field(
        None, description="Force compact (true) or indented (false) JSON; null keeps the default policy"
    )

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Accept format names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    model_config = {"use_enum_values": True, "validate_default": True}


class RenderConfig(BaseModel):
    """Rendering surface the reflow engine emulates."""

    width: float = Field(
        DEFAULT_WIDTH, ge=MIN_WIDTH, le=MAX_WIDTH, description="Editor width in pixels"
    )
    font_size: float = Field(
        DEFAULT_FONT_SIZE, ge=MIN_FONT_SIZE, le=MAX_FONT_SIZE, description="Font size in pixels"
    )
    horizontal_padding: float = Field(
        DEFAULT_HORIZONTAL_PADDING, ge=0, description="Total left+right padding in pixels"
    )

    @property
    def available_width(self) -> float:
        """Width left for text once padding is removed."""
        return self.width - self.horizontal_padding


class MeasurementConfig(BaseModel):
    """Text-measurement settings."""

    strategy: MeasurementStrategy = Field(
        MeasurementStrategy.PROPORTIONAL, description="Measurement strategy"
    )
    char_width_ratio: float = Field(
        0.6, gt=0, le=2, description="Character advance as a fraction of font size (monospace only)"
    )
    cache: bool = Field(False, description="Memoize measurements within one process")
    cache_size: int = Field(4096, ge=1, le=1_000_000, description="Maximum cached measurements")

    model_config = {"use_enum_values": True, "validate_default": True}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for Shuffle."""

    transform: TransformConfig = Field(
        default_factory=TransformConfig, description="Transformation defaults"
    )
    render: RenderConfig = Field(default_factory=RenderConfig, description="Rendering surface")
    measurement: MeasurementConfig = Field(
        default_factory=MeasurementConfig, description="Text measurement"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
