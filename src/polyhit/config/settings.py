"""Configuration settings for Polyhit."""

from pathlib import Path

from pydantic import BaseModel, Field

from polyhit.core.containment import EPSILON
from polyhit.core.hit_test import DEFAULT_HANDLE_RADIUS
from polyhit.core.transform import SCALE_PER_DELTA
from polyhit.domain import TransformConvention


class GeometryConfig(BaseModel):
    """Tolerances for containment and hit-testing.

    Tolerances are absolute, in object units. Callers working at very large
    or very small coordinate magnitudes should scale them accordingly.
    """

    epsilon: float = Field(
        default=EPSILON,
        ge=0.0,
        description="Edge determinant tolerance for boundary detection",
    )
    handle_radius: float = Field(
        default=DEFAULT_HANDLE_RADIUS,
        gt=0.0,
        description="Reach of vertex handles and edges for hit-testing",
    )

    def handle_radius_at(self, scale: float) -> float:
        """Get the handle radius in object units for a screen-space radius at the given scale.

        Args:
            scale: Current viewport scale

        Returns:
            Radius in object units
        """
        return self.handle_radius / scale


class ViewportConfig(BaseModel):
    """Configuration for pan and zoom."""

    scale_per_delta: float = Field(
        default=SCALE_PER_DELTA,
        gt=0.0,
        description="Scale change per unit of mouse wheel delta",
    )
    initial_scale: float = Field(
        default=1.0,
        gt=0.0,
        description="Scale of a freshly opened canvas",
    )
    convention: TransformConvention = Field(
        default=TransformConvention.TRANSPOSED,
        description="Order in which offset and scale compose",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolyhitSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyhitSettings:
    """Get default application settings."""
    return PolyhitSettings()
