"""Configuration settings for roughsketch."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from roughsketch.domain.randomizer import Randomizer
from roughsketch.exceptions import ConfigurationError


class FillStyle(str, Enum):
    """Interior fill pattern."""

    NONE = "none"
    SOLID = "solid"
    HACHURE = "hachure"
    CROSS_HATCH = "cross_hatch"
    ZIGZAG = "zigzag"
    ZIGZAG_LINE = "zigzag_line"
    DASHED = "dashed"
    DOTS = "dots"
    DOT_DASH = "dot_dash"


def _build(model: type[BaseModel], values: dict[str, Any]) -> Any:
    """Construct a model, reporting the first validation failure.

    Raises:
        ConfigurationError: If any field fails validation
    """
    try:
        return model(**values)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or model.__name__
        raise ConfigurationError(field, error["msg"]) from e


class DrawConfig(BaseModel):
    """Roughness parameters plus the randomizer that drives them.

    The field values are immutable. The owned randomizer is not: every offset
    drawn advances it, so callers that need a repeatable redraw must call
    ``reset()`` before generating again.
    """

    model_config = ConfigDict(frozen=True)

    max_randomness_offset: float = Field(
        default=2.0,
        ge=0.0,
        description="Maximum random offset applied to points",
    )
    roughness: float = Field(
        default=1.0,
        ge=0.0,
        description="How rough the drawing is; 0 draws exact shapes",
    )
    bowing: float = Field(
        default=1.0,
        description="How much straight lines bow; 0 keeps them straight",
    )
    curve_fitting: float = Field(
        default=0.95,
        ge=0.0,
        le=1.0,
        description="How closely curves match the requested dimensions",
    )
    curve_tightness: float = Field(
        default=0.0,
        description="How tightly fitted curves hug their points",
    )
    curve_step_count: float = Field(
        default=9.0,
        gt=0.0,
        description="Number of points used to approximate curves",
    )
    seed: int = Field(
        default=1,
        ge=0,
        description="Seed for the randomizer",
    )
    disable_multi_stroke: bool = Field(
        default=False,
        description="Draw each segment once instead of twice",
    )

    _randomizer: Randomizer = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._randomizer = Randomizer(seed=self.seed)

    @classmethod
    def build(cls, **values: Any) -> "DrawConfig":
        """Create a configuration, raising ConfigurationError on bad values."""
        return _build(cls, values)

    @property
    def randomizer(self) -> Randomizer:
        """The randomizer owned by this configuration."""
        return self._randomizer

    def reset(self) -> None:
        """Rewind the randomizer to its seed."""
        self._randomizer.reset()

    def offset(self, min_value: float, max_value: float, roughness_gain: float = 1.0) -> float:
        """Generate a random offset between ``min_value`` and ``max_value``.

        The result is scaled by roughness, so a roughness of 0 always yields 0.
        A random value is drawn either way.

        Args:
            min_value: Lower bound before roughness scaling
            max_value: Upper bound before roughness scaling
            roughness_gain: Extra multiplier for this particular offset

        Returns:
            Scaled random offset
        """
        return (
            self.roughness
            * roughness_gain
            * (self._randomizer.next() * (max_value - min_value) + min_value)
        )

    def offset_symmetric(self, x: float, roughness_gain: float = 1.0) -> float:
        """Generate a random offset between ``-x`` and ``x``."""
        return self.offset(-x, x, roughness_gain)

    def copy_with(self, **changes: Any) -> "DrawConfig":
        """Return a validated copy with some fields replaced and a fresh randomizer."""
        return type(self)(**{**self.model_dump(), **changes})


class FillerConfig(BaseModel):
    """Configuration for interior fill patterns.

    Carries its own DrawConfig so fill strokes are perturbed independently of
    the outline.
    """

    model_config = ConfigDict(frozen=True)

    fill_weight: float = Field(
        default=1.0,
        gt=0.0,
        description="Stroke thickness of fill lines",
    )
    hachure_angle: float = Field(
        default=320.0,
        description="Angle of hachure lines in degrees",
    )
    hachure_gap: float = Field(
        default=15.0,
        gt=0.0,
        description="Distance between hachure lines",
    )
    dash_offset: float = Field(
        default=15.0,
        gt=0.0,
        description="Length of dashes in dashed fills",
    )
    dash_gap: float = Field(
        default=2.0,
        ge=0.0,
        description="Gap between dashes in dashed fills",
    )
    zigzag_offset: float = Field(
        default=5.0,
        gt=0.0,
        description="Width of the teeth in zig-zag line fills",
    )
    draw_config: DrawConfig = Field(
        default_factory=DrawConfig,
        description="Perturbation settings for fill strokes",
    )

    @classmethod
    def build(cls, **values: Any) -> "FillerConfig":
        """Create a configuration, raising ConfigurationError on bad values."""
        return _build(cls, values)

    def copy_with(self, **changes: Any) -> "FillerConfig":
        """Return a validated copy with some fields replaced.

        The embedded draw configuration is shared unless replaced.
        """
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self)(**values)


class RenderConfig(BaseModel):
    """Paint settings for the SVG painter."""

    stroke: str = Field(
        default="#000000",
        description="Outline stroke color",
    )
    stroke_width: float = Field(
        default=1.0,
        gt=0.0,
        description="Outline stroke width",
    )
    fill: str = Field(
        default="#555555",
        description="Fill color for solid fills and fill sketches",
    )
    fill_weight: float = Field(
        default=1.0,
        gt=0.0,
        description="Stroke width of fill sketches",
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


class SketchSettings(BaseModel):
    """Main application settings."""

    draw: DrawConfig = Field(default_factory=DrawConfig)
    filler: FillerConfig = Field(default_factory=FillerConfig)
    fill_style: FillStyle = Field(default=FillStyle.NONE)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SketchSettings:
    """Get default application settings."""
    return SketchSettings()
