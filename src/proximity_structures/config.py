# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Configuration values and settings.

Fixed numeric constants live at module level. Values that a host application
may want to override (logging, default canvas size) are read from the
environment through pydantic-settings.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tolerance for floating-point comparisons in the Gabriel/RNG tests
EPSILON = 1e-6

DEFAULT_WIDTH = 960
DEFAULT_HEIGHT = 600
MIN_CANVAS_DIMENSION = 320

# Default alpha slider value (maps to ~256 px radius)
ALPHA_SLIDER_DEFAULT = 0.25

POINT_RADIUS = 10
HIT_DISTANCE_MULTIPLIER = 2
INITIAL_POINT_MARGIN = 40


class SliderSegment(BaseModel):
    """One linear piece of the slider-to-radius mapping."""

    slider_max: float = Field(..., gt=0.0, le=1.0, description="Upper slider bound of the segment")
    radius_min: float = Field(..., ge=0.0, description="Radius at the lower slider bound")
    radius_max: float = Field(..., description="Radius at the upper slider bound")

    @model_validator(mode="after")
    def _check_increasing(self) -> "SliderSegment":
        if self.radius_max <= self.radius_min:
            raise ValueError("radius_max must be greater than radius_min")
        return self


class SliderMapping(BaseModel):
    """
    Ordered, continuous piecewise-linear mapping from [0, 1] to a radius.

    Segment ``i`` covers slider values ``(segments[i-1].slider_max,
    segments[i].slider_max]`` (the first segment starts at 0).
    """

    segments: List[SliderSegment]

    @field_validator("segments")
    @classmethod
    def _check_segments(cls, segments: List[SliderSegment]) -> List[SliderSegment]:
        if not segments:
            raise ValueError("at least one segment is required")
        for prev, nxt in zip(segments, segments[1:]):
            if nxt.slider_max <= prev.slider_max:
                raise ValueError("slider_max must be strictly increasing")
            if nxt.radius_min != prev.radius_max:
                raise ValueError(
                    f"mapping is discontinuous at slider value {prev.slider_max}"
                )
        if segments[-1].slider_max != 1.0:
            raise ValueError("last segment must end at slider value 1.0")
        return segments

    def slider_min(self, index: int) -> float:
        """Lower slider bound of segment ``index``."""
        return 0.0 if index == 0 else self.segments[index - 1].slider_max


# [0.0 - 0.5] -> [12 - 500] px, [0.5 - 0.75] -> [500 - 1000] px,
# [0.75 - 1.0] -> [1000 - 5000] px
SLIDER_RANGES = SliderMapping(segments=[
    SliderSegment(slider_max=0.5, radius_min=12, radius_max=500),
    SliderSegment(slider_max=0.75, radius_min=500, radius_max=1000),
    SliderSegment(slider_max=1.0, radius_min=1000, radius_max=5000),
])


class Settings(BaseSettings):
    """Settings pulled from ``PROXIMITY_*`` environment variables."""

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Logging format (console or json)")

    # Canvas defaults
    default_width: float = Field(default=DEFAULT_WIDTH, gt=0, description="Default canvas width")
    default_height: float = Field(default=DEFAULT_HEIGHT, gt=0, description="Default canvas height")
    alpha_slider_default: float = Field(
        default=ALPHA_SLIDER_DEFAULT, ge=0.0, le=1.0, description="Initial alpha slider position"
    )

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return value

    model_config = SettingsConfigDict(
        env_prefix="PROXIMITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
