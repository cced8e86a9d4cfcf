"""Nesting configuration.

This module provides NestingConfig for tuning the tolerances and
heuristics used by the slab nesting services.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NestingConfig:
    """Configuration for slab nesting.

    Attributes:
        meter_threshold: Raw lengths with an absolute value up to this are
            read as meters and scaled to centimeters.
        rotation_epsilon: Pieces whose sides differ by no more than this
            (cm) are not tried rotated.
        bounds_tolerance: Slack (cm) allowed when checking that decomposed
            zones lie within the slab bounding box.
        min_area_tolerance: Absolute floor (cm^2) of the accepted union-area
            error for an L-shape decomposition.
        relative_area_tolerance: Accepted union-area error as a fraction of
            the polygon area.
        allow_rotation: Whether pieces may be turned 90 degrees.
    """

    meter_threshold: float = 10.0
    rotation_epsilon: float = 0.01
    bounds_tolerance: float = 0.01
    min_area_tolerance: float = 1.0
    relative_area_tolerance: float = 0.05
    allow_rotation: bool = True

    def __post_init__(self) -> None:
        if self.meter_threshold <= 0:
            raise ValueError("meter_threshold must be positive")
        if self.rotation_epsilon < 0:
            raise ValueError("rotation_epsilon must be non-negative")
        if self.bounds_tolerance < 0:
            raise ValueError("bounds_tolerance must be non-negative")
        if self.min_area_tolerance < 0:
            raise ValueError("min_area_tolerance must be non-negative")
        if not 0 <= self.relative_area_tolerance <= 1:
            raise ValueError("relative_area_tolerance must be between 0 and 1")

    def area_tolerance(self, polygon_area: float) -> float:
        """Accepted union-area error for a polygon of the given area."""
        return max(self.min_area_tolerance, self.relative_area_tolerance * polygon_area)
