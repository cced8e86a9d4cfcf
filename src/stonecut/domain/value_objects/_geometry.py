"""Planar geometry value objects for slab nesting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ZoneId(str, Enum):
    """Identifier of a packing zone within a slab.

    Attributes:
        FULL: The whole bounding rectangle of the slab.
        A: First rectangle of a two-zone (L-shape) decomposition.
        B: Second rectangle of a two-zone decomposition.
        NONE: No zone; used for pieces that were not placed.
    """

    FULL = "full"
    A = "A"
    B = "B"
    NONE = "none"


class Orientation(str, Enum):
    """Orientation of a piece as placed on a slab.

    Attributes:
        NORMAL: Rendered with its original width and height.
        ROTATED: Turned 90 degrees, width and height swapped.
    """

    NORMAL = "normal"
    ROTATED = "rotated"

    @property
    def is_rotated(self) -> bool:
        """True when the piece is turned 90 degrees."""
        return self is Orientation.ROTATED

    def apply(self, width: float, height: float) -> tuple[float, float]:
        """Return the rendered (width, height) for this orientation."""
        if self is Orientation.ROTATED:
            return height, width
        return width, height


@dataclass(frozen=True)
class Point2D:
    """2D point in slab coordinate space (centimeters)."""

    x: float
    y: float


@dataclass(frozen=True)
class Zone:
    """Axis-aligned rectangular packing target within a slab.

    Coordinates are absolute slab coordinates (centimeters), origin at
    the slab's bottom-left corner.

    Attributes:
        zone_id: Identifier of the zone (FULL, A or B).
        x: Left edge of the zone.
        y: Bottom edge of the zone.
        width: Zone width.
        height: Zone height.
    """

    zone_id: ZoneId
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        """Zone area in square centimeters."""
        return self.width * self.height

    @property
    def right(self) -> float:
        """X coordinate of the zone's right edge."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Y coordinate of the zone's top edge."""
        return self.y + self.height

    def contains(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        tolerance: float = 0.0,
    ) -> bool:
        """Check whether a rectangle lies fully within this zone."""
        return (
            x >= self.x - tolerance
            and y >= self.y - tolerance
            and x + width <= self.right + tolerance
            and y + height <= self.top + tolerance
        )

    def intersection_area(self, other: Zone) -> float:
        """Area shared by this zone and another one."""
        overlap_w = min(self.right, other.right) - max(self.x, other.x)
        overlap_h = min(self.top, other.top) - max(self.y, other.y)
        if overlap_w <= 0 or overlap_h <= 0:
            return 0.0
        return overlap_w * overlap_h
