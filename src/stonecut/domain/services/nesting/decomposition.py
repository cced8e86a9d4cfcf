"""Decomposition of slab outlines into rectangular packing zones.

Rectangular slabs pack as a single FULL zone. An axis-aligned L-shaped
remnant is split into two rectangles A and B picked from the 3x3 grid of
its distinct corner coordinates. Anything else falls back to the bounding
box, trading precision for a result that always exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from stonecut.domain.value_objects import Point2D, Slab, Zone, ZoneId

from .config import NestingConfig

logger = logging.getLogger(__name__)


def polygon_area(points: Sequence[Point2D]) -> float:
    """Area of a simple polygon using the shoelace formula."""
    if len(points) < 3:
        return 0.0
    total = 0.0
    for i, p1 in enumerate(points):
        p2 = points[(i + 1) % len(points)]
        total += p1.x * p2.y - p2.x * p1.y
    return abs(total) / 2.0


def point_in_polygon(x: float, y: float, points: Sequence[Point2D]) -> bool:
    """Even-odd ray casting test; points exactly on an edge are unreliable."""
    inside = False
    count = len(points)
    for i in range(count):
        a = points[i]
        b = points[(i + 1) % count]
        if (a.y > y) != (b.y > y):
            x_cross = a.x + (y - a.y) * (b.x - a.x) / (b.y - a.y)
            if x < x_cross:
                inside = not inside
    return inside


@dataclass(frozen=True)
class _Rect:
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def area(self) -> float:
        return self.width * self.height

    def intersection_area(self, other: _Rect) -> float:
        w = min(self.x1, other.x1) - max(self.x0, other.x0)
        h = min(self.y1, other.y1) - max(self.y0, other.y0)
        if w <= 0 or h <= 0:
            return 0.0
        return w * h

    def to_zone(self, zone_id: ZoneId) -> Zone:
        return Zone(zone_id=zone_id, x=self.x0, y=self.y0, width=self.width, height=self.height)


def _candidate_pairs(
    xs: tuple[float, float, float],
    ys: tuple[float, float, float],
) -> list[tuple[_Rect, _Rect]]:
    """Rectangle pairs covering every L orientation on a 3x3 grid.

    The first rectangle of each pair is the full strip, the second the
    leftover arm. Order matters: ties on area error keep the earliest.
    """
    x0, x1, x2 = xs
    y0, y1, y2 = ys
    low_row, high_row = (y0, y1), (y1, y2)
    low_col, high_col = (x0, x1), (x1, x2)

    pairs: list[tuple[_Rect, _Rect]] = []
    # Vertical cut at the middle X
    for strip, arm in (((x0, x1), (x1, x2)), ((x1, x2), (x0, x1))):
        for row in (low_row, high_row):
            pairs.append(
                (_Rect(strip[0], y0, strip[1], y2), _Rect(arm[0], row[0], arm[1], row[1]))
            )
    # Horizontal cut at the middle Y
    for strip, arm in (((y0, y1), (y1, y2)), ((y1, y2), (y0, y1))):
        for col in (low_col, high_col):
            pairs.append(
                (_Rect(x0, strip[0], x2, strip[1]), _Rect(col[0], arm[0], col[1], arm[1]))
            )
    return pairs


class ZoneDecomposer:
    """Derives the packing zones of a slab from its geometry.

    Attributes:
        config: Nesting configuration providing the decomposition tolerances.
    """

    def __init__(self, config: NestingConfig | None = None) -> None:
        self.config = config or NestingConfig()

    def decompose(self, slab: Slab) -> tuple[Zone, ...]:
        """Return one FULL zone or the two zones A and B of an L shape.

        Args:
            slab: The slab to decompose. It is never modified.

        Returns:
            Tuple of zones in packing order.
        """
        full = self._full_zone(slab)
        if slab.is_degenerate or not slab.has_outline:
            return (full,)

        pair = self._decompose_outline(slab)
        if pair is None:
            logger.debug(
                "Slab '%s' outline does not decompose into two rectangles, "
                "packing against its bounding box",
                slab.id,
            )
            return (full,)

        first, second = pair
        logger.debug(
            "Slab '%s' decomposed into A=%sx%s at (%s, %s) and B=%sx%s at (%s, %s)",
            slab.id,
            first.width,
            first.height,
            first.x0,
            first.y0,
            second.width,
            second.height,
            second.x0,
            second.y0,
        )
        return (first.to_zone(ZoneId.A), second.to_zone(ZoneId.B))

    def _full_zone(self, slab: Slab) -> Zone:
        if slab.is_degenerate:
            return Zone(zone_id=ZoneId.FULL, x=0.0, y=0.0, width=0.0, height=0.0)
        return Zone(zone_id=ZoneId.FULL, x=0.0, y=0.0, width=slab.width, height=slab.height)

    def _decompose_outline(self, slab: Slab) -> tuple[_Rect, _Rect] | None:
        points = slab.polygon
        xs = sorted({p.x for p in points})
        ys = sorted({p.y for p in points})
        if len(xs) != 3 or len(ys) != 3:
            return None

        target = polygon_area(points)
        grid_x = (xs[0], xs[1], xs[2])
        grid_y = (ys[0], ys[1], ys[2])

        best: tuple[_Rect, _Rect] | None = None
        best_error = 0.0
        for first, second in _candidate_pairs(grid_x, grid_y):
            if not self._within_slab(first, slab) or not self._within_slab(second, slab):
                continue
            if not (self._inside_outline(first, grid_x, grid_y, points)
                    and self._inside_outline(second, grid_x, grid_y, points)):
                continue
            union = first.area + second.area - first.intersection_area(second)
            error = abs(union - target)
            if best is None or error < best_error:
                best = (first, second)
                best_error = error

        if best is None or best_error > self.config.area_tolerance(target):
            return None
        return best

    def _within_slab(self, rect: _Rect, slab: Slab) -> bool:
        tol = self.config.bounds_tolerance
        return (
            rect.width > 0
            and rect.height > 0
            and rect.x0 >= -tol
            and rect.y0 >= -tol
            and rect.x1 <= slab.width + tol
            and rect.y1 <= slab.height + tol
        )

    def _inside_outline(
        self,
        rect: _Rect,
        grid_x: tuple[float, float, float],
        grid_y: tuple[float, float, float],
        points: Sequence[Point2D],
    ) -> bool:
        # Every grid cell the rectangle covers must have its centre inside
        for cx0, cx1 in ((grid_x[0], grid_x[1]), (grid_x[1], grid_x[2])):
            if cx0 < rect.x0 or cx1 > rect.x1:
                continue
            for cy0, cy1 in ((grid_y[0], grid_y[1]), (grid_y[1], grid_y[2])):
                if cy0 < rect.y0 or cy1 > rect.y1:
                    continue
                if not point_in_polygon((cx0 + cx1) / 2, (cy0 + cy1) / 2, points):
                    return False
        return True
