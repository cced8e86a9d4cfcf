"""Tests for slab zone decomposition.

Tests cover:
- Rectangular and degenerate slabs (single FULL zone)
- L-shaped remnants in several orientations
- Fallback to the bounding box for shapes that are not an L
- Area tolerance configuration
- Shoelace area and point-in-polygon helpers
"""

from __future__ import annotations

import pytest

from stonecut.domain import (
    NestingConfig,
    Point2D,
    Slab,
    Zone,
    ZoneDecomposer,
    ZoneId,
)
from stonecut.domain.services.nesting import point_in_polygon, polygon_area


def _points(*coords: tuple[float, float]) -> tuple[Point2D, ...]:
    return tuple(Point2D(x=x, y=y) for x, y in coords)


def _slab(width: float, height: float, *coords: tuple[float, float]) -> Slab:
    return Slab(
        id="s1",
        material_id="granite",
        width=width,
        height=height,
        polygon=_points(*coords),
    )


# 300 x 150 with the top right 100 x 50 corner cut away
L_TOP_RIGHT_MISSING = ((0, 0), (300, 0), (300, 100), (200, 100), (200, 150), (0, 150))

# 300 x 150 with the top left 100 x 50 corner cut away
L_TOP_LEFT_MISSING = ((0, 0), (300, 0), (300, 150), (100, 150), (100, 100), (0, 100))

# Pentagon on a 3 x 3 grid whose top right edge is slanted
SLANTED = ((0, 0), (300, 0), (300, 100), (150, 150), (0, 150))


@pytest.fixture
def decomposer() -> ZoneDecomposer:
    return ZoneDecomposer()


class TestRectangularSlabs:
    """Slabs without a usable outline pack as a single zone."""

    def test_no_polygon(self, decomposer: ZoneDecomposer) -> None:
        zones = decomposer.decompose(_slab(300, 200))
        assert zones == (Zone(zone_id=ZoneId.FULL, x=0.0, y=0.0, width=300, height=200),)

    def test_fewer_than_three_points(self, decomposer: ZoneDecomposer) -> None:
        zones = decomposer.decompose(_slab(300, 200, (0, 0), (300, 200)))
        assert [z.zone_id for z in zones] == [ZoneId.FULL]

    def test_rectangle_outline(self, decomposer: ZoneDecomposer) -> None:
        """Two distinct X values is not an L shape."""
        zones = decomposer.decompose(_slab(300, 200, (0, 0), (300, 0), (300, 200), (0, 200)))
        assert [z.zone_id for z in zones] == [ZoneId.FULL]

    def test_degenerate_slab(self, decomposer: ZoneDecomposer) -> None:
        zones = decomposer.decompose(_slab(0, 200, *L_TOP_RIGHT_MISSING))

        assert len(zones) == 1
        assert zones[0].zone_id is ZoneId.FULL
        assert zones[0].area == 0.0


class TestLShapes:
    """L-shaped remnants split into zones A and B."""

    def test_top_right_corner_missing(self, decomposer: ZoneDecomposer) -> None:
        zones = decomposer.decompose(_slab(300, 150, *L_TOP_RIGHT_MISSING))

        assert zones == (
            Zone(zone_id=ZoneId.A, x=0, y=0, width=200, height=150),
            Zone(zone_id=ZoneId.B, x=200, y=0, width=100, height=100),
        )

    def test_top_left_corner_missing(self, decomposer: ZoneDecomposer) -> None:
        """The mirrored L never places a zone over the missing corner."""
        zones = decomposer.decompose(_slab(300, 150, *L_TOP_LEFT_MISSING))

        assert zones == (
            Zone(zone_id=ZoneId.A, x=100, y=0, width=200, height=150),
            Zone(zone_id=ZoneId.B, x=0, y=0, width=100, height=100),
        )

    def test_bottom_right_corner_missing(self, decomposer: ZoneDecomposer) -> None:
        zones = decomposer.decompose(
            _slab(300, 150, (0, 0), (200, 0), (200, 50), (300, 50), (300, 150), (0, 150))
        )

        assert zones == (
            Zone(zone_id=ZoneId.A, x=0, y=0, width=200, height=150),
            Zone(zone_id=ZoneId.B, x=200, y=50, width=100, height=100),
        )

    def test_point_order_does_not_matter(self, decomposer: ZoneDecomposer) -> None:
        clockwise = tuple(reversed(L_TOP_RIGHT_MISSING))
        assert decomposer.decompose(_slab(300, 150, *clockwise)) == decomposer.decompose(
            _slab(300, 150, *L_TOP_RIGHT_MISSING)
        )

    def test_zones_cover_polygon_area(self, decomposer: ZoneDecomposer) -> None:
        slab = _slab(300, 150, *L_TOP_RIGHT_MISSING)
        a, b = decomposer.decompose(slab)

        union = a.area + b.area - a.intersection_area(b)
        assert union == pytest.approx(polygon_area(slab.polygon))

    def test_outline_outside_bounding_box(self, decomposer: ZoneDecomposer) -> None:
        """Zones must lie within the slab rectangle, else fall back."""
        zones = decomposer.decompose(_slab(100, 100, *L_TOP_RIGHT_MISSING))

        assert zones == (Zone(zone_id=ZoneId.FULL, x=0.0, y=0.0, width=100, height=100),)


class TestFallback:
    """Shapes that are not an L fall back to the bounding box."""

    def test_four_distinct_x_values(self, decomposer: ZoneDecomposer) -> None:
        zones = decomposer.decompose(
            _slab(
                300,
                150,
                (0, 0), (300, 0), (300, 100), (200, 100), (200, 50), (100, 50), (100, 150), (0, 150),
            )
        )
        assert [z.zone_id for z in zones] == [ZoneId.FULL]

    def test_slanted_edge_beyond_tolerance(self, decomposer: ZoneDecomposer) -> None:
        """Best pair misses 3750 cm2 of a 41250 cm2 outline (> 5%)."""
        zones = decomposer.decompose(_slab(300, 150, *SLANTED))
        assert [z.zone_id for z in zones] == [ZoneId.FULL]

    def test_looser_tolerance_accepts_slanted_edge(self) -> None:
        decomposer = ZoneDecomposer(NestingConfig(relative_area_tolerance=0.1))

        zones = decomposer.decompose(_slab(300, 150, *SLANTED))

        assert zones == (
            Zone(zone_id=ZoneId.A, x=0, y=0, width=150, height=150),
            Zone(zone_id=ZoneId.B, x=150, y=0, width=150, height=100),
        )

    def test_slab_is_not_modified(self, decomposer: ZoneDecomposer) -> None:
        slab = _slab(300, 150, *L_TOP_RIGHT_MISSING)
        before = slab.polygon

        decomposer.decompose(slab)

        assert slab.polygon == before


class TestGeometryHelpers:
    """Tests for polygon_area and point_in_polygon."""

    def test_polygon_area(self) -> None:
        assert polygon_area(_points(*L_TOP_RIGHT_MISSING)) == pytest.approx(40000.0)
        assert polygon_area(_points(*SLANTED)) == pytest.approx(41250.0)

    def test_polygon_area_is_orientation_independent(self) -> None:
        points = _points(*L_TOP_RIGHT_MISSING)
        assert polygon_area(tuple(reversed(points))) == pytest.approx(polygon_area(points))

    def test_polygon_area_needs_three_points(self) -> None:
        assert polygon_area(_points((0, 0), (10, 10))) == 0.0

    def test_point_in_polygon(self) -> None:
        outline = _points(*L_TOP_RIGHT_MISSING)

        assert point_in_polygon(100, 75, outline)
        assert point_in_polygon(250, 50, outline)
        assert not point_in_polygon(250, 125, outline)
        assert not point_in_polygon(350, 50, outline)
