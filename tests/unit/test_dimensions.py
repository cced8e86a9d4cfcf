"""Tests for dimension normalization.

Tests cover:
- Meter/centimeter heuristic around the threshold
- Degenerate values (missing, non-numeric, non-finite, non-positive)
- Piece normalization (quantity clamping, order line defaults)
- Slab normalization (explicit centimeter sides, outlines in meters)
"""

from __future__ import annotations

import math

import pytest

from stonecut.domain import (
    DimensionNormalizer,
    NestingConfig,
    Point2D,
    SlabStatus,
    normalize_length,
)


class TestNormalizeLength:
    """Tests for normalize_length."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (2.4, 240.0),
            (0.6, 60.0),
            (10, 1000.0),
            (10.5, 10.5),
            (240, 240.0),
            ("1.2", 120.0),
        ],
    )
    def test_meters_and_centimeters(self, raw: object, expected: float) -> None:
        """Values up to the threshold are meters, larger ones centimeters."""
        assert normalize_length(raw) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "raw",
        [None, 0, -2.4, -300, "abc", float("nan"), float("inf"), True, [1]],
    )
    def test_degenerate_values_become_zero(self, raw: object) -> None:
        """Missing, invalid or non-positive values normalize to 0."""
        assert normalize_length(raw) == 0.0

    def test_custom_threshold(self) -> None:
        """A lower threshold reads small centimeter values as-is."""
        assert normalize_length(8, meter_threshold=5) == 8.0
        assert normalize_length(4, meter_threshold=5) == pytest.approx(400.0)


class TestNormalizePiece:
    """Tests for DimensionNormalizer.normalize_piece."""

    def test_converts_meters(self) -> None:
        piece = DimensionNormalizer().normalize_piece(
            id="p1", width=2.4, height=0.6, material_id="granite"
        )

        assert piece.width == pytest.approx(240.0)
        assert piece.height == pytest.approx(60.0)
        assert piece.is_packable

    def test_order_line_defaults_to_piece_id(self) -> None:
        piece = DimensionNormalizer().normalize_piece(
            id="p1", width=100, height=50, material_id="granite"
        )
        assert piece.order_line_id == "p1"

    def test_explicit_order_line(self) -> None:
        piece = DimensionNormalizer().normalize_piece(
            id="p1", width=100, height=50, material_id="granite", order_line_id="line-7"
        )
        assert piece.order_line_id == "line-7"

    @pytest.mark.parametrize(("raw", "expected"), [(None, 1), (0, 1), (-3, 1), (3, 3), (2.9, 2)])
    def test_quantity_is_clamped(self, raw: object, expected: int) -> None:
        piece = DimensionNormalizer().normalize_piece(
            id="p1", width=100, height=50, material_id="granite", quantity=raw
        )
        assert piece.quantity == expected

    def test_degenerate_piece_is_kept_unpackable(self) -> None:
        """A piece without dimensions is built, never rejected."""
        piece = DimensionNormalizer().normalize_piece(
            id="p1", width=None, height=-1, material_id="granite"
        )

        assert piece.width == 0.0
        assert piece.height == 0.0
        assert not piece.is_packable
        assert piece.area == 0.0

    def test_uses_configured_threshold(self) -> None:
        normalizer = DimensionNormalizer(NestingConfig(meter_threshold=3.0))
        piece = normalizer.normalize_piece(
            id="p1", width=5, height=2, material_id="granite"
        )

        assert piece.width == 5.0
        assert piece.height == pytest.approx(200.0)


class TestNormalizeSlab:
    """Tests for DimensionNormalizer.normalize_slab."""

    def test_ambiguous_sides(self) -> None:
        slab = DimensionNormalizer().normalize_slab(
            id="s1", material_id="granite", width=3.0, height=180
        )

        assert slab.width == pytest.approx(300.0)
        assert slab.height == 180.0
        assert slab.status is SlabStatus.AVAILABLE
        assert not slab.has_outline

    def test_explicit_centimeters_win(self) -> None:
        """width_cm is never scaled, even below the meter threshold."""
        slab = DimensionNormalizer().normalize_slab(
            id="s1", material_id="granite", width=3.0, height=1.8, width_cm=8, height_cm=190
        )

        assert slab.width == 8.0
        assert slab.height == 190.0

    def test_non_positive_explicit_side_is_degenerate(self) -> None:
        slab = DimensionNormalizer().normalize_slab(
            id="s1", material_id="granite", width=3.0, height=2.0, width_cm=0
        )

        assert slab.width == 0.0
        assert slab.is_degenerate

    def test_remnant_metadata(self) -> None:
        slab = DimensionNormalizer().normalize_slab(
            id="r1",
            material_id="granite",
            width=300,
            height=150,
            status=SlabStatus.PARTIAL,
            location="Yard B",
            parent_slab_id="s1",
        )

        assert slab.is_remnant
        assert slab.location == "Yard B"
        assert slab.status is SlabStatus.PARTIAL


class TestNormalizePolygon:
    """Tests for DimensionNormalizer.normalize_polygon."""

    def test_accepts_mixed_point_forms(self) -> None:
        points = DimensionNormalizer().normalize_polygon(
            [{"x": 0, "y": 0}, (300, 0), Point2D(x=300, y=150)]
        )
        assert points == (Point2D(0.0, 0.0), Point2D(300.0, 0.0), Point2D(300.0, 150.0))

    def test_meter_unit_scales_points(self) -> None:
        points = DimensionNormalizer().normalize_polygon(
            [(0, 0), (3, 0), (3, 1.5)], unit="m"
        )

        assert points[1].x == pytest.approx(300.0)
        assert points[2].y == pytest.approx(150.0)

    def test_centimeter_points_are_not_scaled(self) -> None:
        """Small outline coordinates in cm stay as written."""
        points = DimensionNormalizer().normalize_polygon([(0, 0), (5, 0), (5, 5)])
        assert points[1] == Point2D(5.0, 0.0)

    @pytest.mark.parametrize(
        "raw",
        [
            [(0, 0), (300, 0), "bad"],
            [(0, 0), {"x": 1}, (3, 3)],
            [(0, 0), (math.nan, 0), (3, 3)],
        ],
    )
    def test_malformed_outline_is_dropped(self, raw: list) -> None:
        assert DimensionNormalizer().normalize_polygon(raw) == ()

    @pytest.mark.parametrize("raw", [None, []])
    def test_empty_outline(self, raw: list | None) -> None:
        assert DimensionNormalizer().normalize_polygon(raw) == ()
