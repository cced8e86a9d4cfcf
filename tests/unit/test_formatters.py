"""Tests for text and JSON report formatters."""

from __future__ import annotations

import json

import pytest

from stonecut.application import NestingResult, NestingService, SlabCatalog
from stonecut.domain import Piece, Point2D, Slab
from stonecut.infrastructure import JsonExporter, LayoutReportFormatter

L_OUTLINE = ((0, 0), (300, 0), (300, 100), (200, 100), (200, 150), (0, 150))


def _piece(id: str, width: float, height: float, quantity: int = 1) -> Piece:
    return Piece(
        id=id,
        order_line_id=f"line-{id}",
        description="",
        width=width,
        height=height,
        material_id="granite",
        quantity=quantity,
    )


@pytest.fixture
def result() -> NestingResult:
    catalog = SlabCatalog(
        [
            Slab(
                id="r1",
                material_id="granite",
                width=300,
                height=150,
                polygon=tuple(Point2D(x=x, y=y) for x, y in L_OUTLINE),
            ),
        ]
    )
    service = NestingService(catalog)
    return service.optimize(
        [_piece("top", 200, 150), _piece("side", 100, 90), _piece("huge", 400, 50)]
    )


class TestJsonExporter:
    """Tests for JsonExporter."""

    def test_layout_entries(self, result: NestingResult) -> None:
        data = JsonExporter().to_dict(result)

        (material,) = data["materials"]
        (slab,) = material["slabs"]
        assert material["materialId"] == "granite"
        assert [z["zoneId"] for z in slab["zones"]] == ["A", "B"]
        assert slab["layout"][0] == {
            "unitPieceId": "top-copy-0",
            "originalOrderLineId": "line-top",
            "x": 0,
            "y": 0,
            "width": 200,
            "height": 150,
            "rotated": False,
            "zoneId": "A",
        }
        assert slab["layout"][1]["zoneId"] == "B"

    def test_unplaced_entries(self, result: NestingResult) -> None:
        data = JsonExporter().to_dict(result)

        assert data["materials"][0]["unplaced"] == [
            {"unitPieceId": "huge-copy-0", "originalOrderLineId": "line-huge", "width": 400, "height": 50}
        ]
        assert data["needsAdditionalSlab"] is True
        assert data["complete"] is False
        assert data["totalPlaced"] == 2
        assert data["totalUnplaced"] == 1

    def test_utilization(self, result: NestingResult) -> None:
        utilization = JsonExporter().to_dict(result)["materials"][0]["utilization"]

        assert utilization["usedArea"] == 39000
        assert utilization["totalArea"] == 45000
        assert utilization["wastePercentage"] == pytest.approx(100 - 100 * 39000 / 45000)

    def test_export_is_json(self, result: NestingResult) -> None:
        assert json.loads(JsonExporter().export(result)) == JsonExporter().to_dict(result)


class TestLayoutReportFormatter:
    """Tests for LayoutReportFormatter."""

    def test_report_sections(self, result: NestingResult) -> None:
        report = LayoutReportFormatter().format(result)

        assert "MATERIAL: granite" in report
        assert "r1" in report
        assert "A,B" in report
        assert "top-copy-0" in report
        assert "UNPLACED (1)" in report
        assert "Needs additional slab" in report
        assert "Pieces placed: 2" in report

    def test_rotated_marker(self) -> None:
        service = NestingService(
            SlabCatalog([Slab(id="s1", material_id="granite", width=100, height=200)])
        )
        report = LayoutReportFormatter().format(service.optimize([_piece("p", 150, 80)]))

        assert "yes" in report

    def test_material_without_slabs(self) -> None:
        service = NestingService(SlabCatalog([]))
        report = LayoutReportFormatter().format(service.optimize([_piece("p", 150, 80)]))

        assert "No slabs available for this material." in report

    def test_empty_result(self) -> None:
        assert LayoutReportFormatter().format(NestingResult(materials=())) == "No pieces to nest."
