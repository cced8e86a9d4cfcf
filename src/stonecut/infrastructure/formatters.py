"""Output formatters and exporters for nesting results."""

from __future__ import annotations

import json
from typing import Any

from stonecut.application.dtos import MaterialRun, NestingResult
from stonecut.domain import (
    Placement,
    SlabLayout,
    UnplacedPiece,
    Utilization,
    UtilizationCalculator,
    Zone,
)


class LayoutReportFormatter:
    """Formats nesting results as a plain text report.

    One block per material: the slab table, the placements of every slab,
    the pieces left over and the combined material usage.
    """

    def __init__(self, calculator: UtilizationCalculator | None = None) -> None:
        self._calculator = calculator or UtilizationCalculator()

    def format(self, result: NestingResult) -> str:
        if not result.materials:
            return "No pieces to nest."

        blocks = [self._format_material(m) for m in result.materials]
        blocks.append(self._format_summary(result))
        return "\n\n".join(blocks)

    def _format_material(self, material_run: MaterialRun) -> str:
        lines = [
            f"MATERIAL: {material_run.material_id}",
            "=" * 70,
        ]

        if not material_run.slabs:
            lines.append("No slabs available for this material.")
        else:
            lines.append(
                f"{'Slab':<16} {'Size (cm)':<16} {'Zones':<10} {'Pieces':<8} {'Waste %'}"
            )
            lines.append("-" * 70)
            for layout in material_run.run.layouts:
                lines.append(self._format_slab_row(layout))

            for layout in material_run.run.used_layouts:
                lines.append("")
                lines.extend(self._format_placements(layout))

        if material_run.unplaced:
            lines.append("")
            lines.extend(self._format_unplaced(material_run))

        lines.append("")
        lines.append(self._format_utilization(material_run.utilization))
        return "\n".join(lines)

    def _format_slab_row(self, layout: SlabLayout) -> str:
        slab = layout.slab
        size = f"{slab.width:g} x {slab.height:g}"
        zones = ",".join(z.value for z in layout.zone_ids)
        waste = self._calculator.for_layout(layout).waste_percentage
        return (
            f"{slab.id:<16} {size:<16} {zones:<10} {layout.piece_count:<8} {waste:.1f}"
        )

    def _format_placements(self, layout: SlabLayout) -> list[str]:
        lines = [
            f"Slab {layout.slab.id}",
            f"  {'Piece':<20} {'Zone':<6} {'X':>8} {'Y':>8} {'W':>8} {'H':>8}  Rot",
        ]
        for p in layout.placements:
            rotated = "yes" if p.rotated else ""
            lines.append(
                f"  {p.unit_piece_id:<20} {p.zone_id.value:<6} {p.x:>8.1f} {p.y:>8.1f} "
                f"{p.width:>8.1f} {p.height:>8.1f}  {rotated}"
            )
        return lines

    def _format_unplaced(self, material_run: MaterialRun) -> list[str]:
        lines = [f"UNPLACED ({len(material_run.unplaced)})"]
        for piece in material_run.unplaced:
            lines.append(
                f"  {piece.unit_piece_id:<20} {piece.width:>8.1f} x {piece.height:<8.1f}"
            )
        if material_run.needs_additional_slab:
            lines.append("  ! Needs additional slab")
        return lines

    def _format_utilization(self, utilization: Utilization) -> str:
        return (
            f"Used area: {utilization.used_area:.1f} cm2 of {utilization.total_area:.1f} cm2  "
            f"(utilization {utilization.utilization_percentage:.1f}%, "
            f"waste {utilization.waste_percentage:.1f}%)"
        )

    def _format_summary(self, result: NestingResult) -> str:
        lines = [
            "-" * 70,
            f"Pieces placed: {result.total_placed}",
            f"Pieces unplaced: {result.total_unplaced}",
        ]
        if result.needs_additional_slab:
            lines.append("Additional slabs are needed to complete the order.")
        return "\n".join(lines)


class JsonExporter:
    """Exports nesting results as JSON.

    Keys are camelCase to match the payloads consumed by the shop's
    layout viewer.
    """

    def __init__(self, calculator: UtilizationCalculator | None = None) -> None:
        self._calculator = calculator or UtilizationCalculator()

    def export(self, result: NestingResult) -> str:
        """Export a nesting result as a JSON string."""
        return json.dumps(self.to_dict(result), indent=2)

    def to_dict(self, result: NestingResult) -> dict[str, Any]:
        return {
            "complete": result.is_complete,
            "needsAdditionalSlab": result.needs_additional_slab,
            "totalPlaced": result.total_placed,
            "totalUnplaced": result.total_unplaced,
            "materials": [self._format_material(m) for m in result.materials],
        }

    def _format_material(self, material_run: MaterialRun) -> dict[str, Any]:
        return {
            "materialId": material_run.material_id,
            "slabs": [self._format_slab(layout) for layout in material_run.run.layouts],
            "unplaced": [self._format_unplaced(p) for p in material_run.unplaced],
            "needsAdditionalSlab": material_run.needs_additional_slab,
            "utilization": self._format_utilization(material_run.utilization),
        }

    def _format_slab(self, layout: SlabLayout) -> dict[str, Any]:
        return {
            "slabId": layout.slab.id,
            "width": layout.slab.width,
            "height": layout.slab.height,
            "zones": [self._format_zone(z) for z in layout.zones],
            "layout": [self._format_placement(p) for p in layout.placements],
            "utilization": self._format_utilization(self._calculator.for_layout(layout)),
        }

    def _format_zone(self, zone: Zone) -> dict[str, Any]:
        return {
            "zoneId": zone.zone_id.value,
            "x": zone.x,
            "y": zone.y,
            "width": zone.width,
            "height": zone.height,
        }

    def _format_placement(self, placement: Placement) -> dict[str, Any]:
        return {
            "unitPieceId": placement.unit_piece_id,
            "originalOrderLineId": placement.order_line_id,
            "x": placement.x,
            "y": placement.y,
            "width": placement.width,
            "height": placement.height,
            "rotated": placement.rotated,
            "zoneId": placement.zone_id.value,
        }

    def _format_unplaced(self, piece: UnplacedPiece) -> dict[str, Any]:
        return {
            "unitPieceId": piece.unit_piece_id,
            "originalOrderLineId": piece.order_line_id,
            "width": piece.width,
            "height": piece.height,
        }

    def _format_utilization(self, utilization: Utilization) -> dict[str, float]:
        return {
            "usedArea": utilization.used_area,
            "totalArea": utilization.total_area,
            "wastePercentage": utilization.waste_percentage,
        }
