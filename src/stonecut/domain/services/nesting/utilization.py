"""Waste and utilization figures for packed slabs.

These figures are informational only and never feed back into packing.
"""

from __future__ import annotations

from typing import Iterable

from stonecut.domain.value_objects import PackingRun, Placement, SlabLayout, Utilization


class UtilizationCalculator:
    """Computes used area and waste percentage against slab bounding area."""

    def calculate(
        self,
        placements: Iterable[Placement],
        slab_width: float,
        slab_height: float,
    ) -> Utilization:
        """Utilization of fitted placements on a slab of the given size.

        Waste is defined as 100 when the slab has no area.
        """
        used = sum(p.width * p.height for p in placements)
        total = slab_width * slab_height if slab_width > 0 and slab_height > 0 else 0.0
        return _utilization(used, total)

    def for_layout(self, layout: SlabLayout) -> Utilization:
        """Utilization of a single slab layout."""
        return self.calculate(layout.placements, layout.slab.width, layout.slab.height)

    def for_run(self, run: PackingRun) -> Utilization:
        """Combined utilization over the slabs that received pieces.

        Candidate slabs left empty are not consumed and do not count as
        waste. A run that placed nothing reports 100% waste.
        """
        used_layouts = run.used_layouts
        used = sum(layout.used_area for layout in used_layouts)
        total = sum(layout.slab.area for layout in used_layouts)
        return _utilization(used, total)


def _utilization(used: float, total: float) -> Utilization:
    if total == 0:
        return Utilization(used_area=used, total_area=0.0, waste_percentage=100.0)
    return Utilization(
        used_area=used,
        total_area=total,
        waste_percentage=100.0 - 100.0 * used / total,
    )
