"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from stonecut.domain import PackingRun, Slab, UnplacedPiece, Utilization


@dataclass(frozen=True)
class MaterialRun:
    """Packing outcome for one material.

    Attributes:
        material_id: Material shared by every piece and slab of the run.
        run: The packing run over the selected slabs.
        utilization: Combined utilization of the slabs that received pieces.
    """

    material_id: str
    run: PackingRun
    utilization: Utilization

    @property
    def slabs(self) -> tuple[Slab, ...]:
        """Slabs selected for this material, in packing order."""
        return self.run.slabs

    @property
    def slab_ids(self) -> tuple[str, ...]:
        return tuple(slab.id for slab in self.run.slabs)

    @property
    def unplaced(self) -> tuple[UnplacedPiece, ...]:
        return self.run.unplaced

    @property
    def needs_additional_slab(self) -> bool:
        return self.run.needs_additional_slab


@dataclass(frozen=True)
class NestingResult:
    """Packing outcome across every material of an order.

    Attributes:
        materials: One MaterialRun per material, in first-appearance order.
    """

    materials: tuple[MaterialRun, ...]

    def for_material(self, material_id: str) -> MaterialRun | None:
        for material_run in self.materials:
            if material_run.material_id == material_id:
                return material_run
        return None

    def replace(self, material_run: MaterialRun) -> NestingResult:
        """Return a copy with the run of one material swapped out."""
        return NestingResult(
            materials=tuple(
                material_run if m.material_id == material_run.material_id else m
                for m in self.materials
            )
        )

    @property
    def is_complete(self) -> bool:
        """True when every piece of every material was placed."""
        return all(m.run.is_complete for m in self.materials)

    @property
    def needs_additional_slab(self) -> bool:
        return any(m.needs_additional_slab for m in self.materials)

    @property
    def total_unplaced(self) -> int:
        return sum(len(m.unplaced) for m in self.materials)

    @property
    def total_placed(self) -> int:
        return sum(m.run.fitted_count for m in self.materials)
