"""Coordinates slab nesting across the materials of an order.

Orders usually mix several stones (e.g. a granite countertop with marble
thresholds). Pieces of different materials never share slabs, so each
material is packed as an independent run against its own candidates.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from stonecut.application.dtos import MaterialRun, NestingResult
from stonecut.domain import NestingConfig, NestingEngine, PackingRun, Piece, Slab

from .slab_catalog import SlabCatalog, SlabSelectionError

logger = logging.getLogger(__name__)


class NestingService:
    """Runs the nesting engine per material and handles slab additions.

    The "pick additional slab" cycle is driven from here: a result whose
    ``needs_additional_slab`` is True is extended one slab at a time with
    ``add_slab`` (caller's choice) or ``auto_fill`` (next catalog
    candidate), each re-running only the affected material.

    Attributes:
        catalog: Read-only slab catalog.
        engine: Nesting engine shared by every material run.
    """

    def __init__(
        self,
        catalog: SlabCatalog,
        config: NestingConfig | None = None,
        engine: NestingEngine | None = None,
    ) -> None:
        self.catalog = catalog
        self.engine = engine or NestingEngine(config)

    def optimize(
        self,
        pieces: Sequence[Piece],
        initial_slabs: Mapping[str, str] | None = None,
    ) -> NestingResult:
        """Pack every material of an order onto its initial slab.

        Args:
            pieces: Normalized order pieces of any material.
            initial_slabs: Optional material id to slab id mapping. Materials
                not listed start with their first catalog candidate.

        Returns:
            NestingResult with one MaterialRun per material.

        Raises:
            SlabSelectionError: If an explicitly requested slab cannot be
                used for its material.
        """
        groups = self._group_by_material(pieces)
        initial_slabs = initial_slabs or {}

        logger.info(
            "Optimizing %d pieces across %d materials",
            len(pieces),
            len(groups),
        )

        runs: list[MaterialRun] = []
        for material_id, group in groups.items():
            slabs = self._initial_slabs(material_id, initial_slabs.get(material_id))
            run = self.engine.run(group, slabs)
            runs.append(self._material_run(material_id, run))

        return NestingResult(materials=tuple(runs))

    def add_slab(
        self,
        result: NestingResult,
        material_id: str,
        slab_id: str,
    ) -> NestingResult:
        """Append a chosen slab to one material's candidates and re-run it.

        Raises:
            SlabSelectionError: If the material is not part of the result or
                the slab is not an offerable candidate for it.
        """
        material_run = result.for_material(material_id)
        if material_run is None:
            raise SlabSelectionError(f"Material '{material_id}' is not part of this order")

        slab = self.catalog.require_candidate(
            slab_id, material_id, exclude=material_run.slab_ids
        )
        return result.replace(self._extend(material_run, slab))

    def auto_fill(
        self,
        result: NestingResult,
        max_additional: int | None = None,
    ) -> NestingResult:
        """Keep adding the next catalog candidate while pieces remain.

        Args:
            result: Result to extend.
            max_additional: Upper bound of slabs added per material; None
                means until the catalog runs out of candidates.

        Returns:
            Extended NestingResult.
        """
        for material_run in result.materials:
            added = 0
            current = material_run
            while current.needs_additional_slab:
                if max_additional is not None and added >= max_additional:
                    break
                candidates = self.catalog.candidates(
                    current.material_id, exclude=current.slab_ids
                )
                if not candidates:
                    logger.warning(
                        "No more slabs of material '%s' available, %d pieces unplaced",
                        current.material_id,
                        len(current.unplaced),
                    )
                    break
                current = self._extend(current, candidates[0])
                added += 1
            if current is not material_run:
                result = result.replace(current)
        return result

    def candidates_for(self, result: NestingResult, material_id: str) -> tuple[Slab, ...]:
        """Slabs that may still be offered to a material of the result."""
        material_run = result.for_material(material_id)
        exclude = material_run.slab_ids if material_run is not None else ()
        return self.catalog.candidates(material_id, exclude=exclude)

    def _extend(self, material_run: MaterialRun, slab: Slab) -> MaterialRun:
        logger.info(
            "Adding slab '%s' to material '%s'",
            slab.id,
            material_run.material_id,
        )
        run = self.engine.continue_with(material_run.run, slab)
        return self._material_run(material_run.material_id, run)

    def _material_run(self, material_id: str, run: PackingRun) -> MaterialRun:
        return MaterialRun(
            material_id=material_id,
            run=run,
            utilization=self.engine.utilization_for(run),
        )

    def _initial_slabs(self, material_id: str, slab_id: str | None) -> tuple[Slab, ...]:
        if slab_id is not None:
            return (self.catalog.require_candidate(slab_id, material_id),)

        candidates = self.catalog.candidates(material_id)
        if not candidates:
            logger.warning("No slabs available for material '%s'", material_id)
            return ()
        return (candidates[0],)

    def _group_by_material(self, pieces: Sequence[Piece]) -> dict[str, list[Piece]]:
        groups: dict[str, list[Piece]] = {}
        for piece in pieces:
            groups.setdefault(piece.material_id, []).append(piece)
        return groups
