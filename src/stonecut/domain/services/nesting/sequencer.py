"""Multi-slab packing sequence.

Slabs are consumed strictly in candidate order. Every zone of a slab is
packed against the pieces still unplaced at that moment, and whatever is
left rolls over to the next slab with no placement state attached. When
the candidates run out the leftovers are surfaced so the caller can
supply another slab and run again.
"""

from __future__ import annotations

import logging
from typing import Sequence

from stonecut.domain.value_objects import (
    PackingRun,
    Placement,
    Slab,
    SlabLayout,
    UnitPiece,
    UnplacedPiece,
)

from .config import NestingConfig
from .decomposition import ZoneDecomposer
from .shelf_packer import ShelfPacker

logger = logging.getLogger(__name__)


class SlabSequencer:
    """Orchestrates packing of a unit piece queue over candidate slabs.

    The sequencer performs no retries and never asks for more slabs on
    its own; the "needs additional slab" outcome is reported through
    ``PackingRun.needs_additional_slab`` and handled by the caller.

    Attributes:
        config: Nesting configuration shared with decomposer and packer.
    """

    def __init__(
        self,
        config: NestingConfig | None = None,
        decomposer: ZoneDecomposer | None = None,
        packer: ShelfPacker | None = None,
    ) -> None:
        self.config = config or NestingConfig()
        self.decomposer = decomposer or ZoneDecomposer(self.config)
        self.packer = packer or ShelfPacker(self.config)

    def sequence(
        self,
        unit_pieces: Sequence[UnitPiece],
        slabs: Sequence[Slab],
    ) -> PackingRun:
        """Pack unit pieces over slabs in order.

        Args:
            unit_pieces: Expanded queue of pieces, in input order.
            slabs: Ordered candidate slabs.

        Returns:
            PackingRun with one layout per slab and the final unplaced list.
        """
        remaining: tuple[UnitPiece, ...] = tuple(unit_pieces)
        layouts: list[SlabLayout] = []

        for slab in slabs:
            layout, remaining = self._pack_slab(slab, remaining)
            layouts.append(layout)

        unplaced = tuple(UnplacedPiece.from_unit_piece(p) for p in remaining)
        run = PackingRun(
            slabs=tuple(slabs),
            unit_pieces=tuple(unit_pieces),
            layouts=tuple(layouts),
            unplaced=unplaced,
        )

        logger.info(
            "Packed %d of %d pieces on %d slabs, %d unplaced",
            run.fitted_count,
            len(run.unit_pieces),
            len(run.slabs),
            len(unplaced),
        )
        if run.needs_additional_slab:
            logger.info("Candidate slabs exhausted, an additional slab is needed")
        return run

    def extend(self, run: PackingRun, slab: Slab) -> PackingRun:
        """Re-run a packing with one more candidate slab appended.

        Packing is deterministic, so the layouts of the slabs already in
        the run are reproduced unchanged.
        """
        return self.sequence(run.unit_pieces, (*run.slabs, slab))

    def _pack_slab(
        self,
        slab: Slab,
        pieces: tuple[UnitPiece, ...],
    ) -> tuple[SlabLayout, tuple[UnitPiece, ...]]:
        zones = self.decomposer.decompose(slab)
        if not pieces:
            return SlabLayout(slab=slab, zones=zones, placements=()), pieces

        placements: list[Placement] = []
        remaining = pieces
        for zone in zones:
            result = self.packer.pack(zone, remaining, slab.id)
            placements.extend(result.placements)
            remaining = result.remaining

        logger.debug(
            "Slab '%s': %d pieces placed in zones %s, %d rolled over",
            slab.id,
            len(placements),
            ",".join(zone.zone_id.value for zone in zones),
            len(remaining),
        )
        return SlabLayout(slab=slab, zones=zones, placements=tuple(placements)), remaining
