"""NestingEngine facade service.

This module provides the NestingEngine class as a facade that wires the
expansion, decomposition, packing and sequencing services together behind
a single pure function call.
"""

from __future__ import annotations

from typing import Sequence

from stonecut.domain.value_objects import PackingRun, Piece, Slab, Utilization

from .config import NestingConfig
from .decomposition import ZoneDecomposer
from .expansion import ItemExpander
from .sequencer import SlabSequencer
from .shelf_packer import ShelfPacker
from .utilization import UtilizationCalculator


class NestingEngine:
    """Cutting-stock optimizer for one material.

    A run is deterministic: the same piece order, slab order and geometry
    always reproduce identical placements. The engine performs no I/O.

    Example:
        >>> engine = NestingEngine()
        >>> run = engine.run(pieces, [slab])
        >>> if run.needs_additional_slab:
        ...     run = engine.continue_with(run, next_slab)
    """

    def __init__(self, config: NestingConfig | None = None) -> None:
        self.config = config or NestingConfig()
        self.expander = ItemExpander()
        self.decomposer = ZoneDecomposer(self.config)
        self.packer = ShelfPacker(self.config)
        self.sequencer = SlabSequencer(self.config, self.decomposer, self.packer)
        self.utilization = UtilizationCalculator()

    def run(self, pieces: Sequence[Piece], slabs: Sequence[Slab]) -> PackingRun:
        """Expand pieces and pack them over the candidate slabs."""
        return self.sequencer.sequence(self.expander.expand(pieces), slabs)

    def continue_with(self, run: PackingRun, slab: Slab) -> PackingRun:
        """Repeat a run with one more candidate slab appended."""
        return self.sequencer.extend(run, slab)

    def utilization_for(self, run: PackingRun) -> Utilization:
        """Combined utilization of the slabs used by a run."""
        return self.utilization.for_run(run)
