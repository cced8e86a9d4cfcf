"""Slab nesting domain services.

This package provides:
- Dimension normalization of raw lengths into centimeters
- Quantity expansion of order pieces into unit pieces
- Zone decomposition of rectangular and L-shaped slabs
- Shelf packing of pieces into a zone with 90 degree rotation
- Multi-slab sequencing with the "needs additional slab" outcome
- Utilization and waste figures
- NestingEngine facade tying the services together
"""

from __future__ import annotations

from .config import NestingConfig
from .dimensions import (
    DEFAULT_METER_THRESHOLD,
    DimensionNormalizer,
    normalize_length,
)
from .expansion import ItemExpander
from .decomposition import ZoneDecomposer, point_in_polygon, polygon_area
from .shelf_packer import ShelfPacker, ZonePackResult
from .sequencer import SlabSequencer
from .utilization import UtilizationCalculator
from .engine import NestingEngine

__all__ = [
    # Config
    "NestingConfig",
    # Normalization and expansion
    "DEFAULT_METER_THRESHOLD",
    "DimensionNormalizer",
    "normalize_length",
    "ItemExpander",
    # Geometry
    "ZoneDecomposer",
    "point_in_polygon",
    "polygon_area",
    # Packing
    "ShelfPacker",
    "ZonePackResult",
    "SlabSequencer",
    # Reporting
    "UtilizationCalculator",
    # Facade
    "NestingEngine",
]
