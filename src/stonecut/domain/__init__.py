"""Domain layer - core nesting logic."""

from .services import (
    DimensionNormalizer,
    ItemExpander,
    NestingConfig,
    NestingEngine,
    ShelfPacker,
    SlabSequencer,
    UtilizationCalculator,
    ZoneDecomposer,
    normalize_length,
)
from .value_objects import (
    Orientation,
    PackingRun,
    Piece,
    Placement,
    Point2D,
    Slab,
    SlabLayout,
    SlabStatus,
    UnitPiece,
    UnplacedPiece,
    Utilization,
    Zone,
    ZoneId,
)

__all__ = [
    "DimensionNormalizer",
    "ItemExpander",
    "NestingConfig",
    "NestingEngine",
    "Orientation",
    "PackingRun",
    "Piece",
    "Placement",
    "Point2D",
    "ShelfPacker",
    "Slab",
    "SlabLayout",
    "SlabSequencer",
    "SlabStatus",
    "UnitPiece",
    "UnplacedPiece",
    "Utilization",
    "UtilizationCalculator",
    "Zone",
    "ZoneDecomposer",
    "ZoneId",
    "normalize_length",
]
