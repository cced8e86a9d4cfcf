"""Domain services for slab nesting."""

from .nesting import (
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

__all__ = [
    "DimensionNormalizer",
    "ItemExpander",
    "NestingConfig",
    "NestingEngine",
    "ShelfPacker",
    "SlabSequencer",
    "UtilizationCalculator",
    "ZoneDecomposer",
    "normalize_length",
]
