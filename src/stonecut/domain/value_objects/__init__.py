"""Value objects for the slab nesting domain.

This module provides immutable data types used throughout the nesting
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Geometry
from ._geometry import (
    Orientation,
    Point2D,
    Zone,
    ZoneId,
)

# Pieces and stock
from ._stock import (
    Piece,
    Slab,
    SlabStatus,
    UnitPiece,
)

# Packing outcomes
from ._results import (
    PackingRun,
    Placement,
    SlabLayout,
    UnplacedPiece,
    Utilization,
)

__all__ = [
    # Geometry
    "Orientation",
    "Point2D",
    "Zone",
    "ZoneId",
    # Stock
    "Piece",
    "Slab",
    "SlabStatus",
    "UnitPiece",
    # Outcomes
    "PackingRun",
    "Placement",
    "SlabLayout",
    "UnplacedPiece",
    "Utilization",
]
