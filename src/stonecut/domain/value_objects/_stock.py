"""Order pieces and slab stock value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ._geometry import Point2D


def _is_positive(value: float) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


class SlabStatus(str, Enum):
    """Stock status of a slab in the shop yard.

    Only AVAILABLE slabs and PARTIAL remnants are offered as packing
    candidates; every other status means the slab is already committed.
    """

    AVAILABLE = "disponivel"
    RESERVED = "reservada"
    IN_USE = "em_uso"
    CONSUMED = "consumida"
    CUTTING = "em_corte"
    FINISHING = "em_acabamento"
    READY_TO_SHIP = "pronto_para_expedicao"
    PARTIAL = "partial"

    @property
    def is_offerable(self) -> bool:
        """True if a slab in this status may be offered as a candidate."""
        return self in (SlabStatus.AVAILABLE, SlabStatus.PARTIAL)


@dataclass(frozen=True)
class Piece:
    """An ordered rectangular piece to be cut from stone.

    Dimensions are canonical centimeters (see DimensionNormalizer).
    Non-positive or non-finite dimensions are accepted and make the
    piece unpackable rather than invalid.

    Attributes:
        id: Piece identifier.
        order_line_id: Identifier of the source order line.
        description: Human-readable description.
        width: Width in centimeters.
        height: Height in centimeters.
        material_id: Reference to the stone material.
        quantity: Number of identical copies ordered.
    """

    id: str
    order_line_id: str
    description: str
    width: float
    height: float
    material_id: str
    quantity: int = 1

    @property
    def is_packable(self) -> bool:
        """True if both dimensions are strictly positive and finite."""
        return _is_positive(self.width) and _is_positive(self.height)

    @property
    def area(self) -> float:
        """Area of a single copy in square centimeters."""
        if not self.is_packable:
            return 0.0
        return self.width * self.height


@dataclass(frozen=True)
class UnitPiece:
    """One physical copy of a Piece after quantity expansion."""

    id: str
    piece: Piece
    copy_index: int

    @property
    def order_line_id(self) -> str:
        return self.piece.order_line_id

    @property
    def description(self) -> str:
        return self.piece.description

    @property
    def material_id(self) -> str:
        return self.piece.material_id

    @property
    def width(self) -> float:
        return self.piece.width

    @property
    def height(self) -> float:
        return self.piece.height

    @property
    def is_packable(self) -> bool:
        return self.piece.is_packable

    @property
    def area(self) -> float:
        return self.piece.area


@dataclass(frozen=True)
class Slab:
    """A raw stone slab or remnant available for cutting.

    Slabs are read-only to the optimizer. The polygon, when present,
    describes a non-rectangular outline (typically an L-shaped remnant)
    in the same coordinate space as the bounding rectangle.

    Attributes:
        id: Slab identifier.
        material_id: Reference to the stone material.
        width: Bounding width in centimeters.
        height: Bounding height in centimeters.
        polygon: Ordered outline points; empty for rectangular slabs.
        status: Stock status of the slab.
        location: Yard location label.
        parent_slab_id: Slab this remnant was cut from, if any.
    """

    id: str
    material_id: str
    width: float
    height: float
    polygon: tuple[Point2D, ...] = ()
    status: SlabStatus = SlabStatus.AVAILABLE
    location: str = ""
    parent_slab_id: str | None = None

    @property
    def is_degenerate(self) -> bool:
        """True if the bounding rectangle cannot hold anything."""
        return not (_is_positive(self.width) and _is_positive(self.height))

    @property
    def area(self) -> float:
        """Bounding-box area in square centimeters."""
        if self.is_degenerate:
            return 0.0
        return self.width * self.height

    @property
    def has_outline(self) -> bool:
        """True if the polygon has enough points to describe a shape."""
        return len(self.polygon) >= 3

    @property
    def is_remnant(self) -> bool:
        """True if this slab was cut from another slab."""
        return self.parent_slab_id is not None
