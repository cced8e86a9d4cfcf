"""Packing outcome value objects.

All outcomes are immutable: each packing attempt returns fresh values
instead of mutating shared piece records.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._geometry import Orientation, Zone, ZoneId
from ._stock import Slab, UnitPiece


@dataclass(frozen=True)
class Placement:
    """A unit piece fitted at a position on a slab.

    Attributes:
        unit_piece_id: Identifier of the placed unit piece.
        order_line_id: Identifier of the originating order line.
        slab_id: Slab the piece was placed on.
        zone_id: Zone of the slab that holds the piece.
        x: Absolute left edge on the slab, in centimeters.
        y: Absolute bottom edge on the slab, in centimeters.
        width: Rendered width (after rotation).
        height: Rendered height (after rotation).
        orientation: Whether the piece was rotated to fit.
    """

    unit_piece_id: str
    order_line_id: str
    slab_id: str
    zone_id: ZoneId
    x: float
    y: float
    width: float
    height: float
    orientation: Orientation = Orientation.NORMAL

    @property
    def rotated(self) -> bool:
        """True if the piece was turned 90 degrees."""
        return self.orientation.is_rotated

    @property
    def area(self) -> float:
        """Rendered area in square centimeters."""
        return self.width * self.height

    @property
    def right_edge(self) -> float:
        """X coordinate of the placement's right edge."""
        return self.x + self.width

    @property
    def top_edge(self) -> float:
        """Y coordinate of the placement's top edge."""
        return self.y + self.height

    def overlaps(self, other: Placement) -> bool:
        """Check whether two placements share a positive area."""
        overlap_w = min(self.right_edge, other.right_edge) - max(self.x, other.x)
        overlap_h = min(self.top_edge, other.top_edge) - max(self.y, other.y)
        return overlap_w > 0 and overlap_h > 0


@dataclass(frozen=True)
class UnplacedPiece:
    """A unit piece left over after every candidate slab was tried."""

    unit_piece_id: str
    order_line_id: str
    width: float
    height: float

    @classmethod
    def from_unit_piece(cls, unit: UnitPiece) -> UnplacedPiece:
        return cls(
            unit_piece_id=unit.id,
            order_line_id=unit.order_line_id,
            width=unit.width,
            height=unit.height,
        )

    @property
    def is_packable(self) -> bool:
        """False for pieces with degenerate dimensions."""
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class SlabLayout:
    """Placements fitted on a single slab.

    Attributes:
        slab: The slab this layout belongs to.
        zones: Packing zones the slab was decomposed into.
        placements: Fitted placements, in placement order.
    """

    slab: Slab
    zones: tuple[Zone, ...]
    placements: tuple[Placement, ...]

    @property
    def used_area(self) -> float:
        """Total rendered area of placed pieces."""
        return sum(p.area for p in self.placements)

    @property
    def piece_count(self) -> int:
        """Number of pieces placed on this slab."""
        return len(self.placements)

    @property
    def is_empty(self) -> bool:
        return not self.placements

    @property
    def zone_ids(self) -> tuple[ZoneId, ...]:
        return tuple(zone.zone_id for zone in self.zones)


@dataclass(frozen=True)
class Utilization:
    """Material usage figures for operator feedback.

    Attributes:
        used_area: Area covered by placed pieces.
        total_area: Bounding area of the slab(s).
        waste_percentage: Share of total area left unused (0-100).
    """

    used_area: float
    total_area: float
    waste_percentage: float

    @property
    def utilization_percentage(self) -> float:
        """Share of total area covered by pieces (0-100)."""
        return 100.0 - self.waste_percentage


@dataclass(frozen=True)
class PackingRun:
    """Complete outcome of packing a queue of unit pieces over slabs.

    ``layouts[i]`` always belongs to ``slabs[i]``. A unit piece appears in
    exactly one layout or in ``unplaced``, never both.

    Attributes:
        slabs: Ordered candidate slabs that were tried.
        unit_pieces: The full expanded queue, in input order.
        layouts: One layout per candidate slab.
        unplaced: Pieces left after exhausting all candidate slabs.
    """

    slabs: tuple[Slab, ...]
    unit_pieces: tuple[UnitPiece, ...]
    layouts: tuple[SlabLayout, ...]
    unplaced: tuple[UnplacedPiece, ...]

    @property
    def placements(self) -> tuple[Placement, ...]:
        """All fitted placements across every slab, in slab order."""
        return tuple(p for layout in self.layouts for p in layout.placements)

    @property
    def fitted_count(self) -> int:
        return sum(layout.piece_count for layout in self.layouts)

    @property
    def is_complete(self) -> bool:
        """True when every unit piece was placed."""
        return not self.unplaced

    @property
    def needs_additional_slab(self) -> bool:
        """True when packable pieces remain after all candidates.

        Pieces with degenerate dimensions never fit anywhere, so they
        alone do not justify asking for another slab.
        """
        return any(p.is_packable for p in self.unplaced)

    @property
    def used_layouts(self) -> tuple[SlabLayout, ...]:
        """Layouts that received at least one placement."""
        return tuple(layout for layout in self.layouts if not layout.is_empty)

    def placement_for(self, unit_piece_id: str) -> Placement | None:
        """Return the placement of a unit piece, or None if unplaced."""
        for placement in self.placements:
            if placement.unit_piece_id == unit_piece_id:
                return placement
        return None

    def layout_for(self, slab_id: str) -> SlabLayout | None:
        """Return the layout computed for a slab, if it was a candidate."""
        for layout in self.layouts:
            if layout.slab.id == slab_id:
                return layout
        return None
