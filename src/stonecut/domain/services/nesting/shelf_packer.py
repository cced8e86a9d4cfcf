"""Shelf packing of unit pieces into a single rectangular zone.

Pieces are laid left to right in rows ("shelves"). When the next piece
would overrun the zone width, the cursor wraps to a new row above the
tallest piece of the current one. Each piece may be tried turned 90
degrees. The pass is greedy and never revisits a placement.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from stonecut.domain.value_objects import Orientation, Placement, UnitPiece, Zone

from .config import NestingConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZonePackResult:
    """Outcome of one packing attempt against one zone.

    Attributes:
        zone: The zone that was packed.
        placements: Placements made in this zone, in placement order.
        remaining: Pieces not placed, in the caller's queue order.
    """

    zone: Zone
    placements: tuple[Placement, ...]
    remaining: tuple[UnitPiece, ...]

    @property
    def placed_count(self) -> int:
        return len(self.placements)


@dataclass
class _Cursor:
    """Mutable cursor for a single pack call, relative to the zone origin."""

    x: float = 0.0
    y: float = 0.0
    shelf_height: float = 0.0

    def wrap(self) -> None:
        self.y += self.shelf_height
        self.x = 0.0
        self.shelf_height = 0.0


class ShelfPacker:
    """Greedy shelf packer with single 90 degree rotation.

    Attributes:
        config: Nesting configuration (rotation epsilon, rotation switch).
    """

    def __init__(self, config: NestingConfig | None = None) -> None:
        self.config = config or NestingConfig()

    def pack(
        self,
        zone: Zone,
        pieces: Sequence[UnitPiece],
        slab_id: str,
    ) -> ZonePackResult:
        """Place as many pieces as possible into the zone.

        Pieces are attempted largest first by ``max(width, height)``; the
        sort is stable so equal pieces keep their queue order.

        Args:
            zone: Target zone; placements are reported in absolute slab
                coordinates.
            pieces: Queue of unit pieces not yet placed.
            slab_id: Identifier of the slab owning the zone.

        Returns:
            ZonePackResult with new placements and leftover pieces.
        """
        queue = list(pieces)
        order = sorted(
            range(len(queue)),
            key=lambda i: _largest_side(queue[i]),
            reverse=True,
        )
        cursor = _Cursor()
        placements: list[Placement] = []
        placed: set[int] = set()

        for index in order:
            piece = queue[index]
            if not piece.is_packable:
                continue
            placement = self._place(piece, zone, cursor, slab_id)
            if placement is None:
                logger.debug(
                    "Piece '%s' (%sx%s) does not fit in zone %s of slab '%s'",
                    piece.id,
                    piece.width,
                    piece.height,
                    zone.zone_id.value,
                    slab_id,
                )
                continue
            placements.append(placement)
            placed.add(index)

        remaining = tuple(p for i, p in enumerate(queue) if i not in placed)
        return ZonePackResult(zone=zone, placements=tuple(placements), remaining=remaining)

    def orientations(self, piece: UnitPiece) -> tuple[Orientation, ...]:
        """Orientations to try for a piece, in order.

        Near-square pieces are only tried as-is; rotating them gains
        nothing and would report a spurious rotation.
        """
        if self.config.allow_rotation and abs(piece.width - piece.height) > self.config.rotation_epsilon:
            return (Orientation.NORMAL, Orientation.ROTATED)
        return (Orientation.NORMAL,)

    def _place(
        self,
        piece: UnitPiece,
        zone: Zone,
        cursor: _Cursor,
        slab_id: str,
    ) -> Placement | None:
        for orientation in self.orientations(piece):
            width, height = orientation.apply(piece.width, piece.height)

            if cursor.x > 0 and cursor.x + width > zone.width:
                cursor.wrap()

            fits = (
                width <= zone.width
                and height <= zone.height
                and cursor.y + height <= zone.height
            )
            if not fits:
                continue

            placement = Placement(
                unit_piece_id=piece.id,
                order_line_id=piece.order_line_id,
                slab_id=slab_id,
                zone_id=zone.zone_id,
                x=zone.x + cursor.x,
                y=zone.y + cursor.y,
                width=width,
                height=height,
                orientation=orientation,
            )
            cursor.x += width
            cursor.shelf_height = max(cursor.shelf_height, height)

            if orientation.is_rotated:
                logger.debug(
                    "Piece '%s' placed rotated at (%s, %s), placed dimensions: %sx%s "
                    "(original: %sx%s)",
                    piece.id,
                    placement.x,
                    placement.y,
                    width,
                    height,
                    piece.width,
                    piece.height,
                )
            return placement
        return None


def _largest_side(piece: UnitPiece) -> float:
    if not piece.is_packable:
        return 0.0
    return max(piece.width, piece.height)
