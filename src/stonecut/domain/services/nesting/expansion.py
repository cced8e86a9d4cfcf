"""Quantity expansion of order pieces into unit pieces."""

from __future__ import annotations

import logging
from typing import Sequence

from stonecut.domain.value_objects import Piece, UnitPiece

logger = logging.getLogger(__name__)


class ItemExpander:
    """Expands pieces with quantity > 1 into independent unit pieces.

    Each copy gets the identifier ``"<piece id>-copy-<index>"`` with a
    zero-based index, so copies of the same order line can be placed on
    different slabs and reported individually.
    """

    def expand(self, pieces: Sequence[Piece]) -> tuple[UnitPiece, ...]:
        """Expand pieces into unit pieces, preserving input order.

        Args:
            pieces: Normalized pieces, possibly with quantity > 1.

        Returns:
            One UnitPiece per physical copy.
        """
        units: list[UnitPiece] = []
        for piece in pieces:
            copies = piece.quantity if piece.quantity > 0 else 1
            for index in range(copies):
                units.append(
                    UnitPiece(
                        id=f"{piece.id}-copy-{index}",
                        piece=piece,
                        copy_index=index,
                    )
                )

        logger.debug("Expanded %d pieces into %d unit pieces", len(pieces), len(units))
        return tuple(units)
