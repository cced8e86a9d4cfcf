"""Dimension normalization for order pieces and slab records.

Stone pieces are usually quoted in meters (e.g. 2.4) while slab catalogs
mix meters and centimeters without a unit tag. Everything downstream of
this module works in centimeters.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable

from stonecut.domain.value_objects import Piece, Point2D, Slab, SlabStatus

from .config import NestingConfig

logger = logging.getLogger(__name__)

# Raw lengths at or below this absolute value are read as meters.
DEFAULT_METER_THRESHOLD = 10.0

CENTIMETERS_PER_METER = 100.0


def _as_finite(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def normalize_length(
    value: Any,
    meter_threshold: float = DEFAULT_METER_THRESHOLD,
) -> float:
    """Coerce a raw length into centimeters.

    Args:
        value: Raw length, possibly in meters or centimeters.
        meter_threshold: Values with ``abs(value) <= meter_threshold`` are
            taken as meters and multiplied by 100.

    Returns:
        Length in centimeters, or 0.0 when the value is missing,
        non-numeric, non-finite or not strictly positive.

    Examples:
        >>> normalize_length(2.4)
        240.0
        >>> normalize_length(240)
        240.0
        >>> normalize_length(None)
        0.0
    """
    number = _as_finite(value)
    if number is None or number <= 0:
        return 0.0
    if abs(number) <= meter_threshold:
        return number * CENTIMETERS_PER_METER
    return number


class DimensionNormalizer:
    """Builds canonical pieces and slabs from raw collaborator records.

    Attributes:
        config: Nesting configuration providing the meter threshold.
    """

    def __init__(self, config: NestingConfig | None = None) -> None:
        self.config = config or NestingConfig()

    def length(self, value: Any) -> float:
        """Normalize a single raw length using the configured threshold."""
        return normalize_length(value, self.config.meter_threshold)

    def normalize_piece(
        self,
        id: str,
        width: Any,
        height: Any,
        material_id: str,
        description: str = "",
        quantity: Any = 1,
        order_line_id: str | None = None,
    ) -> Piece:
        """Build a Piece in centimeters from a raw order line.

        A missing or non-positive quantity counts as a single copy.
        Degenerate dimensions are kept as 0.0 so the piece is reported
        unplaced instead of rejected.
        """
        piece = Piece(
            id=id,
            order_line_id=order_line_id if order_line_id is not None else id,
            description=description,
            width=self.length(width),
            height=self.length(height),
            material_id=material_id,
            quantity=_normalize_quantity(quantity),
        )
        if not piece.is_packable:
            logger.debug(
                "Piece '%s' has degenerate dimensions (%r x %r), it will not be packed",
                id,
                width,
                height,
            )
        return piece

    def normalize_slab(
        self,
        id: str,
        material_id: str,
        width: Any = None,
        height: Any = None,
        width_cm: Any = None,
        height_cm: Any = None,
        polygon: Iterable[Any] | None = None,
        polygon_unit: str = "cm",
        status: SlabStatus = SlabStatus.AVAILABLE,
        location: str = "",
        parent_slab_id: str | None = None,
    ) -> Slab:
        """Build a Slab in centimeters from a raw stock record.

        Explicit ``width_cm``/``height_cm`` values are already centimeters
        and take precedence over the ambiguous ``width``/``height``.
        """
        return Slab(
            id=id,
            material_id=material_id,
            width=self._slab_side(width_cm, width),
            height=self._slab_side(height_cm, height),
            polygon=self.normalize_polygon(polygon, polygon_unit),
            status=status,
            location=location,
            parent_slab_id=parent_slab_id,
        )

    def normalize_polygon(
        self,
        points: Iterable[Any] | None,
        unit: str = "cm",
    ) -> tuple[Point2D, ...]:
        """Convert raw outline points into centimeter Point2D values.

        Points may be Point2D instances, (x, y) pairs or mappings with
        ``x``/``y`` keys. A malformed outline is dropped entirely, which
        makes the slab behave as a plain rectangle.
        """
        if not points:
            return ()

        scale = CENTIMETERS_PER_METER if unit == "m" else 1.0
        converted: list[Point2D] = []
        for raw in points:
            coords = _point_coords(raw)
            if coords is None:
                logger.debug("Dropping malformed polygon point %r", raw)
                return ()
            converted.append(Point2D(x=coords[0] * scale, y=coords[1] * scale))
        return tuple(converted)

    def _slab_side(self, centimeters: Any, ambiguous: Any) -> float:
        explicit = _as_finite(centimeters)
        if explicit is not None:
            return explicit if explicit > 0 else 0.0
        return self.length(ambiguous)


def _normalize_quantity(value: Any) -> int:
    number = _as_finite(value)
    if number is None or number < 1:
        return 1
    return int(number)


def _point_coords(raw: Any) -> tuple[float, float] | None:
    if isinstance(raw, Point2D):
        x, y = raw.x, raw.y
    elif isinstance(raw, dict):
        x, y = raw.get("x"), raw.get("y")
    elif hasattr(raw, "x") and hasattr(raw, "y"):
        x, y = raw.x, raw.y
    else:
        try:
            x, y = raw
        except (TypeError, ValueError):
            return None
    fx, fy = _as_finite(x), _as_finite(y)
    if fx is None or fy is None:
        return None
    return fx, fy
