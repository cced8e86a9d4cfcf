"""Adapter to convert NestingJobConfiguration into domain objects.

Raw job values go through DimensionNormalizer here, which is the single
place where meters become centimeters.
"""

from stonecut.application.config.schema import NestingJobConfiguration
from stonecut.application.services.slab_catalog import SlabCatalog
from stonecut.domain import DimensionNormalizer, NestingConfig, Piece


def config_to_nesting(config: NestingJobConfiguration) -> NestingConfig:
    """Convert the job's nesting section to a domain NestingConfig."""
    nesting = config.nesting
    return NestingConfig(
        meter_threshold=nesting.meter_threshold,
        rotation_epsilon=nesting.rotation_epsilon,
        bounds_tolerance=nesting.bounds_tolerance,
        min_area_tolerance=nesting.min_area_tolerance,
        relative_area_tolerance=nesting.relative_area_tolerance,
        allow_rotation=nesting.allow_rotation,
    )


def config_to_pieces(
    config: NestingJobConfiguration,
    normalizer: DimensionNormalizer | None = None,
) -> list[Piece]:
    """Convert job pieces to centimeter Piece objects, in file order.

    Args:
        config: A validated NestingJobConfiguration instance
        normalizer: Normalizer to use; defaults to one built from the job's
            own nesting configuration.

    Returns:
        List of Piece objects.
    """
    normalizer = normalizer or DimensionNormalizer(config_to_nesting(config))
    return [
        normalizer.normalize_piece(
            id=piece.id,
            width=piece.width,
            height=piece.height,
            material_id=piece.material_id,
            description=piece.description,
            quantity=piece.quantity,
            order_line_id=piece.order_line_id,
        )
        for piece in config.pieces
    ]


def config_to_catalog(
    config: NestingJobConfiguration,
    normalizer: DimensionNormalizer | None = None,
) -> SlabCatalog:
    """Convert job slabs to a SlabCatalog, keeping file order."""
    normalizer = normalizer or DimensionNormalizer(config_to_nesting(config))
    return SlabCatalog(
        normalizer.normalize_slab(
            id=slab.id,
            material_id=slab.material_id,
            width=slab.width,
            height=slab.height,
            width_cm=slab.width_cm,
            height_cm=slab.height_cm,
            polygon=slab.polygon,
            polygon_unit=slab.polygon_unit,
            status=slab.status,
            location=slab.location,
            parent_slab_id=slab.parent_slab_id,
        )
        for slab in config.slabs
    )


def config_to_initial_slabs(config: NestingJobConfiguration) -> dict[str, str]:
    """Return the material id to initial slab id mapping of the job."""
    return dict(config.initial_slabs)
