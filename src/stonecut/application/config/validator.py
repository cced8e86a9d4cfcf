"""Validation structures and stock advisory checks for nesting jobs.

Schema validation only guarantees that a job file is well formed. The
checks here look at the job as a whole: identifiers that collide, initial
slabs that cannot be used, and pieces that are bound to end unplaced.
"""

from dataclasses import dataclass, field
from typing import Any

from stonecut.application.config.adapter import (
    config_to_catalog,
    config_to_nesting,
    config_to_pieces,
)
from stonecut.application.config.schema import NestingJobConfiguration
from stonecut.domain import DimensionNormalizer, Piece, Slab, ZoneDecomposer, ZoneId


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "slabs[1].id")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    The job can still be optimized, but some pieces may end unplaced or
    a slab may be packed differently than its outline suggests.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_identifiers(config: NestingJobConfiguration) -> ValidationResult:
    """Report duplicate piece and slab identifiers."""
    result = ValidationResult()

    seen_pieces: set[str] = set()
    for i, piece in enumerate(config.pieces):
        if piece.id in seen_pieces:
            result.add_error(f"pieces[{i}].id", f"Duplicate piece id '{piece.id}'", piece.id)
        seen_pieces.add(piece.id)

    seen_slabs: set[str] = set()
    for i, slab in enumerate(config.slabs):
        if slab.id in seen_slabs:
            result.add_error(f"slabs[{i}].id", f"Duplicate slab id '{slab.id}'", slab.id)
        seen_slabs.add(slab.id)

    return result


def check_initial_slabs(config: NestingJobConfiguration) -> ValidationResult:
    """Check that every initial slab exists and can start its material."""
    result = ValidationResult()
    slabs = {slab.id: slab for slab in reversed(config.slabs)}

    for material_id, slab_id in config.initial_slabs.items():
        path = f"initial_slabs.{material_id}"
        slab = slabs.get(slab_id)
        if slab is None:
            result.add_error(path, f"Unknown slab '{slab_id}'", slab_id)
        elif slab.material_id != material_id:
            result.add_error(
                path,
                f"Slab '{slab_id}' is material '{slab.material_id}', "
                f"expected '{material_id}'",
                slab_id,
            )
        elif not slab.status.is_offerable:
            result.add_error(
                path,
                f"Slab '{slab_id}' is not available (status: {slab.status.value})",
                slab_id,
            )

    return result


def check_stock_advisories(config: NestingJobConfiguration) -> ValidationResult:
    """Warn about pieces and slabs that will not pack as expected.

    Advisories checked:
    - Piece with missing or non-positive dimensions (always unplaced)
    - Material with no available slab at all
    - Piece larger than every candidate slab of its material
    - Slab outline that does not split into two rectangular zones
    """
    result = ValidationResult()
    nesting = config_to_nesting(config)
    normalizer = DimensionNormalizer(nesting)
    pieces = config_to_pieces(config, normalizer)
    catalog = config_to_catalog(config, normalizer)

    reported_materials: set[str] = set()
    for i, piece in enumerate(pieces):
        path = f"pieces[{i}]"
        if not piece.is_packable:
            result.add_warning(
                path,
                f"Piece '{piece.id}' has missing or non-positive dimensions "
                "and will not be placed",
                suggestion="Check the width and height of the order line",
            )
            continue

        candidates = catalog.candidates(piece.material_id)
        if not candidates:
            if piece.material_id not in reported_materials:
                reported_materials.add(piece.material_id)
                result.add_warning(
                    f"{path}.material_id",
                    f"No available slab of material '{piece.material_id}'",
                    suggestion="Add slabs of this material to the stock",
                )
            continue

        if not any(_fits_bounding_box(piece, slab, nesting.allow_rotation) for slab in candidates):
            result.add_warning(
                path,
                f"Piece '{piece.id}' ({piece.width:g} x {piece.height:g} cm) is larger "
                f"than every available slab of material '{piece.material_id}'",
            )

    decomposer = ZoneDecomposer(nesting)
    for i, slab in enumerate(catalog):
        if not slab.has_outline or slab.is_degenerate:
            continue
        zones = decomposer.decompose(slab)
        if zones[0].zone_id is ZoneId.FULL:
            result.add_warning(
                f"slabs[{i}].polygon",
                f"Outline of slab '{slab.id}' is not an L shape, "
                "it will be packed against its bounding box",
            )

    return result


def validate_job(config: NestingJobConfiguration) -> ValidationResult:
    """Perform full validation of a loaded nesting job.

    Args:
        config: A schema-valid NestingJobConfiguration instance

    Returns:
        ValidationResult with blocking errors and advisory warnings
    """
    result = ValidationResult()
    result.merge(check_identifiers(config))
    result.merge(check_initial_slabs(config))
    result.merge(check_stock_advisories(config))
    return result


def _fits_bounding_box(piece: Piece, slab: Slab, allow_rotation: bool) -> bool:
    if piece.width <= slab.width and piece.height <= slab.height:
        return True
    return allow_rotation and piece.height <= slab.width and piece.width <= slab.height
