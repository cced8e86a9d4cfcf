"""Pydantic configuration schema models for nesting job files.

This module defines the schema of JSON job files fed to the optimizer: the
order pieces, the slab stock offered to them and the nesting tolerances.
It uses Pydantic v2 for validation and serialization.

Raw dimensions are kept exactly as written in the file. Unit coercion to
centimeters happens later in the adapter via DimensionNormalizer, so that
degenerate dimensions are reported as unplaced pieces instead of rejected.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from stonecut.domain.value_objects import SlabStatus

# Supported schema versions for job files
# Version 1.0: Initial schema with pieces, slabs, initial slabs and tolerances
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class PointSchema(BaseModel):
    """A vertex of a slab outline."""

    model_config = ConfigDict(extra="forbid")

    x: float
    y: float


class PieceConfig(BaseModel):
    """An ordered piece.

    Width and height may be given in meters or centimeters; values up to
    the meter threshold are read as meters. Missing, zero or negative
    dimensions are allowed and leave the piece unplaced.

    Attributes:
        id: Unique piece identifier within the job.
        material_id: Stone material the piece is cut from.
        width: Raw width (meters or centimeters).
        height: Raw height (meters or centimeters).
        quantity: Number of identical copies.
        description: Optional description shown in reports.
        order_line_id: Source order line, defaults to the piece id.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    material_id: str = Field(..., min_length=1)
    width: float | None = None
    height: float | None = None
    quantity: int = Field(default=1, ge=1)
    description: str = ""
    order_line_id: str | None = None


class SlabConfig(BaseModel):
    """A slab record from the stock catalog.

    ``width_cm``/``height_cm`` are unambiguous centimeter values and win
    over ``width``/``height`` when present. An optional outline describes
    an L-shaped remnant; its points use ``polygon_unit``.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    material_id: str = Field(..., min_length=1)
    width: float | None = None
    height: float | None = None
    width_cm: float | None = None
    height_cm: float | None = None
    polygon: list[PointSchema] | None = None
    polygon_unit: Literal["cm", "m"] = "cm"
    status: SlabStatus = SlabStatus.AVAILABLE
    location: str = ""
    parent_slab_id: str | None = None

    @model_validator(mode="after")
    def validate_has_dimensions(self) -> "SlabConfig":
        """Require at least one way of sizing each side of the slab."""
        if self.width is None and self.width_cm is None:
            raise ValueError("slab requires 'width' or 'width_cm'")
        if self.height is None and self.height_cm is None:
            raise ValueError("slab requires 'height' or 'height_cm'")
        return self


class NestingConfigSchema(BaseModel):
    """Nesting tolerances and heuristics.

    Attributes:
        meter_threshold: Raw lengths up to this value are read as meters.
        rotation_epsilon: Side difference (cm) below which rotation is skipped.
        bounds_tolerance: Slack (cm) for zones against the slab bounds.
        min_area_tolerance: Absolute floor (cm^2) of the decomposition error.
        relative_area_tolerance: Decomposition error as a fraction of area.
        allow_rotation: Whether pieces may be turned 90 degrees.
    """

    model_config = ConfigDict(extra="forbid")

    meter_threshold: float = Field(default=10.0, gt=0)
    rotation_epsilon: float = Field(default=0.01, ge=0)
    bounds_tolerance: float = Field(default=0.01, ge=0)
    min_area_tolerance: float = Field(default=1.0, ge=0)
    relative_area_tolerance: float = Field(default=0.05, ge=0, le=1)
    allow_rotation: bool = True


class NestingJobConfiguration(BaseModel):
    """Root configuration model for a nesting job.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        pieces: Ordered pieces of any material
        slabs: Slab stock catalog
        initial_slabs: Optional material id to slab id mapping for the first
            slab of each material
        nesting: Nesting tolerances

    Example:
        >>> config = NestingJobConfiguration(
        ...     schema_version="1.0",
        ...     pieces=[PieceConfig(id="p1", material_id="granite", width=1.2, height=0.6)],
        ...     slabs=[SlabConfig(id="s1", material_id="granite", width=300, height=180)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    pieces: list[PieceConfig] = Field(default_factory=list)
    slabs: list[SlabConfig] = Field(default_factory=list)
    initial_slabs: dict[str, str] = Field(default_factory=dict)
    nesting: NestingConfigSchema = Field(default_factory=NestingConfigSchema)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted for
        forward compatibility (e.g., 1.3 is accepted if major version 1 is
        supported).
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
