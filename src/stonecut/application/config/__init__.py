"""Job file schema and loading for the nesting optimizer.

Public API:
    - NestingJobConfiguration: Root job model
    - PieceConfig, SlabConfig, PointSchema, NestingConfigSchema: Job sections
    - load_config: Load a job from a JSON file
    - load_config_from_dict: Load a job from a dictionary
    - ConfigError: Exception for job file errors
    - validate_job: Cross-field validation and stock advisories
    - config_to_nesting, config_to_pieces, config_to_catalog,
      config_to_initial_slabs: Conversion to domain objects

Example:
    >>> from pathlib import Path
    >>> from stonecut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     job = load_config(Path("kitchen-order.json"))
    ...     print(f"{len(job.pieces)} pieces, {len(job.slabs)} slabs")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from stonecut.application.config.adapter import (
    config_to_catalog,
    config_to_initial_slabs,
    config_to_nesting,
    config_to_pieces,
)
from stonecut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from stonecut.application.config.schema import (
    SUPPORTED_VERSIONS,
    NestingConfigSchema,
    NestingJobConfiguration,
    PieceConfig,
    PointSchema,
    SlabConfig,
)
from stonecut.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_job,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "NestingConfigSchema",
    "NestingJobConfiguration",
    "PieceConfig",
    "PointSchema",
    "SlabConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_job",
    # Adapters
    "config_to_catalog",
    "config_to_initial_slabs",
    "config_to_nesting",
    "config_to_pieces",
]
