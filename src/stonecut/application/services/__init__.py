"""Application services for slab nesting."""

from .nesting_service import NestingService
from .slab_catalog import SlabCatalog, SlabSelectionError

__all__ = [
    "NestingService",
    "SlabCatalog",
    "SlabSelectionError",
]
