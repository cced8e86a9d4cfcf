"""Application layer - use cases and orchestration."""

from .dtos import MaterialRun, NestingResult
from .services import NestingService, SlabCatalog, SlabSelectionError

__all__ = [
    "MaterialRun",
    "NestingResult",
    "NestingService",
    "SlabCatalog",
    "SlabSelectionError",
]
