"""Infrastructure layer - report formatters."""

from .formatters import JsonExporter, LayoutReportFormatter

__all__ = [
    "JsonExporter",
    "LayoutReportFormatter",
]
