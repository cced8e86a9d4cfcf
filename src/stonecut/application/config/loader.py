"""Job file loader with error handling.

This module loads and parses JSON nesting job files. File system errors,
JSON syntax errors and Pydantic validation errors are all reported as a
single ConfigError with an error type and actionable details.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from stonecut.application.config.schema import NestingJobConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for job configuration errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the job file (if applicable)
        details: Additional error details (line/column for JSON, validation
            errors with their JSON path)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("pieces", 0, "width"))
        'pieces[0].width'
        >>> _format_json_path(("slabs", 2, "polygon", 1, "x"))
        'slabs[2].polygon[1].x'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Job validation failed:"]
    for detail in details:
        path = detail["path"] or "(root)"
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> NestingJobConfiguration:
    try:
        return NestingJobConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> NestingJobConfiguration:
    """Load and validate a nesting job from a JSON file.

    Args:
        path: Path to the JSON job file

    Returns:
        A validated NestingJobConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute tells the category:
            - "file_not_found": File does not exist
            - "permission_denied": File cannot be read
            - "file_read_error": Any other OS error while reading
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed

    Example:
        >>> try:
        ...     job = load_config(Path("kitchen-order.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"{detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Job file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading job file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading job file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in job file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )

    job = _validate(data, path)
    logger.debug(
        "Loaded job %s: %d pieces, %d slabs",
        path,
        len(job.pieces),
        len(job.slabs),
    )
    return job


def load_config_from_dict(data: dict[str, Any]) -> NestingJobConfiguration:
    """Load and validate a nesting job from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
