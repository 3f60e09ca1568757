"""Theme configuration loader with error reporting.

This module loads a JSON theme configuration, validates every component
slice against its pydantic schema and reports file system, JSON and
validation problems as a single ``ConfigError`` with actionable details.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from themecore.application.config.schemas import COMPONENT_SCHEMAS, ThemeConfiguration
from themecore.domain.components import ComponentRegistry, component_registry

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
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

    Args:
        loc: Tuple of path segments (strings for keys, ints for array indices)

    Returns:
        Formatted JSON path like "hooks.add[0].tag"

    Examples:
        >>> _format_json_path(("text_domain", "domain"))
        'text_domain.domain'
        >>> _format_json_path(("hooks", "add", 0, "tag"))
        'hooks.add[0].tag'
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
    prefix: tuple[str | int, ...] = (),
) -> list[dict[str, Any]]:
    """Extract and format validation errors from a Pydantic ValidationError.

    Args:
        error: The Pydantic ValidationError to process
        prefix: Location of the validated slice inside the document

    Returns:
        List of error dictionaries with path, message, value, and error_type
    """
    details: list[dict[str, Any]] = []
    for err in error.errors():
        # Union members add tags such as "list[HookConfig]" to the location
        loc = tuple(
            segment
            for segment in err["loc"]
            if not (isinstance(segment, str) and "[" in segment)
        )
        details.append(
            {
                "path": _format_json_path(prefix + loc),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    """Format validation error details into a human-readable message.

    Args:
        details: List of error detail dictionaries

    Returns:
        Formatted multi-line error message
    """
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _validate(
    data: Any,
    registry: ComponentRegistry,
    path: Path | None = None,
) -> ThemeConfiguration:
    if not isinstance(data, Mapping):
        details = [
            {
                "path": "",
                "message": "Theme configuration must be an object keyed by component id",
                "value": None,
                "error_type": "dict_type",
            }
        ]
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )

    components: dict[str, Any] = {}
    ignored: list[str] = []
    details = []
    for component_id, component_config in data.items():
        if component_id not in registry:
            logger.warning(f"Ignoring unknown component '{component_id}'")
            ignored.append(component_id)
            continue

        schema = COMPONENT_SCHEMAS.get(component_id)
        if schema is not None:
            try:
                schema.model_validate(component_config)
            except PydanticValidationError as e:
                details.extend(_extract_validation_errors(e, prefix=(component_id,)))
                continue
        elif not isinstance(component_config, Mapping):
            details.append(
                {
                    "path": component_id,
                    "message": "Component configuration must be an object",
                    "value": component_config,
                    "error_type": "dict_type",
                }
            )
            continue

        components[component_id] = component_config

    if details:
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )

    logger.debug(f"Loaded configuration for {len(components)} components")
    return ThemeConfiguration(components=components, ignored=tuple(ignored))


def load_config(
    path: Path,
    registry: ComponentRegistry = component_registry,
) -> ThemeConfiguration:
    """Load and validate a theme configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file
        registry: Registry deciding which component ids are known

    Returns:
        A validated ThemeConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "permission_denied": File cannot be read
            - "file_read_error": Any other read failure
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed

    Example:
        >>> from pathlib import Path
        >>> try:
        ...     config = load_config(Path("theme.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
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

    return _validate(data, registry, path)


def load_config_from_dict(
    data: Mapping[str, Any],
    registry: ComponentRegistry = component_registry,
) -> ThemeConfiguration:
    """Load and validate a theme configuration from a mapping.

    This is the entry point for programmatic configuration, where guards
    and markup may be Python callables.

    Args:
        data: Mapping of component id to component configuration
        registry: Registry deciding which component ids are known

    Returns:
        A validated ThemeConfiguration instance

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data, registry)
