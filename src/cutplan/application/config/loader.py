"""Reading project files into ProjectConfiguration models.

Every way a project can fail to load (missing file, unreadable file, bad
JSON, schema violations) surfaces as one ConfigError whose ``error_type``
names the stage that failed.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cutplan.application.config.schema import ProjectConfiguration


class ConfigError(Exception):
    """A project could not be loaded.

    Attributes:
        message: Summary suitable for printing as-is.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: Project file involved, or None for in-memory data.
        details: For json_parse, one dict with line/column/message; for
            validation, one dict per offending field.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a Pydantic error location the way it reads in the JSON file.

    Examples:
        >>> _format_json_path(("pieces", 0, "length"))
        'pieces[0].length'
    """
    rendered = "".join(
        f"[{segment}]" if isinstance(segment, int) else f".{segment}"
        for segment in loc
    )
    return rendered.removeprefix(".")


def _field_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _summarize(details: list[dict[str, Any]]) -> str:
    lines = ["Project validation failed:"]
    for detail in details:
        where = f"{detail['path']}: " if detail["path"] else ""
        line = f"  - {where}{detail['message']}"
        value = detail.get("value")
        # Whole objects are too noisy to echo back.
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> ProjectConfiguration:
    try:
        return ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _field_errors(e)
        raise ConfigError(_summarize(details), "validation", path, details) from e


def _read_text(path: Path) -> str:
    if not path.exists():
        raise ConfigError(f"No project file at {path}", "file_not_found", path)
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(f"Cannot read {path}: permission denied", "permission_denied", path) from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}", "file_read_error", path) from e


def load_config(path: Path) -> ProjectConfiguration:
    """Load a project file.

    Raises:
        ConfigError: See ConfigError.error_type for the failing stage.
    """
    text = _read_text(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"{path} is not valid JSON: {e.msg} at line {e.lineno}, column {e.colno}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Validate an already-parsed project, e.g. an API request body."""
    return _validate(data)
