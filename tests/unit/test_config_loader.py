"""Tests for loading project files and reporting errors."""

from __future__ import annotations

from pathlib import Path

import pytest

from cutplan.application.config import (
    ConfigError,
    ProjectConfiguration,
    load_config,
    load_config_from_dict,
)
from cutplan.application.config.loader import _format_json_path


class TestLoadConfig:
    """Tests for load_config."""

    def test_valid_file(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_project.json")

        assert isinstance(config, ProjectConfiguration)
        assert config.name == "Oak bookshelf"
        assert len(config.boards) == 1
        assert config.pieces[0].quantity == 4

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert "line" in error.details[0]
        assert "column" in error.details[0]

    def test_validation_error_details(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_thickness.json")

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "pieces[0].thickness"
        assert error.details[0]["value"] == "thick"
        assert str(error).startswith("Project validation failed:")

    def test_unknown_field(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "unknown_field.json")

        assert [d["path"] for d in exc_info.value.details] == ["saw"]

    def test_directory_is_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.error_type in {"file_read_error", "permission_denied"}


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_valid_dict(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "pieces": [{"length": 20, "width": 3, "thickness": "4/4"}],
            }
        )
        assert len(config.pieces) == 1

    def test_invalid_dict(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {"schema_version": "1.0", "boards": [{"length": -1, "width": 3, "thickness": "4/4"}]}
            )

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.path is None
        assert error.details[0]["path"] == "boards[0].length"

    def test_duplicate_ids_reported_at_project_level(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {
                    "schema_version": "1.0",
                    "pieces": [
                        {"id": 7, "length": 20, "width": 3, "thickness": "4/4"},
                        {"id": "7", "length": 18, "width": 3, "thickness": "4/4"},
                    ],
                }
            )

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == ""
        assert "Duplicate piece id '7'" in str(error)


class TestFormatJsonPath:
    """Tests for _format_json_path."""

    def test_nested_path(self) -> None:
        assert _format_json_path(("pieces", 0, "length")) == "pieces[0].length"

    def test_leading_index(self) -> None:
        assert _format_json_path((2, "name")) == "[2].name"
