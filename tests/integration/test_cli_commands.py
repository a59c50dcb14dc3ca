"""Integration tests for the cutplan CLI.

These tests run the commands end-to-end against JSON project fixtures:
- validate reports success and loading errors with the right exit codes
- optimize prints a plan and exits 2 when pieces are left over
- stock sizes purchases and optionally prices them
- price looks up per-board-foot and per-sheet prices
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cutplan.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_project(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_project.json")])

        assert result.exit_code == 0
        assert "Validation passed" in result.output
        assert "1 board(s), 1 piece(s), 1 template(s)" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed" in result.output

    def test_invalid_thickness(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "invalid_thickness.json")]
        )

        assert result.exit_code == 1
        assert "pieces[0].thickness" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "saw" in result.output

    def test_duplicate_ids_rejected(self, runner: CliRunner, tmp_path: Path) -> None:
        piece = {"id": "shelf", "length": 20, "width": 3, "thickness": "4/4"}
        project = tmp_path / "duplicates.json"
        project.write_text(json.dumps({"schema_version": "1.0", "pieces": [piece, piece]}))

        result = runner.invoke(app, ["validate", str(project)])

        assert result.exit_code == 1
        assert "project: Value error, Duplicate piece id 'shelf'" in result.output


class TestOptimizeCommand:
    """Tests for the optimize command."""

    def test_text_report(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["optimize", str(FIXTURES_PATH / "valid_project.json")])

        assert result.exit_code == 0
        assert "CUT PLAN" in result.output
        assert "Boards used: 1 of 1" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["optimize", str(FIXTURES_PATH / "valid_project.json"), "--json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["boards_used"] == 1
        assert len(data["assignments"][0]["placements"]) == 4

    def test_unplaced_pieces_exit_code(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["optimize", str(FIXTURES_PATH / "unplaced_project.json")]
        )

        assert result.exit_code == 2
        assert 'Could not fit "Rail"' in result.output

    def test_kerf_override(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["optimize", str(FIXTURES_PATH / "valid_project.json"), "--kerf", "0", "--json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        first = data["assignments"][0]["placements"][0]
        assert first["x"] == 0
        assert first["y"] == 0

    def test_missing_file(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["optimize", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1


class TestStockCommand:
    """Tests for the stock command."""

    def test_stock_report(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["stock", str(FIXTURES_PATH / "valid_project.json")])

        assert result.exit_code == 0
        assert "STOCK TO BUY" in result.output
        assert "Oak 8ft" in result.output

    def test_stock_with_prices(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["stock", str(FIXTURES_PATH / "valid_project.json"), "--prices"]
        )

        assert result.exit_code == 0
        # One 96x8 board of red oak: 5.33 bd ft at $4.95
        assert "Total: $26.40" in result.output

    def test_stock_json(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["stock", str(FIXTURES_PATH / "valid_project.json"), "--json", "--prices"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["boards_needed"] == 1
        assert data["cost_estimate"]["missing_prices"] == []

    def test_project_without_templates(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["stock", str(FIXTURES_PATH / "no_templates.json")])

        assert result.exit_code == 1
        assert "no board templates" in result.output


class TestPriceCommand:
    """Tests for the price command."""

    def test_board_foot_price(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["price", "Walnut", "8/4"])

        assert result.exit_code == 0
        assert "$15.95 per bd ft" in result.output

    def test_sheet_price(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["price", "MDF 4x8", "3/4", "--sheet"])

        assert result.exit_code == 0
        assert "$49.95 per sheet" in result.output

    def test_unknown_price(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["price", "Unobtainium", "4/4"])

        assert result.exit_code == 1
        assert "No price found" in result.output
