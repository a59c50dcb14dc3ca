"""Tests for thickness notation parsing and board-feet helpers."""

from __future__ import annotations

import pytest

from cutplan.domain.lumber import (
    FALLBACK_THICKNESS,
    board_feet,
    calculate_cut_pieces_board_feet,
    cut_piece_thicknesses,
    parse_thickness,
    stock_thicknesses,
    thickness_inches,
)


class TestParseThickness:
    """Tests for parse_thickness."""

    @pytest.mark.parametrize(
        "notation, expected",
        [
            ("4/4", 1.0),
            ("8/4", 2.0),
            ("3/4", 0.75),
            ("0.75", 0.75),
            ("1", 1.0),
            (" 5/4 ", 1.25),
        ],
    )
    def test_valid_notation(self, notation: str, expected: float) -> None:
        assert parse_thickness(notation) == pytest.approx(expected)

    @pytest.mark.parametrize("notation", ["thick", "", "4/0", "0/4", "-1", "0", "nan"])
    def test_invalid_notation_returns_none(self, notation: str) -> None:
        assert parse_thickness(notation) is None

    def test_thickness_inches_falls_back_to_one_inch(self) -> None:
        assert thickness_inches("unknown") == FALLBACK_THICKNESS
        assert thickness_inches("8/4") == 2.0


class TestBoardFeet:
    """Tests for board-feet calculations."""

    def test_board_feet_formula(self) -> None:
        # 96 x 6 x 1 = 576 cubic inches = 4 board feet
        assert board_feet(96, 6, 1.0) == pytest.approx(4.0)

    def test_cut_list_board_feet_counts_quantity(self, make_piece) -> None:
        pieces = [
            make_piece(48, 6, "4/4", quantity=2),
            make_piece(24, 6, "8/4"),
        ]
        # 2 x 2.0 + 2.0
        assert calculate_cut_pieces_board_feet(pieces) == pytest.approx(6.0)

    def test_empty_cut_list_has_zero_board_feet(self) -> None:
        assert calculate_cut_pieces_board_feet([]) == 0


class TestThicknessLists:
    """Tests for unique thickness helpers."""

    def test_stock_thicknesses_unique_in_order(self, make_board) -> None:
        boards = [
            make_board(96, 6, "8/4"),
            make_board(96, 6, "4/4"),
            make_board(48, 6, "8/4"),
        ]
        assert stock_thicknesses(boards) == ["8/4", "4/4"]

    def test_cut_piece_thicknesses_keeps_notation_literal(self, make_piece) -> None:
        pieces = [make_piece(10, 2, "4/4"), make_piece(10, 2, "1.00")]
        assert cut_piece_thicknesses(pieces) == ["4/4", "1.00"]
