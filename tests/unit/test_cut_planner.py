"""Tests for multi-board cut planning.

Tests cover:
- Placement across several boards in order
- Missing-stock and misfit warnings
- Compatibility by thickness and species
- Efficiency and waste statistics
- Determinism and board-count monotonicity
"""

from __future__ import annotations

import pytest

from cutplan.application.services import CutPlanningService, optimize_cuts
from cutplan.domain.value_objects import GrainDirection


class TestOptimizeCuts:
    """Tests for optimize_cuts placement behavior."""

    def test_four_pieces_on_one_board(self, make_board, make_piece) -> None:
        boards = [make_board(96, 8)]
        pieces = [make_piece(20, 3, id="p", name="Slat", quantity=4)]

        plan = optimize_cuts(boards, pieces, kerf=0.125)

        assert plan.is_complete
        assert plan.boards_used == 1
        assert plan.total_stock_boards == 1
        assert plan.total_pieces_placed == 4
        assert plan.warnings == ()

    def test_piece_too_long_is_reported(self, make_board, make_piece) -> None:
        boards = [make_board(96, 6)]
        pieces = [make_piece(100, 4, name="Rail")]

        plan = optimize_cuts(boards, pieces)

        assert [p.name for p in plan.unplaced_pieces] == ["Rail"]
        assert plan.warnings == ('Could not fit "Rail" (100" x 4") on any 4/4 stock',)
        assert plan.assignments == ()

    def test_missing_thickness_reported_once(self, make_board, make_piece) -> None:
        boards = [make_board(96, 8, "4/4")]
        pieces = [make_piece(20, 3, "8/4", quantity=3)]

        plan = optimize_cuts(boards, pieces)

        assert len(plan.unplaced_pieces) == 3
        assert plan.warnings == ("No stock boards with thickness 8/4 available",)

    def test_species_must_match(self, make_board, make_piece) -> None:
        boards = [make_board(96, 8, "4/4", species="Cherry")]
        pieces = [make_piece(20, 3, "4/4", species="Walnut")]

        plan = optimize_cuts(boards, pieces)

        assert len(plan.unplaced_pieces) == 1
        assert plan.warnings == (
            "No stock boards with thickness 4/4 (Walnut) available",
        )

    def test_boards_used_in_order(self, make_board, make_piece) -> None:
        boards = [
            make_board(48, 8, id="first"),
            make_board(48, 8, id="second"),
            make_board(48, 8, id="third"),
        ]
        pieces = [make_piece(40, 7, quantity=2)]

        plan = optimize_cuts(boards, pieces)

        assert plan.is_complete
        assert [a.board.original_id for a in plan.assignments] == ["first", "second"]
        assert plan.total_stock_boards == 3

    def test_board_quantity_expands(self, make_board, make_piece) -> None:
        boards = [make_board(48, 8, id="stock", quantity=2)]
        pieces = [make_piece(40, 7, quantity=2)]

        plan = optimize_cuts(boards, pieces)

        assert [a.board.unique_id for a in plan.assignments] == ["stock-0", "stock-1"]

    def test_groups_planned_independently(self, make_board, make_piece) -> None:
        boards = [make_board(96, 8, "4/4"), make_board(96, 8, "8/4")]
        pieces = [
            make_piece(20, 3, "8/4", id="thick"),
            make_piece(20, 3, "4/4", id="thin"),
        ]

        plan = optimize_cuts(boards, pieces)

        assert plan.is_complete
        by_board = {
            a.board.thickness: [p.piece.original_id for p in a.placements]
            for a in plan.assignments
        }
        assert by_board == {"8/4": ["thick"], "4/4": ["thin"]}

    def test_grain_constrained_piece_left_unplaced(self, make_board, make_piece) -> None:
        boards = [make_board(30, 60, "3/4")]
        pieces = [make_piece(50, 20, "3/4", grain_direction=GrainDirection.LENGTH)]

        plan = optimize_cuts(boards, pieces)

        assert len(plan.unplaced_pieces) == 1
        assert plan.assignments == ()

    def test_no_pieces_gives_empty_plan(self, make_board) -> None:
        plan = optimize_cuts([make_board(96, 8)], [])

        assert plan.is_complete
        assert plan.assignments == ()
        assert plan.efficiency == 0.0
        assert plan.waste == 0.0


class TestStatistics:
    """Tests for efficiency and waste."""

    def test_efficiency_and_waste(self, make_board, make_piece) -> None:
        boards = [make_board(96, 8, "4/4")]
        pieces = [make_piece(20, 3, quantity=4)]

        plan = optimize_cuts(boards, pieces)

        # 240 sq in of cuts on 768 sq in of board
        assert plan.efficiency == pytest.approx(31.25)
        assert plan.waste == pytest.approx((768 - 240) / 144)

    def test_unused_boards_do_not_count(self, make_board, make_piece) -> None:
        boards = [make_board(96, 8), make_board(96, 8, id="spare")]
        pieces = [make_piece(20, 3, quantity=4)]

        plan = optimize_cuts(boards, pieces)

        assert plan.boards_used == 1
        assert plan.efficiency == pytest.approx(31.25)

    def test_waste_uses_first_board_thickness(self, make_board, make_piece) -> None:
        boards = [make_board(96, 8, "8/4")]
        pieces = [make_piece(20, 3, "8/4", quantity=4)]

        plan = optimize_cuts(boards, pieces)

        assert plan.waste == pytest.approx((768 - 240) * 2 / 144)

    def test_statistics_within_bounds(self, make_board, make_piece) -> None:
        boards = [make_board(60, 5, quantity=3)]
        pieces = [
            make_piece(25, 4, id="a", quantity=3),
            make_piece(12, 2, id="b", quantity=6),
        ]

        plan = optimize_cuts(boards, pieces)

        assert 0.0 <= plan.efficiency <= 100.0
        assert plan.waste >= 0.0


class TestPlanningProperties:
    """Determinism and monotonicity."""

    def test_same_input_same_plan(self, make_board, make_piece) -> None:
        boards = [make_board(72, 8, quantity=2)]
        pieces = [
            make_piece(30, 5, id="a", quantity=2),
            make_piece(14, 3, id="b", quantity=4),
        ]
        service = CutPlanningService(kerf=0.125)

        assert service.optimize(boards, pieces) == service.optimize(boards, pieces)

    def test_extra_trailing_board_never_hurts(self, make_board, make_piece) -> None:
        pieces = [make_piece(40, 7, quantity=3)]
        fewer = optimize_cuts([make_board(48, 8, quantity=2)], pieces)
        more = optimize_cuts([make_board(48, 8, quantity=3)], pieces)

        assert len(more.unplaced_pieces) <= len(fewer.unplaced_pieces)
        assert more.is_complete
