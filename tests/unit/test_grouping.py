"""Tests for quantity expansion and compatibility grouping."""

from __future__ import annotations

from cutplan.domain.grouping import (
    compatibility_key,
    expand_boards,
    expand_pieces,
    group_by_key,
)
from cutplan.domain.value_objects import CompatibilityKey


class TestExpansion:
    """Tests for expand_pieces and expand_boards."""

    def test_pieces_expand_per_unit_of_quantity(self, make_piece) -> None:
        instances = expand_pieces([make_piece(20, 3, id="shelf", quantity=3)])

        assert [i.unique_id for i in instances] == ["shelf-0", "shelf-1", "shelf-2"]
        assert all(i.original_id == "shelf" for i in instances)
        assert all(i.length == 20 and i.width == 3 for i in instances)

    def test_boards_expand_in_input_order(self, make_board) -> None:
        boards = [make_board(96, 8, id="a", quantity=2), make_board(48, 8, id="b")]

        instances = expand_boards(boards)

        assert [i.unique_id for i in instances] == ["a-0", "a-1", "b-0"]


class TestGrouping:
    """Tests for compatibility keys and group_by_key."""

    def test_missing_species_is_unspecified(self, make_piece) -> None:
        key = compatibility_key(make_piece(10, 2, "4/4"))

        assert key == CompatibilityKey("4/4", "unspecified")
        assert key.specified_species is None
        assert key.label == "4/4"

    def test_label_includes_species(self, make_board) -> None:
        key = compatibility_key(make_board(96, 6, "8/4", species="Walnut"))
        assert key.label == "8/4 (Walnut)"

    def test_equivalent_notations_are_different_keys(self, make_piece) -> None:
        a = compatibility_key(make_piece(10, 2, "4/4"))
        b = compatibility_key(make_piece(10, 2, "1.0"))
        assert a != b

    def test_pieces_and_boards_share_keys(self, make_piece, make_board) -> None:
        piece = make_piece(10, 2, "4/4", species="Cherry")
        board = make_board(96, 6, "4/4", species="Cherry")
        assert compatibility_key(piece) == compatibility_key(board)

    def test_group_by_key_preserves_order(self, make_piece) -> None:
        pieces = [
            make_piece(10, 2, "8/4", id="a"),
            make_piece(10, 2, "4/4", id="b"),
            make_piece(10, 2, "8/4", id="c"),
        ]

        groups = group_by_key(pieces, compatibility_key)

        assert [k.thickness for k in groups] == ["8/4", "4/4"]
        assert [p.id for p in groups[CompatibilityKey("8/4")]] == ["a", "c"]
