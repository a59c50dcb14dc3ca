"""Quantity expansion and compatibility grouping of boards and pieces."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Protocol, Sequence, TypeVar

from .value_objects import (
    Board,
    BoardInstance,
    CompatibilityKey,
    Piece,
    PieceInstance,
)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class _Stock(Protocol):
    @property
    def thickness(self) -> str: ...

    @property
    def species(self) -> str | None: ...


def compatibility_key(record: _Stock) -> CompatibilityKey:
    """Grouping key for a board, piece, template or instance."""
    return CompatibilityKey.of(record.thickness, record.species)


def expand_pieces(pieces: Sequence[Piece]) -> list[PieceInstance]:
    """Expand pieces into one instance per unit of quantity.

    Each instance carries a stable unique id of the form
    ``"{piece.id}-{index}"``.
    """
    return [
        PieceInstance(piece=piece, instance_index=i)
        for piece in pieces
        for i in range(piece.quantity)
    ]


def expand_boards(boards: Sequence[Board]) -> list[BoardInstance]:
    """Expand boards into one instance per unit of quantity."""
    return [
        BoardInstance(board=board, instance_index=i)
        for board in boards
        for i in range(board.quantity)
    ]


def group_by_key(items: Iterable[T], key_fn: Callable[[T], K]) -> dict[K, list[T]]:
    """Partition items by key, preserving first-seen key order and the
    relative order of items within each group.
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key_fn(item), []).append(item)
    return groups
