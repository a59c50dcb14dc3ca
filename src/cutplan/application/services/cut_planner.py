"""Multi-board cut planning across compatibility groups."""

from __future__ import annotations

import logging
from typing import Sequence

from cutplan.domain.grouping import (
    compatibility_key,
    expand_boards,
    expand_pieces,
    group_by_key,
)
from cutplan.domain.lumber import board_feet
from cutplan.domain.value_objects import (
    Assignment,
    Board,
    CompatibilityKey,
    CutPlan,
    Piece,
    PieceInstance,
)
from cutplan.infrastructure.bin_packing import (
    DEFAULT_KERF,
    MaxRectsPacker,
    build_strips,
)

logger = logging.getLogger(__name__)


def _format_inches(value: float) -> str:
    return f"{value:g}"


class CutPlanningService:
    """Assigns a cut list onto stock boards, one compatibility group at a time.

    Pieces and boards are grouped by (thickness, species). Within a group
    the boards are walked in the order given; each board takes as many of
    the remaining pieces as the packer can fit, and whatever is left moves
    on to the next board.

    Attributes:
        kerf: Saw blade kerf width in inches.
        packer: Single-board packer.
    """

    def __init__(
        self,
        kerf: float = DEFAULT_KERF,
        packer: MaxRectsPacker | None = None,
    ) -> None:
        self.kerf = kerf
        self.packer = packer or MaxRectsPacker(kerf=kerf)

    def optimize(self, boards: Sequence[Board], pieces: Sequence[Piece]) -> CutPlan:
        """Build a cut plan for the given stock and cut list.

        Args:
            boards: Stock boards, in the order they should be used.
            pieces: Required cut pieces.

        Returns:
            A new CutPlan. Pieces that do not fit are reported in
            ``unplaced_pieces`` together with a warning; nothing is raised.
        """
        board_instances = expand_boards(boards)
        board_groups = group_by_key(board_instances, compatibility_key)
        piece_groups = group_by_key(expand_pieces(pieces), compatibility_key)

        logger.info(
            "Planning %d pieces in %d groups onto %d boards",
            sum(len(g) for g in piece_groups.values()),
            len(piece_groups),
            len(board_instances),
        )

        assignments: list[Assignment] = []
        unplaced: list[PieceInstance] = []
        warnings: list[str] = []

        for key, group_pieces in piece_groups.items():
            group_boards = board_groups.get(key, [])
            if not group_boards:
                warnings.append(f"No stock boards with thickness {key.label} available")
                unplaced.extend(group_pieces)
                continue

            remaining = sorted(group_pieces, key=lambda p: p.area, reverse=True)
            for board in group_boards:
                if not remaining:
                    break
                placements, remaining = self.packer.pack(board, remaining)
                if placements:
                    assignments.append(
                        Assignment(
                            board=board,
                            placements=tuple(placements),
                            strips=build_strips(placements, board.length),
                        )
                    )

            if remaining:
                warnings.extend(self._misfit_warning(p, key) for p in remaining)
                unplaced.extend(remaining)

            logger.debug(
                "Group %s: %d pieces, %d left unplaced",
                key.label,
                len(group_pieces),
                len(remaining),
            )

        efficiency, waste = self._calculate_statistics(assignments, boards)

        return CutPlan(
            assignments=tuple(assignments),
            efficiency=efficiency,
            waste=waste,
            unplaced_pieces=tuple(unplaced),
            warnings=tuple(warnings),
            boards_used=len(assignments),
            total_stock_boards=len(board_instances),
        )

    def _misfit_warning(self, piece: PieceInstance, key: CompatibilityKey) -> str:
        return (
            f'Could not fit "{piece.name}" ({_format_inches(piece.length)}" x '
            f'{_format_inches(piece.width)}") on any {key.label} stock'
        )

    def _calculate_statistics(
        self,
        assignments: list[Assignment],
        boards: Sequence[Board],
    ) -> tuple[float, float]:
        """Efficiency percentage and waste in board feet.

        Board feet use the first stock board's thickness for every group,
        which is only exact when all stock shares one thickness.
        """
        stock_area = sum(a.board_area for a in assignments)
        cut_area = sum(a.cuts_area for a in assignments)

        thickness = boards[0].thickness_inches if boards else 1.0
        stock_bf = board_feet(stock_area, 1.0, thickness)
        cut_bf = board_feet(cut_area, 1.0, thickness)

        efficiency = (cut_area / stock_area) * 100 if stock_area > 0 else 0.0
        return min(100.0, max(0.0, efficiency)), max(0.0, stock_bf - cut_bf)


def optimize_cuts(
    boards: Sequence[Board],
    pieces: Sequence[Piece],
    kerf: float = DEFAULT_KERF,
) -> CutPlan:
    """Assign pieces onto boards and report placements, misfits and waste."""
    return CutPlanningService(kerf=kerf).optimize(boards, pieces)
