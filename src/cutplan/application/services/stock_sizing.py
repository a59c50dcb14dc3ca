"""Stock sizing: how many boards to buy for a cut list.

Each compatibility group is sized on its own by running the cut planner
against hypothetical board sets built from the group's templates:

- One template: binary search on the board count. This assumes packing is
  monotonic in board count, which holds for typical cut lists but is not
  guaranteed by the greedy packer.
- Several templates: for increasing totals, every split of the total
  across the templates is tried and the most efficient complete plan wins.

The boards chosen for every group are consolidated and planned once more
against the original cut list, so the returned plan refers to the same
board records the caller will keep.
"""

from __future__ import annotations

import logging
import math
from itertools import combinations
from typing import Iterator, Sequence

from cutplan.domain.grouping import compatibility_key, group_by_key
from cutplan.domain.lumber import (
    board_feet,
    calculate_cut_pieces_board_feet,
    thickness_inches,
)
from cutplan.domain.value_objects import (
    Board,
    BoardTemplate,
    CutPlan,
    Piece,
    StockResult,
    TemplateCount,
)
from cutplan.infrastructure.bin_packing import DEFAULT_KERF

from .cut_planner import CutPlanningService

logger = logging.getLogger(__name__)

# Headroom over the raw board-feet ratio when estimating board counts.
SINGLE_TEMPLATE_ALLOWANCE = 1.2
MULTI_TEMPLATE_ALLOWANCE = 1.3

MIN_SEARCH_UPPER_BOUND = 10


def compositions(total: int, parts: int) -> Iterator[tuple[int, ...]]:
    """Yield every tuple of ``parts`` non-negative ints summing to ``total``.

    Enumerated with stars and bars, in lexicographic order.

    Examples:
        >>> list(compositions(2, 2))
        [(0, 2), (1, 1), (2, 0)]
    """
    slots = total + parts - 1
    for bars in combinations(range(slots), parts - 1):
        counts: list[int] = []
        previous = -1
        for bar in bars:
            counts.append(bar - previous - 1)
            previous = bar
        counts.append(slots - previous - 1)
        yield tuple(counts)


class StockSizingService:
    """Finds the smallest board set that places every piece.

    Attributes:
        kerf: Saw blade kerf width in inches.
        planner: Cut planner used for every trial.
    """

    def __init__(
        self,
        kerf: float = DEFAULT_KERF,
        planner: CutPlanningService | None = None,
    ) -> None:
        self.kerf = kerf
        self.planner = planner or CutPlanningService(kerf=kerf)

    def calculate(
        self,
        pieces: Sequence[Piece],
        templates: Sequence[BoardTemplate],
    ) -> StockResult:
        """Size stock for a cut list from purchasable board templates.

        Pieces whose (thickness, species) matches no template are left out
        of the search; the final plan reports them as unplaced.

        Args:
            pieces: Required cut pieces.
            templates: Purchasable board sizes.

        Returns:
            StockResult with consolidated boards and the final cut plan.
        """
        if not pieces or not templates:
            return StockResult(
                boards_needed=0,
                boards=(),
                cut_plan=None,
                boards_by_template=(),
            )

        templates_by_key = group_by_key(templates, compatibility_key)
        pieces_by_key = group_by_key(pieces, compatibility_key)

        chosen: list[TemplateCount] = []
        for key, group_pieces in pieces_by_key.items():
            group_templates = templates_by_key.get(key)
            if not group_templates:
                logger.info("No board templates for %s", key.label)
                continue

            if len(group_templates) == 1:
                counts = self._size_single(group_pieces, group_templates[0])
            else:
                counts = self._size_multiple(group_pieces, group_templates)

            logger.info(
                "Group %s needs %d boards",
                key.label,
                sum(c.count for c in counts),
            )
            chosen.extend(counts)

        boards = self._consolidate(chosen)
        cut_plan = self.planner.optimize(boards, pieces)

        return StockResult(
            boards_needed=sum(b.quantity for b in boards),
            boards=tuple(boards),
            cut_plan=cut_plan,
            boards_by_template=tuple(chosen),
        )

    def _trial(self, pieces: Sequence[Piece], counts: Sequence[TemplateCount]) -> CutPlan:
        """Plan the pieces against a hypothetical board set."""
        boards = [
            Board(
                id=f"trial-{index}",
                name=tc.template.name or "Board",
                length=tc.template.length,
                width=tc.template.width,
                thickness=tc.template.thickness,
                species=tc.template.species,
                quantity=tc.count,
            )
            for index, tc in enumerate(counts)
            if tc.count > 0
        ]
        return self.planner.optimize(boards, pieces)

    def _size_single(
        self,
        pieces: Sequence[Piece],
        template: BoardTemplate,
    ) -> list[TemplateCount]:
        """Binary search the smallest count of one template that fits all pieces."""
        estimate = max(
            1,
            math.ceil(
                SINGLE_TEMPLATE_ALLOWANCE
                * calculate_cut_pieces_board_feet(pieces)
                / template.board_feet
            ),
        )
        low, high = 1, max(estimate * 2, MIN_SEARCH_UPPER_BOUND)
        upper_bound = high
        best: int | None = None

        while low <= high:
            mid = (low + high) // 2
            plan = self._trial(pieces, [TemplateCount(template, mid)])
            logger.debug(
                "Template '%s' x%d: %d unplaced",
                template.name,
                mid,
                len(plan.unplaced_pieces),
            )
            if plan.is_complete:
                best = mid
                high = mid - 1
            else:
                low = mid + 1

        if best is None:
            best = upper_bound + 1
            logger.warning(
                "No count up to %d of template '%s' fits every piece; using %d",
                upper_bound,
                template.name,
                best,
            )

        return [TemplateCount(template, best)]

    def _size_multiple(
        self,
        pieces: Sequence[Piece],
        templates: Sequence[BoardTemplate],
    ) -> list[TemplateCount]:
        """Search board totals upward, trying every split across templates."""
        thickness = thickness_inches(templates[0].thickness)
        average_bf = sum(
            board_feet(t.length, t.width, thickness) for t in templates
        ) / len(templates)
        estimate = max(
            1,
            math.ceil(
                MULTI_TEMPLATE_ALLOWANCE
                * calculate_cut_pieces_board_feet(pieces)
                / average_bf
            ),
        )

        for total in range(1, estimate * 3 + 1):
            best_counts: list[TemplateCount] | None = None
            best_efficiency = 0.0

            for distribution in compositions(total, len(templates)):
                counts = [
                    TemplateCount(template, count)
                    for template, count in zip(templates, distribution)
                ]
                plan = self._trial(pieces, counts)
                if plan.is_complete and (
                    best_counts is None or plan.efficiency > best_efficiency
                ):
                    best_counts = counts
                    best_efficiency = plan.efficiency

            if best_counts is not None:
                logger.debug(
                    "Found a complete split of %d boards at %.1f%% efficiency",
                    total,
                    best_efficiency,
                )
                return [tc for tc in best_counts if tc.count > 0]

        logger.warning(
            "No split of up to %d boards fits every piece; "
            "falling back to template '%s'",
            estimate * 3,
            templates[0].name,
        )
        return self._size_single(pieces, templates[0])

    def _consolidate(self, counts: Sequence[TemplateCount]) -> list[Board]:
        """Merge physically identical boards into records with a quantity."""
        merged: dict[tuple[float, float, str, str | None], list] = {}
        for tc in counts:
            t = tc.template
            key = (t.length, t.width, t.thickness, t.species)
            if key in merged:
                merged[key][1] += tc.count
            else:
                merged[key] = [t, tc.count]

        return [
            Board(
                id=f"stock-{index}",
                name=template.name or "Board",
                length=template.length,
                width=template.width,
                thickness=template.thickness,
                species=template.species,
                quantity=count,
            )
            for index, (template, count) in enumerate(merged.values(), start=1)
        ]


def calculate_stock_needed(
    pieces: Sequence[Piece],
    templates: Sequence[BoardTemplate],
    kerf: float = DEFAULT_KERF,
) -> StockResult:
    """Determine the boards to buy so every piece can be cut."""
    return StockSizingService(kerf=kerf).calculate(pieces, templates)
