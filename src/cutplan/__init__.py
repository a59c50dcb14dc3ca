"""Cut planning for lumber and sheet goods.

Assigns rectangular cut pieces onto stock boards with a MaxRects packer,
and works out how many boards of each purchasable size to buy.

Example:
    >>> from cutplan import Board, Piece, optimize_cuts
    >>> plan = optimize_cuts(
    ...     [Board(id="b", name="Oak", length=96, width=8, thickness="4/4")],
    ...     [Piece(id="s", name="Shelf", length=20, width=3, thickness="4/4", quantity=4)],
    ... )
    >>> plan.is_complete
    True
"""

from cutplan.application.services import (
    CutPlanningService,
    StockSizingService,
    calculate_stock_needed,
    optimize_cuts,
)
from cutplan.domain import (
    Assignment,
    Board,
    BoardInstance,
    BoardTemplate,
    CompatibilityKey,
    CutPlan,
    GrainDirection,
    Piece,
    PieceInstance,
    Placement,
    StockResult,
    Strip,
    TemplateCount,
    parse_thickness,
)
from cutplan.infrastructure.bin_packing import DEFAULT_KERF, MaxRectsPacker, pack_board

__all__ = [
    "Assignment",
    "Board",
    "BoardInstance",
    "BoardTemplate",
    "CompatibilityKey",
    "CutPlan",
    "CutPlanningService",
    "DEFAULT_KERF",
    "GrainDirection",
    "MaxRectsPacker",
    "Piece",
    "PieceInstance",
    "Placement",
    "StockResult",
    "StockSizingService",
    "Strip",
    "TemplateCount",
    "calculate_stock_needed",
    "optimize_cuts",
    "pack_board",
    "parse_thickness",
]
