"""Domain layer - value objects, geometry and grouping."""

from .geometry import EPSILON, Rect, approx_equal, is_at_edge
from .grouping import compatibility_key, expand_boards, expand_pieces, group_by_key
from .lumber import (
    board_feet,
    calculate_cut_pieces_board_feet,
    cut_piece_thicknesses,
    parse_thickness,
    stock_thicknesses,
    thickness_inches,
)
from .value_objects import (
    UNSPECIFIED_SPECIES,
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
)

__all__ = [
    "Assignment",
    "Board",
    "BoardInstance",
    "BoardTemplate",
    "CompatibilityKey",
    "CutPlan",
    "EPSILON",
    "GrainDirection",
    "Piece",
    "PieceInstance",
    "Placement",
    "Rect",
    "StockResult",
    "Strip",
    "TemplateCount",
    "UNSPECIFIED_SPECIES",
    "approx_equal",
    "board_feet",
    "calculate_cut_pieces_board_feet",
    "compatibility_key",
    "cut_piece_thicknesses",
    "expand_boards",
    "expand_pieces",
    "group_by_key",
    "is_at_edge",
    "parse_thickness",
    "stock_thicknesses",
    "thickness_inches",
]
