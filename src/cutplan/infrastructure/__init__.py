"""Infrastructure layer - packing engine, pricing and formatters."""

from .bin_packing import (
    DEFAULT_KERF,
    MIN_USEFUL_REMAINDER,
    MaxRectsPacker,
    build_strips,
    pack_board,
)
from .formatters import (
    CutPlanFormatter,
    StockReportFormatter,
    cost_estimate_to_dict,
    plan_to_dict,
    stock_result_to_dict,
)
from .pricing import (
    LUMBER_PRICES,
    SHEET_GOODS_PRICES,
    BoardCost,
    CostEstimate,
    MissingPrice,
    SheetPricing,
    SpeciesPricing,
    available_species,
    calculate_board_cost,
    estimate_cost,
    get_price_per_board_foot,
    get_sheet_price,
)

__all__ = [
    # Packing
    "DEFAULT_KERF",
    "MIN_USEFUL_REMAINDER",
    "MaxRectsPacker",
    "build_strips",
    "pack_board",
    # Formatters
    "CutPlanFormatter",
    "StockReportFormatter",
    "cost_estimate_to_dict",
    "plan_to_dict",
    "stock_result_to_dict",
    # Pricing
    "LUMBER_PRICES",
    "SHEET_GOODS_PRICES",
    "BoardCost",
    "CostEstimate",
    "MissingPrice",
    "SheetPricing",
    "SpeciesPricing",
    "available_species",
    "calculate_board_cost",
    "estimate_cost",
    "get_price_per_board_foot",
    "get_sheet_price",
]
