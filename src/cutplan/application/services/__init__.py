"""Application services for cut planning and stock sizing."""

from .cut_planner import CutPlanningService, optimize_cuts
from .stock_sizing import StockSizingService, calculate_stock_needed, compositions

__all__ = [
    "CutPlanningService",
    "StockSizingService",
    "calculate_stock_needed",
    "compositions",
    "optimize_cuts",
]
