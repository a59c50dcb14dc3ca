"""Application layer - use cases and orchestration."""

from .services import (
    CutPlanningService,
    StockSizingService,
    calculate_stock_needed,
    optimize_cuts,
)

__all__ = [
    "CutPlanningService",
    "StockSizingService",
    "calculate_stock_needed",
    "optimize_cuts",
]
