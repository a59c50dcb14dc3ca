"""Pydantic schemas for the REST API."""

from cutplan.web.schemas.common import PieceInstanceSchema, StockBoardSchema
from cutplan.web.schemas.requests import (
    ConfigValidateRequest,
    OptimizeRequest,
    ProjectRequest,
    StockRequest,
)
from cutplan.web.schemas.responses import (
    AssignmentSchema,
    BoardInstanceSchema,
    CostEstimateSchema,
    CostItemSchema,
    CutPlanSchema,
    ErrorResponseSchema,
    MissingPriceSchema,
    PlacementSchema,
    StockResultSchema,
    StripSchema,
    TemplateCountSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "PieceInstanceSchema",
    "StockBoardSchema",
    # Requests
    "ConfigValidateRequest",
    "OptimizeRequest",
    "ProjectRequest",
    "StockRequest",
    # Responses
    "AssignmentSchema",
    "BoardInstanceSchema",
    "CostEstimateSchema",
    "CostItemSchema",
    "CutPlanSchema",
    "ErrorResponseSchema",
    "MissingPriceSchema",
    "PlacementSchema",
    "StockResultSchema",
    "StripSchema",
    "TemplateCountSchema",
    "ValidationResultSchema",
]
