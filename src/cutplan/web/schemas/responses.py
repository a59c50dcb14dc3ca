"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from cutplan.web.schemas.common import PieceInstanceSchema, StockBoardSchema


class BoardInstanceSchema(BaseModel):
    """One physical board unit."""

    id: str = Field(..., description="Unique instance id, '{original_id}-{index}'")
    original_id: str = Field(..., description="Id of the board record")
    name: str = Field(..., description="Board name")
    length: float = Field(..., description="Length in inches")
    width: float = Field(..., description="Width in inches")
    thickness: str = Field(..., description="Thickness notation")
    species: str | None = Field(default=None, description="Wood species")


class PlacementSchema(BaseModel):
    """A piece positioned on a board."""

    piece: PieceInstanceSchema
    x: float = Field(..., description="Offset along the board length")
    y: float = Field(..., description="Offset along the board width")
    placed_length: float = Field(..., description="Extent along the board length")
    placed_width: float = Field(..., description="Extent along the board width")
    rotated: bool = Field(..., description="Piece length runs along the board width")


class StripSchema(BaseModel):
    """Placements sharing a y coordinate."""

    y: float
    width: float
    length: float
    piece_ids: list[str]


class AssignmentSchema(BaseModel):
    """A board with the pieces cut from it."""

    board: BoardInstanceSchema
    placements: list[PlacementSchema]
    strips: list[StripSchema]
    board_area: float = Field(..., description="Board area in square inches")
    cuts_area: float = Field(..., description="Placed piece area in square inches")


class CutPlanSchema(BaseModel):
    """Response for cut planning."""

    assignments: list[AssignmentSchema] = Field(default_factory=list)
    efficiency: float = Field(..., description="Cut area over used board area, percent")
    waste: float = Field(..., description="Waste in board feet")
    unplaced_pieces: list[PieceInstanceSchema] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    boards_used: int
    total_stock_boards: int


class TemplateCountSchema(BaseModel):
    """Boards of one template chosen by the solver."""

    name: str
    length: float
    width: float
    thickness: str
    species: str | None = None
    count: int


class CostItemSchema(BaseModel):
    species: str | None = None
    thickness: str
    board_feet: float
    price_per_board_foot: float | None = None
    cost: float | None = None


class MissingPriceSchema(BaseModel):
    species: str | None = None
    thickness: str


class CostEstimateSchema(BaseModel):
    """Estimated purchase cost."""

    total_cost: float = Field(..., description="Sum of every priced item in dollars")
    itemized: list[CostItemSchema] = Field(default_factory=list)
    missing_prices: list[MissingPriceSchema] = Field(default_factory=list)


class StockResultSchema(BaseModel):
    """Response for stock sizing."""

    boards_needed: int = Field(..., description="Total physical boards to buy")
    boards: list[StockBoardSchema] = Field(default_factory=list)
    boards_by_template: list[TemplateCountSchema] = Field(default_factory=list)
    total_board_feet: float
    cut_plan: CutPlanSchema | None = None
    cost_estimate: CostEstimateSchema | None = None


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: list[dict[str, Any]] | None = Field(
        default=None, description="Additional error details"
    )
