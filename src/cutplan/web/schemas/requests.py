"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from cutplan.application.config import BoardConfig, PieceConfig, TemplateConfig


class OptimizeRequest(BaseModel):
    """Request for planning pieces onto stock boards."""

    boards: list[BoardConfig] = Field(..., description="Stock boards on hand")
    pieces: list[PieceConfig] = Field(..., description="Pieces to cut")
    kerf: float = Field(default=0.125, ge=0, le=0.5, description="Saw kerf in inches")


class StockRequest(BaseModel):
    """Request for sizing the stock to buy."""

    pieces: list[PieceConfig] = Field(..., description="Pieces to cut")
    templates: list[TemplateConfig] = Field(..., description="Purchasable board sizes")
    kerf: float = Field(default=0.125, ge=0, le=0.5, description="Saw kerf in inches")
    include_prices: bool = Field(default=False, description="Add a cost estimate")


class ProjectRequest(BaseModel):
    """Request carrying a full project file."""

    config: dict[str, Any] = Field(..., description="Project configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a project configuration."""

    config: dict[str, Any] = Field(..., description="Project configuration JSON")
