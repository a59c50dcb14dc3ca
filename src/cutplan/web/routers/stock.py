"""Stock sizing endpoints."""

from fastapi import APIRouter

from cutplan.application import StockSizingService
from cutplan.application.config import (
    ProjectConfiguration,
    config_to_pieces,
    config_to_templates,
    load_config_from_dict,
)
from cutplan.domain import StockResult
from cutplan.infrastructure import estimate_cost, stock_result_to_dict
from cutplan.web.schemas.requests import ProjectRequest, StockRequest
from cutplan.web.schemas.responses import ErrorResponseSchema, StockResultSchema

router = APIRouter(prefix="/stock", tags=["stock"])


def _result_to_schema(result: StockResult, include_prices: bool) -> StockResultSchema:
    estimate = estimate_cost(result.boards) if include_prices else None
    return StockResultSchema.model_validate(stock_result_to_dict(result, estimate))


@router.post("", response_model=StockResultSchema)
def calculate_stock(request: StockRequest) -> StockResultSchema:
    """Size the boards to buy from the supplied templates."""
    project = ProjectConfiguration(
        schema_version="1.0",
        pieces=request.pieces,
        templates=request.templates,
    )
    result = StockSizingService(kerf=request.kerf).calculate(
        config_to_pieces(project), config_to_templates(project)
    )
    return _result_to_schema(result, request.include_prices)


@router.post(
    "/config",
    response_model=StockResultSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
def calculate_stock_from_config(
    request: ProjectRequest,
    include_prices: bool = False,
) -> StockResultSchema:
    """Size stock for a full project file, honoring its project quantity.

    Raises:
        ConfigError: If the project fails validation (mapped to 422).
    """
    config = load_config_from_dict(request.config)
    result = StockSizingService(kerf=config.kerf).calculate(
        config_to_pieces(config), config_to_templates(config)
    )
    return _result_to_schema(result, include_prices)
