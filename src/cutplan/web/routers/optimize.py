"""Cut planning endpoints."""

from fastapi import APIRouter

from cutplan.application import CutPlanningService
from cutplan.application.config import (
    ProjectConfiguration,
    config_to_boards,
    config_to_pieces,
    load_config_from_dict,
)
from cutplan.domain import CutPlan
from cutplan.infrastructure import plan_to_dict
from cutplan.web.schemas.requests import OptimizeRequest, ProjectRequest
from cutplan.web.schemas.responses import CutPlanSchema, ErrorResponseSchema

router = APIRouter(prefix="/optimize", tags=["optimize"])


def _plan_to_schema(plan: CutPlan) -> CutPlanSchema:
    return CutPlanSchema.model_validate(plan_to_dict(plan))


@router.post("", response_model=CutPlanSchema)
def plan_cuts(request: OptimizeRequest) -> CutPlanSchema:
    """Plan pieces onto the supplied stock boards.

    Pieces that cannot be placed are listed in ``unplaced_pieces`` with a
    warning; the response is still 200.
    """
    project = ProjectConfiguration(
        schema_version="1.0",
        boards=request.boards,
        pieces=request.pieces,
    )
    plan = CutPlanningService(kerf=request.kerf).optimize(
        config_to_boards(project), config_to_pieces(project)
    )
    return _plan_to_schema(plan)


@router.post(
    "/config",
    response_model=CutPlanSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
def optimize_from_config(request: ProjectRequest) -> CutPlanSchema:
    """Plan a full project file.

    Raises:
        ConfigError: If the project fails validation (mapped to 422).
    """
    config = load_config_from_dict(request.config)
    plan = CutPlanningService(kerf=config.kerf).optimize(
        config_to_boards(config), config_to_pieces(config)
    )
    return _plan_to_schema(plan)
