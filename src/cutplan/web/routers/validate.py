"""Project validation endpoints."""

from fastapi import APIRouter

from cutplan.application.config import ConfigError, load_config_from_dict
from cutplan.web.schemas.requests import ConfigValidateRequest
from cutplan.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a project configuration without planning it.

    Returns:
        Validation result; field errors are listed rather than raised.
    """
    try:
        load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"path": d.get("path"), "message": d.get("message")}
                for d in e.details
            ],
        )

    return ValidationResultSchema(is_valid=True)
