"""Pydantic configuration schema models for cut planning projects.

A project file lists the stock boards on hand, the pieces to cut, and
optionally the board templates that can be purchased. It uses Pydantic v2
for validation and serialization.

The GrainDirection enum is reused from the domain layer to ensure
consistency and avoid duplication.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cutplan.domain.lumber import parse_thickness
from cutplan.domain.value_objects import GrainDirection

# Supported schema versions for project files
# Version 1.0: Boards, pieces, templates and kerf
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


def _check_thickness(value: str) -> str:
    value = value.strip()
    if parse_thickness(value) is None:
        raise ValueError(
            f"Unrecognized thickness '{value}'; use lumber notation such as "
            "'4/4' or a decimal such as '0.75'"
        )
    return value


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class _StockItemConfig(BaseModel):
    """Fields shared by boards, pieces and templates."""

    model_config = ConfigDict(extra="forbid")

    length: float = Field(..., gt=0, description="Length in inches")
    width: float = Field(..., gt=0, description="Width in inches")
    thickness: str = Field(
        ..., min_length=1, description="Thickness notation, e.g. '4/4' or '0.75'"
    )
    species: str | None = Field(
        default=None, description="Wood species; omit for unspecified"
    )

    @field_validator("thickness")
    @classmethod
    def validate_thickness(cls, v: str) -> str:
        return _check_thickness(v)

    @field_validator("species")
    @classmethod
    def normalize_species(cls, v: str | None) -> str | None:
        return _blank_to_none(v)


class BoardConfig(_StockItemConfig):
    """A stock board on hand.

    Attributes:
        id: Optional identifier; generated when omitted.
        name: Display name.
        quantity: Number of identical boards.
    """

    id: str | int | None = Field(default=None, description="Board identifier")
    name: str = Field(default="Board", description="Display name")
    quantity: int = Field(default=1, ge=1, description="Number of identical boards")


class PieceConfig(_StockItemConfig):
    """A piece to cut.

    Attributes:
        id: Optional identifier; generated when omitted.
        name: Display name.
        quantity: Number of identical pieces.
        grain_direction: Sheet-goods grain constraint.
    """

    id: str | int | None = Field(default=None, description="Piece identifier")
    name: str = Field(default="Piece", description="Display name")
    quantity: int = Field(default=1, ge=1, description="Number of identical pieces")
    grain_direction: GrainDirection = Field(
        default=GrainDirection.ANY,
        description="Grain constraint: any, length or width",
    )


class TemplateConfig(_StockItemConfig):
    """A purchasable board size for stock sizing."""

    name: str = Field(default="Board", description="Display name")


class ProjectConfiguration(BaseModel):
    """Root configuration model for a cut planning project.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        name: Optional project name
        kerf: Saw kerf width in inches
        project_quantity: Number of copies of the project to build; piece
            quantities are multiplied by it
        boards: Stock boards on hand
        pieces: Pieces to cut
        templates: Purchasable board sizes for stock sizing

    Example:
        >>> config = ProjectConfiguration(
        ...     schema_version="1.0",
        ...     pieces=[PieceConfig(length=20, width=3, thickness="4/4")],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    name: str | None = Field(default=None, description="Project name")
    kerf: float = Field(default=0.125, gt=0, le=0.5, description="Saw kerf width in inches")
    project_quantity: int = Field(
        default=1, ge=1, description="Multiplier applied to piece quantities"
    )
    boards: list[BoardConfig] = Field(default_factory=list)
    pieces: list[PieceConfig] = Field(default_factory=list)
    templates: list[TemplateConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "ProjectConfiguration":
        """Reject boards or pieces whose ids collide.

        Ids are compared as text, so ``1`` and ``"1"`` are the same id.
        """
        for kind, items in (("board", self.boards), ("piece", self.pieces)):
            seen: set[str] = set()
            for item in items:
                if item.id is None:
                    continue
                key = str(item.id)
                if key in seen:
                    raise ValueError(f"Duplicate {kind} id '{key}'")
                seen.add(key)
        return self
