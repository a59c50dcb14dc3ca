"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field


class PieceInstanceSchema(BaseModel):
    """One physical piece unit."""

    id: str = Field(..., description="Unique instance id, '{original_id}-{index}'")
    original_id: str = Field(..., description="Id of the piece record")
    name: str = Field(..., description="Piece name")
    length: float = Field(..., description="Length in inches")
    width: float = Field(..., description="Width in inches")
    thickness: str = Field(..., description="Thickness notation")
    species: str | None = Field(default=None, description="Wood species")


class StockBoardSchema(BaseModel):
    """A board record with its quantity."""

    id: str = Field(..., description="Board id")
    name: str = Field(..., description="Board name")
    length: float = Field(..., description="Length in inches")
    width: float = Field(..., description="Width in inches")
    thickness: str = Field(..., description="Thickness notation")
    species: str | None = Field(default=None, description="Wood species")
    quantity: int = Field(..., description="Number of identical boards")
    board_feet: float = Field(..., description="Board feet for the whole quantity")
