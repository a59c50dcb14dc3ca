"""Value objects for cut planning.

Dimension convention: a board's ``length`` runs along the x axis of its
layout and its ``width`` along the y axis. A piece placed without rotation
has its length along the board length.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .geometry import Rect
from .lumber import board_feet, thickness_inches

UNSPECIFIED_SPECIES = "unspecified"


class GrainDirection(str, Enum):
    """Grain alignment constraint for sheet-goods pieces.

    Attributes:
        ANY: Piece may be placed in either orientation.
        LENGTH: Piece length must run along the board length (no rotation).
        WIDTH: Piece length must run along the board width (always rotated).
    """

    ANY = "any"
    LENGTH = "length"
    WIDTH = "width"


@dataclass(frozen=True)
class CompatibilityKey:
    """Thickness and species pair deciding which boards a piece may use.

    Thickness is compared as the literal notation string, so "4/4" and
    "1.00" are different keys even though they are the same physical
    thickness. A missing species is stored as "unspecified".
    """

    thickness: str
    species: str = UNSPECIFIED_SPECIES

    @classmethod
    def of(cls, thickness: str, species: str | None) -> CompatibilityKey:
        return cls(thickness=thickness, species=species or UNSPECIFIED_SPECIES)

    @property
    def specified_species(self) -> str | None:
        """Species name, or None when unspecified."""
        return None if self.species == UNSPECIFIED_SPECIES else self.species

    @property
    def label(self) -> str:
        """Human-readable form used in warnings, e.g. '8/4 (Walnut)'."""
        if self.specified_species is None:
            return self.thickness
        return f"{self.thickness} ({self.species})"


@dataclass(frozen=True)
class Piece:
    """A required cut piece (possibly several identical units)."""

    id: str
    name: str
    length: float
    width: float
    thickness: str
    species: str | None = None
    quantity: int = 1
    grain_direction: GrainDirection = GrainDirection.ANY

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("Cut piece dimensions must be positive")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def area(self) -> float:
        """Area of a single unit in square inches."""
        return self.length * self.width

    @property
    def board_feet(self) -> float:
        """Board feet of a single unit."""
        return board_feet(self.length, self.width, thickness_inches(self.thickness))


@dataclass(frozen=True)
class Board:
    """Stock board available for cutting (possibly several identical units)."""

    id: str
    name: str
    length: float
    width: float
    thickness: str
    species: str | None = None
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("Board dimensions must be positive")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def thickness_inches(self) -> float:
        return thickness_inches(self.thickness)

    @property
    def area(self) -> float:
        return self.length * self.width

    @property
    def board_feet(self) -> float:
        """Board feet of a single unit."""
        return board_feet(self.length, self.width, self.thickness_inches)

    @property
    def total_board_feet(self) -> float:
        return self.board_feet * self.quantity


@dataclass(frozen=True)
class BoardTemplate:
    """A purchasable board size with no concrete quantity yet."""

    name: str
    length: float
    width: float
    thickness: str
    species: str | None = None

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("Template dimensions must be positive")

    @property
    def board_feet(self) -> float:
        return board_feet(self.length, self.width, thickness_inches(self.thickness))


@dataclass(frozen=True)
class PieceInstance:
    """One physical unit expanded from a Piece record."""

    piece: Piece
    instance_index: int

    @property
    def unique_id(self) -> str:
        return f"{self.piece.id}-{self.instance_index}"

    @property
    def original_id(self) -> str:
        return self.piece.id

    @property
    def name(self) -> str:
        return self.piece.name

    @property
    def length(self) -> float:
        return self.piece.length

    @property
    def width(self) -> float:
        return self.piece.width

    @property
    def thickness(self) -> str:
        return self.piece.thickness

    @property
    def species(self) -> str | None:
        return self.piece.species

    @property
    def grain_direction(self) -> GrainDirection:
        return self.piece.grain_direction

    @property
    def area(self) -> float:
        return self.piece.area


@dataclass(frozen=True)
class BoardInstance:
    """One physical unit expanded from a Board record."""

    board: Board
    instance_index: int

    @property
    def unique_id(self) -> str:
        return f"{self.board.id}-{self.instance_index}"

    @property
    def original_id(self) -> str:
        return self.board.id

    @property
    def name(self) -> str:
        return self.board.name

    @property
    def length(self) -> float:
        return self.board.length

    @property
    def width(self) -> float:
        return self.board.width

    @property
    def thickness(self) -> str:
        return self.board.thickness

    @property
    def species(self) -> str | None:
        return self.board.species


@dataclass(frozen=True)
class Placement:
    """A piece instance positioned on a board.

    Attributes:
        piece: The placed piece instance.
        x: Position along the board length in inches.
        y: Position along the board width in inches.
        placed_length: Extent along the board length as placed.
        placed_width: Extent along the board width as placed.
        rotated: True if the piece length runs along the board width.
    """

    piece: PieceInstance
    x: float
    y: float
    placed_length: float
    placed_width: float
    rotated: bool = False

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def right(self) -> float:
        return self.x + self.placed_length

    @property
    def top(self) -> float:
        return self.y + self.placed_width

    @property
    def area(self) -> float:
        return self.placed_length * self.placed_width

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.placed_length, self.placed_width)


@dataclass(frozen=True)
class Strip:
    """Placements sharing a y coordinate, grouped for visualization."""

    y: float
    width: float
    length: float
    placements: tuple[Placement, ...]


@dataclass(frozen=True)
class Assignment:
    """A board instance with the pieces cut from it."""

    board: BoardInstance
    placements: tuple[Placement, ...]
    strips: tuple[Strip, ...]

    @property
    def board_area(self) -> float:
        return self.board.length * self.board.width

    @property
    def cuts_area(self) -> float:
        return sum(p.area for p in self.placements)

    @property
    def piece_count(self) -> int:
        return len(self.placements)


@dataclass(frozen=True)
class CutPlan:
    """Result of assigning a cut list onto stock boards.

    Attributes:
        assignments: Boards that received at least one piece, in walk order.
        efficiency: Cut area over used stock area, as a percentage.
        waste: Used stock board feet minus cut board feet.
        unplaced_pieces: Piece instances that could not be placed.
        warnings: Human-readable messages about missing stock or misfits.
        boards_used: Number of assignments.
        total_stock_boards: Number of board instances supplied.
    """

    assignments: tuple[Assignment, ...]
    efficiency: float
    waste: float
    unplaced_pieces: tuple[PieceInstance, ...]
    warnings: tuple[str, ...]
    boards_used: int
    total_stock_boards: int

    def __post_init__(self) -> None:
        if self.efficiency < 0 or self.efficiency > 100:
            raise ValueError("Efficiency must be between 0 and 100")
        if self.waste < 0:
            raise ValueError("Waste must be non-negative")

    @property
    def total_board_area(self) -> float:
        return sum(a.board_area for a in self.assignments)

    @property
    def total_cuts_area(self) -> float:
        return sum(a.cuts_area for a in self.assignments)

    @property
    def total_pieces_placed(self) -> int:
        return sum(a.piece_count for a in self.assignments)

    @property
    def is_complete(self) -> bool:
        """True if every piece found a board."""
        return not self.unplaced_pieces


@dataclass(frozen=True)
class TemplateCount:
    """How many boards of a template the stock solver chose."""

    template: BoardTemplate
    count: int


@dataclass(frozen=True)
class StockResult:
    """Boards to buy for a cut list, with the plan that uses them.

    Attributes:
        boards_needed: Total number of physical boards.
        boards: Consolidated board records carrying quantities.
        cut_plan: Plan over ``boards`` and the original pieces, or None
            when there was nothing to plan.
        boards_by_template: Per-template counts chosen by the solver.
    """

    boards_needed: int
    boards: tuple[Board, ...]
    cut_plan: CutPlan | None
    boards_by_template: tuple[TemplateCount, ...]

    @property
    def total_board_feet(self) -> float:
        return sum(b.total_board_feet for b in self.boards)
