"""Adapters from ProjectConfiguration models to domain value objects."""

from typing import Sequence

from cutplan.application.config.schema import ProjectConfiguration
from cutplan.domain.value_objects import Board, BoardTemplate, Piece


def _identifiers(values: Sequence[str | int | None], prefix: str) -> list[str]:
    """Resolve configured ids, generating ``prefix-N`` for missing ones.

    A generated id starts from the item's 1-based position and counts up
    past any id already in use.
    """
    taken = {str(v) for v in values if v is not None}
    resolved: list[str] = []
    for index, value in enumerate(values, start=1):
        if value is not None:
            resolved.append(str(value))
            continue
        n = index
        while f"{prefix}-{n}" in taken:
            n += 1
        generated = f"{prefix}-{n}"
        taken.add(generated)
        resolved.append(generated)
    return resolved


def config_to_boards(config: ProjectConfiguration) -> list[Board]:
    """Convert configured stock boards to domain Boards.

    Boards without an id get ``board-N`` (1-based position in the file,
    bumped when that id is taken).
    """
    ids = _identifiers([b.id for b in config.boards], "board")
    return [
        Board(
            id=board_id,
            name=b.name,
            length=b.length,
            width=b.width,
            thickness=b.thickness,
            species=b.species,
            quantity=b.quantity,
        )
        for board_id, b in zip(ids, config.boards)
    ]


def config_to_pieces(config: ProjectConfiguration) -> list[Piece]:
    """Convert configured pieces to domain Pieces.

    Quantities are multiplied by the project quantity. Missing ids are
    generated as for boards, with a ``piece-`` prefix.
    """
    ids = _identifiers([p.id for p in config.pieces], "piece")
    return [
        Piece(
            id=piece_id,
            name=p.name,
            length=p.length,
            width=p.width,
            thickness=p.thickness,
            species=p.species,
            quantity=p.quantity * config.project_quantity,
            grain_direction=p.grain_direction,
        )
        for piece_id, p in zip(ids, config.pieces)
    ]


def config_to_templates(config: ProjectConfiguration) -> list[BoardTemplate]:
    """Convert configured purchasable sizes to BoardTemplates."""
    return [
        BoardTemplate(
            name=t.name,
            length=t.length,
            width=t.width,
            thickness=t.thickness,
            species=t.species,
        )
        for t in config.templates
    ]
