"""Lumber measurement helpers: thickness notation and board feet."""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .value_objects import Board, Piece

_FRACTION_PATTERN = re.compile(r"^(\d+)/(\d+)$")

# Board-feet math treats unparseable notation as one inch thick.
FALLBACK_THICKNESS = 1.0


def parse_thickness(notation: str) -> float | None:
    """Parse a thickness notation into inches.

    Accepts fractional lumber notation ("4/4", "8/4", "3/4") or a plain
    decimal ("0.75"). Returns None when the notation cannot be parsed or
    does not describe a positive thickness; callers treat that as a
    validation failure.

    Examples:
        >>> parse_thickness("8/4")
        2.0
        >>> parse_thickness("0.75")
        0.75
        >>> parse_thickness("thick") is None
        True
    """
    notation = notation.strip()
    match = _FRACTION_PATTERN.match(notation)
    if match:
        numerator, denominator = int(match.group(1)), int(match.group(2))
        if numerator == 0 or denominator == 0:
            return None
        return numerator / denominator
    try:
        value = float(notation)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def thickness_inches(notation: str) -> float:
    """Thickness in inches for board-feet math, with the 1" fallback."""
    parsed = parse_thickness(notation)
    return parsed if parsed else FALLBACK_THICKNESS


def board_feet(length: float, width: float, thickness: float) -> float:
    """Volume in board feet: (thickness x width x length) / 144."""
    return (length * width * thickness) / 144


def calculate_cut_pieces_board_feet(pieces: Iterable[Piece]) -> float:
    """Total board feet of a cut list, counting every unit of quantity."""
    return sum(
        board_feet(p.length, p.width, thickness_inches(p.thickness)) * p.quantity
        for p in pieces
    )


def stock_thicknesses(boards: Iterable[Board]) -> list[str]:
    """Unique thickness notations of the stock, in first-seen order."""
    return list(dict.fromkeys(b.thickness for b in boards))


def cut_piece_thicknesses(pieces: Iterable[Piece]) -> list[str]:
    """Unique thickness notations of the cut list, in first-seen order."""
    return list(dict.fromkeys(p.thickness for p in pieces))
