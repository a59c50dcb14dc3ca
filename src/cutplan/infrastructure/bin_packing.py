"""Single-board rectangle packing for lumber and sheet goods.

The packer places as many pieces as possible on one board using a Best
Short-Side-Fit heuristic over a list of free rectangles. Free rectangles
may overlap one another; after each placement, rectangles wholly inside
another are pruned and flush rectangles with equal spans are merged.

Kerf is charged in two places: around every placed piece, so that any two
pieces are separated by at least one saw cut, and along the left and bottom
board edges to model the material lost jointing a rough edge before the
first cut.

The margin cleared around a placed piece is symmetric: one kerf on every
side, clamped at the board origin.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from cutplan.domain.geometry import EPSILON, Rect, approx_equal, is_at_edge
from cutplan.domain.value_objects import (
    Board,
    BoardInstance,
    GrainDirection,
    PieceInstance,
    Placement,
    Strip,
)

logger = logging.getLogger(__name__)

DEFAULT_KERF = 0.125

# Remainders thinner than this are scrap and are not tracked as free space.
MIN_USEFUL_REMAINDER = 1.0


@dataclass(frozen=True)
class _Fit:
    """Candidate location for a piece inside one free rectangle."""

    rect: Rect
    rotated: bool
    placed_length: float
    placed_width: float
    x_offset: float
    y_offset: float
    score: tuple[float, float, float, float]


def _score_less(a: Sequence[float], b: Sequence[float]) -> bool:
    """Lexicographic comparison treating values within EPSILON as equal."""
    for left, right in zip(a, b):
        if approx_equal(left, right):
            continue
        return left < right
    return False


class MaxRectsPacker:
    """Best Short-Side-Fit packer for a single board.

    Pieces are sorted largest first and each one goes to the free rectangle
    and orientation that leave the smallest short-side gap, then the
    smallest long-side gap, then the lowest and leftmost position.

    Attributes:
        kerf: Saw blade kerf width in inches.
        min_remainder: Smallest free-rectangle dimension worth keeping.
    """

    def __init__(
        self,
        kerf: float = DEFAULT_KERF,
        min_remainder: float = MIN_USEFUL_REMAINDER,
    ) -> None:
        if kerf < 0:
            raise ValueError("Kerf must be non-negative")
        self.kerf = kerf
        self.min_remainder = min_remainder

    def pack(
        self,
        board: Board | BoardInstance,
        pieces: Sequence[PieceInstance],
    ) -> tuple[list[Placement], list[PieceInstance]]:
        """Place as many pieces as possible on the board.

        Args:
            board: Board (or board instance) to cut from.
            pieces: Piece instances compatible with the board.

        Returns:
            Tuple of (placements in placement order, unplaced pieces in
            input order). Together they partition ``pieces``.
        """
        free_rects = [Rect(0.0, 0.0, board.length, board.width)]
        placements: list[Placement] = []
        placed_positions: set[int] = set()

        for position, piece in self._sort_by_area(pieces):
            fit = self._find_best_fit(piece, free_rects)
            if fit is None:
                logger.debug(
                    "Piece '%s' (%sx%s) does not fit on board '%s'",
                    piece.name,
                    piece.length,
                    piece.width,
                    board.name,
                )
                continue

            placement = Placement(
                piece=piece,
                x=fit.rect.x + fit.x_offset,
                y=fit.rect.y + fit.y_offset,
                placed_length=fit.placed_length,
                placed_width=fit.placed_width,
                rotated=fit.rotated,
            )
            placements.append(placement)
            placed_positions.add(position)

            if fit.rotated:
                logger.debug(
                    "Piece '%s' placed rotated at (%s, %s)",
                    piece.name,
                    placement.x,
                    placement.y,
                )

            free_rects = self._clip_free_rects(free_rects, self._cleared_region(placement))
            free_rects = self._prune_contained(free_rects)
            free_rects = self._merge_flush(free_rects)
            free_rects.sort(key=lambda r: (r.y, r.x))

        # Tracked by position so pieces sharing an id are never lost.
        unplaced = [p for i, p in enumerate(pieces) if i not in placed_positions]

        logger.debug(
            "Board '%s': placed %d of %d pieces, %d free rectangles left",
            board.name,
            len(placements),
            len(pieces),
            len(free_rects),
        )
        return placements, unplaced

    def _sort_by_area(
        self, pieces: Sequence[PieceInstance]
    ) -> list[tuple[int, PieceInstance]]:
        """Pair pieces with their input position, largest area first, then longest side."""
        return sorted(
            enumerate(pieces),
            key=lambda item: (item[1].length * item[1].width, max(item[1].length, item[1].width)),
            reverse=True,
        )

    def _orientations(self, piece: PieceInstance) -> tuple[bool, ...]:
        """Rotation flags allowed by the piece's grain direction."""
        if piece.grain_direction == GrainDirection.LENGTH:
            return (False,)
        if piece.grain_direction == GrainDirection.WIDTH:
            return (True,)
        return (False, True)

    def _find_best_fit(
        self,
        piece: PieceInstance,
        free_rects: list[Rect],
    ) -> _Fit | None:
        """Pick the free rectangle and orientation with the best short-side fit.

        A rectangle on the left or bottom board edge loses ``kerf`` of usable
        space on that side for jointing.
        """
        best: _Fit | None = None

        for rect in free_rects:
            x_offset = self.kerf if is_at_edge(rect.x) else 0.0
            y_offset = self.kerf if is_at_edge(rect.y) else 0.0
            usable_width = rect.width - x_offset
            usable_height = rect.height - y_offset

            for rotated in self._orientations(piece):
                if rotated:
                    placed_length, placed_width = piece.width, piece.length
                else:
                    placed_length, placed_width = piece.length, piece.width

                if (
                    placed_length > usable_width + EPSILON
                    or placed_width > usable_height + EPSILON
                ):
                    continue

                leftover_x = usable_width - placed_length
                leftover_y = usable_height - placed_width
                score = (
                    min(leftover_x, leftover_y),
                    max(leftover_x, leftover_y),
                    rect.y,
                    rect.x,
                )
                if best is None or _score_less(score, best.score):
                    best = _Fit(
                        rect=rect,
                        rotated=rotated,
                        placed_length=placed_length,
                        placed_width=placed_width,
                        x_offset=x_offset,
                        y_offset=y_offset,
                        score=score,
                    )

        return best

    def _cleared_region(self, placement: Placement) -> Rect:
        """Region no later piece may enter: the piece plus one kerf per side.

        The leading margin stops at the board origin, where the edge-kerf
        offset already reserves the jointing loss.
        """
        left = max(0.0, placement.x - self.kerf)
        bottom = max(0.0, placement.y - self.kerf)
        return Rect(
            left,
            bottom,
            placement.right + self.kerf - left,
            placement.top + self.kerf - bottom,
        )

    def _clip_free_rects(self, free_rects: list[Rect], used: Rect) -> list[Rect]:
        """Remove the used region from every free rectangle it overlaps."""
        clipped: list[Rect] = []
        for rect in free_rects:
            if rect.overlaps(used):
                clipped.extend(self._split(rect, used))
            else:
                clipped.append(rect)
        return clipped

    def _split(self, rect: Rect, used: Rect) -> list[Rect]:
        """Split a free rectangle around a used region.

        Left and right remainders span the full height of ``rect``; bottom
        and top remainders span only the columns shared with ``used``, so
        the remainders never overlap each other.
        """
        remainders: list[Rect] = []

        if used.x > rect.x + EPSILON:
            remainders.append(Rect(rect.x, rect.y, used.x - rect.x, rect.height))
        if used.right < rect.right - EPSILON:
            remainders.append(
                Rect(used.right, rect.y, rect.right - used.right, rect.height)
            )

        span_start = max(rect.x, used.x)
        span_end = min(rect.right, used.right)
        span = span_end - span_start

        if used.y > rect.y + EPSILON:
            remainders.append(Rect(span_start, rect.y, span, used.y - rect.y))
        if used.top < rect.top - EPSILON:
            remainders.append(Rect(span_start, used.top, span, rect.top - used.top))

        return [r for r in remainders if self._is_useful(r)]

    def _is_useful(self, rect: Rect) -> bool:
        limit = self.min_remainder - EPSILON
        return rect.width >= limit and rect.height >= limit

    def _prune_contained(self, free_rects: list[Rect]) -> list[Rect]:
        """Drop rectangles wholly contained in another.

        Of two identical rectangles, the earlier one is kept.
        """
        kept: list[Rect] = []
        for i, rect in enumerate(free_rects):
            contained = False
            for j, other in enumerate(free_rects):
                if i == j or not other.contains(rect):
                    continue
                if j > i and rect.contains(other):
                    continue
                contained = True
                break
            if not contained:
                kept.append(rect)
        return kept

    def _merge_flush(self, free_rects: list[Rect]) -> list[Rect]:
        """Merge pairs sharing a full edge until no merge applies."""
        rects = list(free_rects)
        merged = True
        while merged:
            merged = False
            for i in range(len(rects)):
                for j in range(i + 1, len(rects)):
                    combined = _merge_pair(rects[i], rects[j])
                    if combined is not None:
                        rects[i] = combined
                        del rects[j]
                        merged = True
                        break
                if merged:
                    break
        return rects


def _merge_pair(a: Rect, b: Rect) -> Rect | None:
    """Combine two flush rectangles with an equal span, or return None."""
    if approx_equal(a.y, b.y) and approx_equal(a.height, b.height):
        if approx_equal(a.right, b.x):
            return Rect(a.x, a.y, a.width + b.width, a.height)
        if approx_equal(b.right, a.x):
            return Rect(b.x, a.y, a.width + b.width, a.height)
    if approx_equal(a.x, b.x) and approx_equal(a.width, b.width):
        if approx_equal(a.top, b.y):
            return Rect(a.x, a.y, a.width, a.height + b.height)
        if approx_equal(b.top, a.y):
            return Rect(a.x, b.y, a.width, a.height + b.height)
    return None


def pack_board(
    board: Board | BoardInstance,
    pieces: Sequence[PieceInstance],
    kerf: float = DEFAULT_KERF,
) -> tuple[list[Placement], list[PieceInstance]]:
    """Pack compatible piece instances onto a single board.

    Returns:
        Tuple of (placements, unplaced pieces).
    """
    return MaxRectsPacker(kerf=kerf).pack(board, pieces)


def build_strips(placements: Sequence[Placement], board_length: float) -> tuple[Strip, ...]:
    """Group placements sharing a y coordinate into strips.

    Strips exist for drawing cut diagrams; they carry no packing meaning.
    """
    by_y: dict[float, list[Placement]] = {}
    for placement in placements:
        by_y.setdefault(round(placement.y, 3), []).append(placement)

    strips = [
        Strip(
            y=group[0].y,
            width=max(p.placed_width for p in group),
            length=board_length,
            placements=tuple(group),
        )
        for group in by_y.values()
    ]
    strips.sort(key=lambda s: s.y)
    return tuple(strips)
