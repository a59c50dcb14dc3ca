"""Axis-aligned rectangle primitives shared by the packing components.

All values are inches. Comparisons go through a fixed epsilon so that
accumulated floating-point error from kerf arithmetic never decides whether
a piece fits or whether two free rectangles touch.
"""

from __future__ import annotations

from dataclasses import dataclass

EPSILON = 0.001


def approx_equal(a: float, b: float) -> bool:
    """Return True if two scalars differ by less than EPSILON."""
    return abs(a - b) < EPSILON


def is_at_edge(value: float) -> bool:
    """Return True if a coordinate lies on the board origin edge."""
    return value < EPSILON


@dataclass(frozen=True)
class Rect:
    """Rectangle anchored at its bottom-left corner.

    Attributes:
        x: Position along the board length.
        y: Position along the board width.
        width: Extent along the board length.
        height: Extent along the board width.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Rectangle dimensions must be non-negative")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains(self, other: Rect) -> bool:
        """Return True if ``other`` lies wholly inside this rectangle."""
        return (
            other.x >= self.x - EPSILON
            and other.y >= self.y - EPSILON
            and other.right <= self.right + EPSILON
            and other.top <= self.top + EPSILON
        )

    def overlaps(self, other: Rect) -> bool:
        """Return True if the interiors intersect by more than EPSILON."""
        return (
            other.x < self.right - EPSILON
            and other.right > self.x + EPSILON
            and other.y < self.top - EPSILON
            and other.top > self.y + EPSILON
        )
