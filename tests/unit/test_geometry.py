"""Tests for rectangle primitives and epsilon comparisons."""

from __future__ import annotations

import pytest

from cutplan.domain.geometry import EPSILON, Rect, approx_equal, is_at_edge


class TestApproxEqual:
    """Tests for approx_equal and is_at_edge."""

    def test_values_within_epsilon_are_equal(self) -> None:
        assert approx_equal(1.0, 1.0 + EPSILON / 2)

    def test_values_at_epsilon_are_not_equal(self) -> None:
        assert not approx_equal(1.0, 1.0 + EPSILON * 2)

    def test_zero_is_at_edge(self) -> None:
        assert is_at_edge(0.0)
        assert is_at_edge(0.0005)

    def test_kerf_offset_is_not_at_edge(self) -> None:
        assert not is_at_edge(0.125)


class TestRect:
    """Tests for Rect."""

    def test_derived_edges_and_area(self) -> None:
        rect = Rect(2.0, 3.0, 10.0, 4.0)
        assert rect.right == 12.0
        assert rect.top == 7.0
        assert rect.area == 40.0

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Rect(0.0, 0.0, -1.0, 5.0)

    def test_contains_inner_rect(self) -> None:
        outer = Rect(0.0, 0.0, 10.0, 10.0)
        assert outer.contains(Rect(1.0, 1.0, 5.0, 5.0))
        assert outer.contains(outer)

    def test_contains_tolerates_float_noise(self) -> None:
        outer = Rect(0.0, 0.0, 10.0, 10.0)
        assert outer.contains(Rect(0.0, 0.0, 10.0 + EPSILON / 2, 10.0))

    def test_does_not_contain_overhanging_rect(self) -> None:
        outer = Rect(0.0, 0.0, 10.0, 10.0)
        assert not outer.contains(Rect(5.0, 5.0, 6.0, 2.0))

    def test_touching_rects_do_not_overlap(self) -> None:
        left = Rect(0.0, 0.0, 5.0, 5.0)
        right = Rect(5.0, 0.0, 5.0, 5.0)
        assert not left.overlaps(right)
        assert not right.overlaps(left)

    def test_intersecting_rects_overlap(self) -> None:
        a = Rect(0.0, 0.0, 5.0, 5.0)
        b = Rect(4.0, 4.0, 5.0, 5.0)
        assert a.overlaps(b)
        assert b.overlaps(a)
