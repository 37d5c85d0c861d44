"""Tests for leaf geometry helpers."""

import math

import numpy as np
import pytest

from iconguard.models.geometry import Bounds
from iconguard.utils.geometry import (
    edge_distances,
    gap_matrix,
    off_quarter_grid,
    overlap_area,
    round_half_up,
    signed_gap,
    union_bounds,
)


def _b(x, y, w, h) -> Bounds:
    return Bounds(x=x, y=y, width=w, height=h)


def test_overlap_partial():
    assert overlap_area(_b(0, 0, 10, 10), _b(5, 5, 10, 10)) == 25


def test_overlap_touching_edges_is_zero():
    assert overlap_area(_b(0, 0, 10, 10), _b(10, 0, 10, 10)) == 0
    assert overlap_area(_b(0, 0, 10, 10), _b(0, 10, 10, 10)) == 0


def test_overlap_disjoint_is_zero():
    assert overlap_area(_b(0, 0, 10, 10), _b(50, 50, 5, 5)) == 0


def test_overlap_containment_returns_smaller_area():
    assert overlap_area(_b(0, 0, 100, 100), _b(10, 20, 30, 40)) == 1200


def test_overlap_zero_area_box():
    assert overlap_area(_b(5, 5, 0, 0), _b(0, 0, 10, 10)) == 0


@pytest.mark.parametrize(
    "a,b",
    [
        (_b(0, 0, 10, 10), _b(5, 5, 10, 10)),
        (_b(-20, -5, 15.5, 7.25), _b(-10, -10, 30, 30)),
        (_b(0.1, 0.2, 0.3, 0.4), _b(0.25, 0.25, 1, 1)),
        (_b(0, 0, 1, 1), _b(3, 3, 1, 1)),
    ],
)
def test_overlap_is_commutative(a, b):
    assert overlap_area(a, b) == overlap_area(b, a)


def test_overlap_negative_coordinates():
    assert overlap_area(_b(-10, -10, 10, 10), _b(-5, -5, 10, 10)) == 25


def test_union_bounds():
    u = union_bounds([_b(2, 3, 4, 5), _b(10, 1, 2, 2)])
    assert u == _b(2, 1, 10, 7)


def test_union_bounds_empty():
    assert union_bounds([]) is None


def test_signed_gap_horizontal():
    assert signed_gap(_b(0, 0, 5, 5), _b(5.5, 0, 5, 5)) == pytest.approx(0.5)


def test_signed_gap_vertical():
    assert signed_gap(_b(0, 0, 5, 5), _b(2, 7, 5, 5)) == pytest.approx(2)


def test_signed_gap_diagonal_is_euclidean():
    assert signed_gap(_b(0, 0, 1, 1), _b(4, 5, 1, 1)) == pytest.approx(5)


def test_signed_gap_touching_is_zero():
    assert signed_gap(_b(0, 0, 5, 5), _b(5, 0, 5, 5)) == 0


def test_signed_gap_overlap_is_negative():
    gap = signed_gap(_b(0, 0, 10, 10), _b(8, 9, 10, 10))
    assert gap == pytest.approx(-1)


def test_gap_matrix_matches_scalar():
    boxes = [_b(0, 0, 5, 5), _b(5.5, 0, 5, 5), _b(9.3, 9.4, 2, 2), _b(1, 1, 2, 2)]
    matrix = gap_matrix(boxes)
    assert matrix.shape == (4, 4)
    assert np.all(np.diag(matrix) == 0)
    for i in range(4):
        for j in range(4):
            if i != j:
                assert matrix[i][j] == signed_gap(boxes[i], boxes[j])


def test_gap_matrix_empty():
    assert gap_matrix([]).shape == (0, 0)


def test_edge_distances():
    assert edge_distances(_b(3, 4, 10, 12), 24) == (3, 4, 11, 8)


def test_round_half_up():
    assert round_half_up(2.994) == 2.99
    assert round_half_up(0.125) == 0.13
    assert round_half_up(-0.5, 0) == 0


def test_off_quarter_grid():
    assert not off_quarter_grid(20.0, 0.01)
    assert not off_quarter_grid(10.25, 0.01)
    assert not off_quarter_grid(10.005, 0.01)
    assert off_quarter_grid(10.1, 0.01)
    assert off_quarter_grid(10.33, 0.01)
    assert math.isclose(round_half_up(10.1), 10.1)
