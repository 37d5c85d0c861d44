"""Leaf-node geometry helpers. No engine imports.

Everything here is axis-aligned: rotation and skew are not modeled.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from iconguard.models.geometry import Bounds


def overlap_area(a: Bounds, b: Bounds) -> float:
    """Area of the intersection of two boxes. Touching edges count as 0."""
    left = max(a.x, b.x)
    right = min(a.x + a.width, b.x + b.width)
    top = max(a.y, b.y)
    bottom = min(a.y + a.height, b.y + b.height)

    if right <= left or bottom <= top:
        return 0
    return (right - left) * (bottom - top)


def union_bounds(boxes: Sequence[Bounds]) -> Bounds | None:
    """Smallest box containing every input box, or None for no input."""
    if not boxes:
        return None
    xs = np.array([[b.x, b.right] for b in boxes], dtype=np.float64)
    ys = np.array([[b.y, b.bottom] for b in boxes], dtype=np.float64)
    min_x = float(np.min(xs[:, 0]))
    min_y = float(np.min(ys[:, 0]))
    return Bounds(
        x=min_x,
        y=min_y,
        width=float(np.max(xs[:, 1])) - min_x,
        height=float(np.max(ys[:, 1])) - min_y,
    )


def _axis_gaps(a: Bounds, b: Bounds) -> tuple[float, float]:
    dx = max(b.x - (a.x + a.width), a.x - (b.x + b.width))
    dy = max(b.y - (a.y + a.height), a.y - (b.y + b.height))
    return dx, dy


def signed_gap(a: Bounds, b: Bounds) -> float:
    """Minimum gap between two boxes; negative when they overlap.

    Overlap on one axis only: the gap along the other axis.
    Overlap on both: the shallower penetration (negative).
    Disjoint on both: Euclidean corner-to-corner distance.
    """
    dx, dy = _axis_gaps(a, b)
    if dx < 0 and dy < 0:
        return max(dx, dy)
    if dy < 0:
        return dx
    if dx < 0:
        return dy
    return math.sqrt(dx * dx + dy * dy)


def gap_matrix(boxes: Sequence[Bounds]) -> NDArray[np.float64]:
    """Pairwise ``signed_gap`` for every box pair. Diagonal is 0.

    O(n^2) in the number of boxes; sized for icons (tens of shapes).
    """
    n = len(boxes)
    if n == 0:
        return np.zeros((0, 0))

    left = np.array([b.x for b in boxes], dtype=np.float64)
    top = np.array([b.y for b in boxes], dtype=np.float64)
    right = left + np.array([b.width for b in boxes], dtype=np.float64)
    bottom = top + np.array([b.height for b in boxes], dtype=np.float64)

    # dx[i][j]: horizontal gap between box i and box j
    dx = np.maximum(left[None, :] - right[:, None], left[:, None] - right[None, :])
    dy = np.maximum(top[None, :] - bottom[:, None], top[:, None] - bottom[None, :])

    both = (dx < 0) & (dy < 0)
    euclid = np.sqrt(np.square(np.maximum(dx, 0)) + np.square(np.maximum(dy, 0)))
    matrix = np.where(
        both,
        np.maximum(dx, dy),
        np.where(dy < 0, dx, np.where(dx < 0, dy, euclid)),
    )
    np.fill_diagonal(matrix, 0.0)
    return matrix


def edge_distances(box: Bounds, container_size: float) -> tuple[float, float, float, float]:
    """(left, top, right, bottom) distances from a square container's edges."""
    return (
        box.x,
        box.y,
        container_size - (box.x + box.width),
        container_size - (box.y + box.height),
    )


def round_half_up(value: float, places: int = 2) -> float:
    """Round half away from negative infinity, like ``Math.round``."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def off_quarter_grid(value: float, tolerance: float, step: float = 0.25) -> bool:
    """True when ``value`` is farther than ``tolerance`` from a multiple of ``step``."""
    nearest = round(value / step) * step
    return abs(value - nearest) > tolerance
