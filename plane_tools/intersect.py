"""Line segment intersection."""

from __future__ import annotations

from itertools import combinations
from typing import List, Optional, Tuple

import numpy as np

from .graph import Graph
from .point import PlanarPoint

Segment = Tuple[PlanarPoint, PlanarPoint]
Crossing = Tuple[Segment, Segment, PlanarPoint]


def _vec(p: PlanarPoint) -> np.ndarray:
    return np.array((p.x, p.y), dtype=np.float64)


def _cross_2d(a: np.ndarray, b: np.ndarray) -> np.float64:
    return a[0] * b[1] - a[1] * b[0]


def intersect_point(segment1: Segment, segment2: Segment) -> Optional[PlanarPoint]:
    """Return the point where two segments meet, or ``None``.

    With ``segment1 = p1 + alpha * (p2 - p1)`` and
    ``segment2 = q1 + gamma * (q2 - q1)`` both parameters are solved from
    cross-product ratios and must lie in ``[0, 1]``, endpoints included.
    Parallel and collinear segments never intersect, and neither do pairs
    whose arithmetic leaves the finite range.
    """

    p1, p2 = _vec(segment1[0]), _vec(segment1[1])
    q1, q2 = _vec(segment2[0]), _vec(segment2[1])

    a = p2 - p1
    b = q2 - q1
    c = p1 - q1

    with np.errstate(all="ignore"):
        den = _cross_2d(b, a)
        if den == 0.0 or not np.isfinite(den):
            return None

        alpha = _cross_2d(c, b) / den
        if not 0.0 <= alpha <= 1.0:
            return None

        gamma = _cross_2d(c, a) / den
        if not 0.0 <= gamma <= 1.0:
            return None

        point = p1 + a * alpha
    if not np.all(np.isfinite(point)):
        return None
    return PlanarPoint(float(point[0]), float(point[1]))


def find_crossings(graph: Graph[PlanarPoint]) -> List[Crossing]:
    """List every pair of edges that meet away from a shared endpoint.

    Quadratic in the number of edges; meant for checking results.
    """

    crossings: List[Crossing] = []
    for e1, e2 in combinations(graph.edges(), 2):
        if set(e1) & set(e2):
            continue
        point = intersect_point(e1, e2)
        if point is not None:
            crossings.append((e1, e2, point))
    return crossings


__all__ = ["Crossing", "Segment", "find_crossings", "intersect_point"]
