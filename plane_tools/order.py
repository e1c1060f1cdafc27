from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, List, Sequence

from .point import PlanarPoint, compare_height

PointComparator = Callable[[PlanarPoint, PlanarPoint], int]


def ascending_order(points: Sequence[PlanarPoint], cmp: PointComparator = compare_height) -> List[int]:
    """Return indices of ``points`` sorted from lowest to highest by ``cmp``."""

    key = cmp_to_key(cmp)
    return sorted(range(len(points)), key=lambda idx: key(points[idx]))


def descending_order(points: Sequence[PlanarPoint], cmp: PointComparator = compare_height) -> List[int]:
    """Return indices of ``points`` sorted from highest to lowest by ``cmp``."""

    key = cmp_to_key(cmp)
    return sorted(range(len(points)), key=lambda idx: key(points[idx]), reverse=True)


__all__ = ["PointComparator", "ascending_order", "descending_order"]
