"""Point identity and height ordering used by the planar sweep."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple


class InvalidOrderingError(ValueError):
    """Raised when points with NaN coordinates are ordered."""


@dataclass(frozen=True, eq=False)
class PlanarPoint:
    """Immutable 2D point compared by height.

    Equality is exact on both coordinates. Ordering is ``y`` first and ``x``
    at equal height, so among points on one horizontal line the one further
    right is the greater.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        # -0.0 == 0.0, keep the hash consistent with that
        object.__setattr__(self, "x", float(self.x) + 0.0)
        object.__setattr__(self, "y", float(self.y) + 0.0)

    def _ordering_key(self) -> Tuple[float, float]:
        if math.isnan(self.x) or math.isnan(self.y):
            raise InvalidOrderingError(f"can't order {self!r}, some components are NaN")
        return self.y, self.x

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlanarPoint):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __lt__(self, other: PlanarPoint) -> bool:
        if not isinstance(other, PlanarPoint):
            return NotImplemented
        return self._ordering_key() < other._ordering_key()

    def __le__(self, other: PlanarPoint) -> bool:
        if not isinstance(other, PlanarPoint):
            return NotImplemented
        return self._ordering_key() <= other._ordering_key()

    def __gt__(self, other: PlanarPoint) -> bool:
        if not isinstance(other, PlanarPoint):
            return NotImplemented
        return self._ordering_key() > other._ordering_key()

    def __ge__(self, other: PlanarPoint) -> bool:
        if not isinstance(other, PlanarPoint):
            return NotImplemented
        return self._ordering_key() >= other._ordering_key()

    def __add__(self, other: PlanarPoint) -> PlanarPoint:
        if not isinstance(other, PlanarPoint):
            return NotImplemented
        return PlanarPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: PlanarPoint) -> PlanarPoint:
        if not isinstance(other, PlanarPoint):
            return NotImplemented
        return PlanarPoint(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> PlanarPoint:
        if isinstance(factor, PlanarPoint):
            return NotImplemented
        return PlanarPoint(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)


def compare_height(left: PlanarPoint, right: PlanarPoint) -> int:
    """Compare two points by height.

    Returns ``1`` if ``left`` is higher, ``-1`` if it is lower and ``0`` for
    equal points. At equal height the point with the smaller ``x`` counts as
    the higher one, which is the reverse of the :class:`PlanarPoint` order.

    Raises :class:`InvalidOrderingError` when a coordinate is NaN.
    """

    if math.isnan(left.y) or math.isnan(right.y):
        raise InvalidOrderingError("can't compare points, Y component is NaN")
    if left.y != right.y:
        return 1 if left.y > right.y else -1
    if math.isnan(left.x) or math.isnan(right.x):
        raise InvalidOrderingError("can't compare points, X component is NaN")
    if left.x == right.x:
        return 0
    return 1 if left.x < right.x else -1


__all__ = [
    "InvalidOrderingError",
    "PlanarPoint",
    "compare_height",
]
