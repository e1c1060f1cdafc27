"""Sweep that removes edge crossings from a straight-line graph.

Vertices are processed from the highest to the lowest (see
:class:`~plane_tools.point.PlanarPoint` for the order). Each edge is checked
once from its upper endpoint against the *settled* edges: edges already
checked from their upper endpoint whose lower endpoint has not been reached
yet. When a pivot's unchecked edge crosses a settled one, the highest such
crossing becomes a new vertex, both edges are cut there, and the new vertex is
queued so the lower halves are checked when the sweep gets to it.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

from .config import PlanarizeConfig, get_planarize_config
from .graph import Graph
from .intersect import intersect_point
from .logging_utils import debug_log_call
from .point import InvalidOrderingError, PlanarPoint

logger = logging.getLogger(__name__)

Edge = Tuple[PlanarPoint, PlanarPoint]


@dataclass(frozen=True)
class IntersectionCandidate:
    """Crossing of the pivot edge ``(pivot, q)`` with the settled ``edge``."""

    q: PlanarPoint
    edge: Edge
    point: PlanarPoint

    def outranks(self, other: IntersectionCandidate) -> bool:
        if self.point != other.point:
            return self.point > other.point
        return (self.q, self.edge[0], self.edge[1]) < (other.q, other.edge[0], other.edge[1])


def highest_candidate(candidates: Iterable[IntersectionCandidate]) -> Optional[IntersectionCandidate]:
    """Pick the crossing to resolve first.

    The highest crossing point wins. Equal points go to the smallest ``q``,
    then the smallest settled edge, compared endpoint by endpoint.
    """

    best: Optional[IntersectionCandidate] = None
    for candidate in candidates:
        if best is None or candidate.outranks(best):
            best = candidate
    return best


class _Highest:
    """Heap entry that inverts the point order, turning ``heapq`` into a max-heap."""

    __slots__ = ("point",)

    def __init__(self, point: PlanarPoint) -> None:
        self.point = point

    def __lt__(self, other: _Highest) -> bool:
        return other.point < self.point


@dataclass
class _SweepContext:
    graph: Graph[PlanarPoint]
    heap: List[_Highest] = field(default_factory=list)
    # (upper, lower) pairs
    settled: Set[Edge] = field(default_factory=set)
    resolved: Set[PlanarPoint] = field(default_factory=set)
    crossings: int = 0

    def push(self, vertex: PlanarPoint) -> None:
        if vertex.is_nan():
            raise InvalidOrderingError(f"can't queue {vertex!r}, some components are NaN")
        heapq.heappush(self.heap, _Highest(vertex))

    def pop(self) -> PlanarPoint:
        return heapq.heappop(self.heap).point

    def fresh_neighbors(self, pivot: PlanarPoint) -> Set[PlanarPoint]:
        """Neighbours of ``pivot`` whose edge has not been checked yet.

        Markers left by higher vertices are consumed here: once the sweep
        reaches the lower endpoint the edge stops being settled.
        """

        fresh: Set[PlanarPoint] = set()
        for q in self.graph.connects_of(pivot) or ():
            if (q, pivot) in self.settled:
                self.settled.discard((q, pivot))
            elif q not in self.resolved and (pivot, q) not in self.settled:
                fresh.add(q)
        return fresh

    def candidates(self, pivot: PlanarPoint, fresh: Set[PlanarPoint]) -> Iterable[IntersectionCandidate]:
        for q in fresh:
            for a, b in self.settled:
                if a == pivot or a == q or b == pivot or b == q:
                    continue
                point = intersect_point((pivot, q), (a, b))
                if point is not None:
                    yield IntersectionCandidate(q=q, edge=(a, b), point=point)

    def split_by_intersection(
        self, pivot: PlanarPoint, candidate: IntersectionCandidate, fresh: Set[PlanarPoint]
    ) -> None:
        q = candidate.q
        a, b = candidate.edge
        i = candidate.point

        self.settled.discard((a, b))
        self.settled.discard((pivot, q))
        fresh.discard(q)
        self.graph.remove_edge(pivot, q)
        self.graph.remove_edge(a, b)

        self.graph.add_vertex(i)
        for v1, v2 in ((pivot, i), (i, q), (a, i), (i, b)):
            if v1 != v2:
                self.graph.add_edge(v1, v2)
        # the halves above i are crossing-free, the lower ones wait for i
        for upper in (pivot, a):
            if upper != i:
                self.settled.add((upper, i))

        self.crossings += 1
        self.push(i)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Split edges %s-%s and %s-%s at %s",
                pivot.as_tuple(),
                q.as_tuple(),
                a.as_tuple(),
                b.as_tuple(),
                i.as_tuple(),
            )

    def resolve(self, pivot: PlanarPoint) -> None:
        fresh = self.fresh_neighbors(pivot)
        while fresh:
            candidate = highest_candidate(self.candidates(pivot, fresh))
            if candidate is None:
                break
            self.split_by_intersection(pivot, candidate, fresh)
        self.settled.update((pivot, q) for q in fresh)
        self.resolved.add(pivot)


def _check_finite(graph: Graph[PlanarPoint]) -> None:
    for vertex in graph:
        if vertex.is_nan():
            raise InvalidOrderingError(f"can't planarize graph, vertex {vertex!r} has NaN components")


@debug_log_call(logger)
def into_no_intersect(
    graph: Graph[PlanarPoint], config: Optional[PlanarizeConfig] = None
) -> Graph[PlanarPoint]:
    """Return a copy of ``graph`` where no two edges cross.

    Every crossing becomes a vertex of the result and the two crossing edges
    are split there. Vertices and edges that cross nothing are kept as they
    are. Raises :class:`InvalidOrderingError` if a vertex has a NaN coordinate.
    """

    config = config or get_planarize_config()
    if config.check_finite:
        _check_finite(graph)

    result: Graph[PlanarPoint] = Graph.with_capacity(len(graph), config.edge_capacity_hint)
    for vertex in graph:
        result.add_vertex(vertex)
    edges = graph.edges()
    for v1, v2 in edges:
        result.add_edge(v1, v2)

    ctx = _SweepContext(graph=result)
    for vertex in result:
        ctx.push(vertex)

    logger.info("Planarizing graph with %d vertices and %d edges", len(graph), len(edges))
    while ctx.heap:
        pivot = ctx.pop()
        ctx.resolve(pivot)

    logger.info("Resolved %d crossing(s); result has %d vertices", ctx.crossings, len(result))
    return result


__all__ = ["IntersectionCandidate", "highest_candidate", "into_no_intersect"]
