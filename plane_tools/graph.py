"""Undirected graph keyed by vertex value."""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Generic, Hashable, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)

DEFAULT_CONNECTIONS_PER_VERTEX = 4


class Graph(Generic[V]):
    """Vertex to neighbour-set mapping.

    A vertex is identified by its value, so adding an equal value twice keeps
    a single vertex. Edges are undirected: ``b in connects_of(a)`` holds
    exactly when ``a in connects_of(b)``. Dropping the last edge of a vertex
    leaves the vertex in place.
    """

    def __init__(self) -> None:
        self._connects: Dict[V, Set[V]] = {}
        self.vertex_capacity_hint = 0
        self.edge_per_vertex_hint = DEFAULT_CONNECTIONS_PER_VERTEX

    @classmethod
    def with_capacity(cls, vertex_hint: int, edge_per_vertex_hint: int) -> "Graph[V]":
        """Return an empty graph; the sizing hints are advisory only."""

        graph: Graph[V] = cls()
        graph.vertex_capacity_hint = vertex_hint
        graph.edge_per_vertex_hint = edge_per_vertex_hint
        return graph

    @classmethod
    def from_data(cls, vertices: Iterable[V], edges: Iterable[Tuple[V, V]]) -> "Graph[V]":
        """Build a graph from vertices and edge pairs.

        Edges that reference a vertex missing from ``vertices`` are dropped.
        """

        graph: Graph[V] = cls()
        for vertex in vertices:
            graph.add_vertex(vertex)
        dropped = 0
        for v1, v2 in edges:
            if not graph.add_edge(v1, v2):
                dropped += 1
        if dropped:
            logger.debug("Dropped %d edge(s) referencing unknown vertices", dropped)
        return graph

    def contains(self, vertex: V) -> bool:
        return vertex in self._connects

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._connects

    def add_vertex(self, vertex: V) -> bool:
        """Insert ``vertex``; return ``False`` if it was already present."""

        if vertex in self._connects:
            return False
        self._connects[vertex] = set()
        return True

    def add_edge(self, v1: V, v2: V) -> bool:
        """Connect ``v1`` and ``v2``.

        Returns ``True`` when both endpoints exist, whether or not the edge was
        already there.
        """

        c1 = self._connects.get(v1)
        c2 = self._connects.get(v2)
        if c1 is None or c2 is None:
            return False
        c1.add(v2)
        c2.add(v1)
        return True

    def remove_edge(self, v1: V, v2: V) -> bool:
        """Disconnect ``v1`` and ``v2``; same return contract as :meth:`add_edge`."""

        c1 = self._connects.get(v1)
        c2 = self._connects.get(v2)
        if c1 is None or c2 is None:
            return False
        c1.discard(v2)
        c2.discard(v1)
        return True

    def remove_vertex(self, vertex: V) -> Optional[Set[V]]:
        """Remove ``vertex`` with its edges and return its former neighbours."""

        connects = self._connects.pop(vertex, None)
        if connects is None:
            return None
        for other in connects:
            # self-loops were already popped with the vertex
            if other in self._connects:
                self._connects[other].discard(vertex)
        return connects

    def remove_weak_connected(self, weak_level: int) -> Set[V]:
        """Repeatedly remove vertices with fewer than ``weak_level`` neighbours.

        Removing a vertex lowers the degree of its neighbours, so pruning goes
        on until every remaining vertex has at least ``weak_level`` neighbours.
        Returns the removed vertices.
        """

        if weak_level < 0:
            raise ValueError(f"weak_level must be non-negative, got {weak_level}")
        removed: Set[V] = set()
        pending: List[V] = [v for v, connects in self._connects.items() if len(connects) < weak_level]
        while pending:
            vertex = pending.pop()
            if vertex in removed:
                continue
            connects = self.remove_vertex(vertex)
            if connects is None:
                continue
            removed.add(vertex)
            for other in connects:
                other_connects = self._connects.get(other)
                if other_connects is not None and len(other_connects) < weak_level:
                    pending.append(other)
        logger.debug("Pruned %d vertex(es) below degree %d", len(removed), weak_level)
        return removed

    def is_connected(self, v1: V, v2: V) -> bool:
        connects = self._connects.get(v1)
        if connects is None:
            return False
        return v2 in connects

    def connects_of(self, vertex: V) -> Optional[FrozenSet[V]]:
        """Return the neighbours of ``vertex`` or ``None`` if it is absent."""

        connects = self._connects.get(vertex)
        if connects is None:
            return None
        return frozenset(connects)

    def degree(self, vertex: V) -> int:
        connects = self._connects.get(vertex)
        return 0 if connects is None else len(connects)

    def vertices(self) -> List[V]:
        return list(self._connects)

    def edges(self) -> List[Tuple[V, V]]:
        """Return every undirected edge once."""

        seen: Set[V] = set()
        result: List[Tuple[V, V]] = []
        for vertex, connects in self._connects.items():
            for other in connects:
                if other not in seen:
                    result.append((vertex, other))
            seen.add(vertex)
        return result

    def copy(self) -> "Graph[V]":
        graph: Graph[V] = type(self).with_capacity(self.vertex_capacity_hint, self.edge_per_vertex_hint)
        graph._connects = {vertex: set(connects) for vertex, connects in self._connects.items()}
        return graph

    def is_empty(self) -> bool:
        return not self._connects

    def __len__(self) -> int:
        return len(self._connects)

    def __iter__(self) -> Iterator[V]:
        return iter(self._connects)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._connects == other._connects

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={len(self.edges())})"


__all__ = ["DEFAULT_CONNECTIONS_PER_VERTEX", "Graph"]
