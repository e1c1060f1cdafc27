from __future__ import annotations

from typing import FrozenSet, List, Optional, Set, Tuple

from .config import PlanarizeConfig
from .graph import Graph
from .planarize import into_no_intersect
from .point import PlanarPoint
from .split import highest_vertex, split


class PlanarGraph:
    """Point graph guaranteed to have no crossing edges.

    The source graph is planarized on construction. Only removals are
    offered afterwards, so the guarantee holds for the lifetime of the object.
    """

    def __init__(self, graph: Graph[PlanarPoint], config: Optional[PlanarizeConfig] = None) -> None:
        self._graph = into_no_intersect(graph, config)

    @property
    def graph(self) -> Graph[PlanarPoint]:
        """Snapshot of the underlying graph.

        Edits made to the returned graph do not reach this object.
        """

        return self._graph.copy()

    def into_graph(self) -> Graph[PlanarPoint]:
        return self._graph.copy()

    def contains(self, vertex: PlanarPoint) -> bool:
        return vertex in self._graph

    def is_connected(self, v1: PlanarPoint, v2: PlanarPoint) -> bool:
        return self._graph.is_connected(v1, v2)

    def connects_of(self, vertex: PlanarPoint) -> Optional[FrozenSet[PlanarPoint]]:
        return self._graph.connects_of(vertex)

    def degree(self, vertex: PlanarPoint) -> int:
        return self._graph.degree(vertex)

    def vertices(self) -> List[PlanarPoint]:
        return self._graph.vertices()

    def edges(self) -> List[Tuple[PlanarPoint, PlanarPoint]]:
        return self._graph.edges()

    def remove_vertex(self, vertex: PlanarPoint) -> Optional[Set[PlanarPoint]]:
        return self._graph.remove_vertex(vertex)

    def remove_edge(self, v1: PlanarPoint, v2: PlanarPoint) -> bool:
        return self._graph.remove_edge(v1, v2)

    def remove_weak_connected(self, weak_level: int) -> Set[PlanarPoint]:
        return self._graph.remove_weak_connected(weak_level)

    def split(self) -> List[Graph[PlanarPoint]]:
        return split(self._graph)

    def highest_vertex(self) -> Optional[PlanarPoint]:
        return highest_vertex(self._graph)

    def __len__(self) -> int:
        return len(self._graph)

    def __repr__(self) -> str:
        return f"PlanarGraph(vertices={len(self._graph)}, edges={len(self._graph.edges())})"


__all__ = ["PlanarGraph"]
