"""Connected-component helpers for planarized graphs."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from .graph import Graph, V
from .logging_utils import debug_log_call
from .point import PlanarPoint

logger = logging.getLogger(__name__)


@debug_log_call(logger)
def split(graph: Graph[V]) -> List[Graph[V]]:
    """Split ``graph`` into its connected components.

    Components come in the order their first vertex appears in
    ``graph.vertices()``; an isolated vertex forms a component of its own.
    """

    vertices = graph.vertices()
    if not vertices:
        return []

    index: Dict[V, int] = {vertex: idx for idx, vertex in enumerate(vertices)}
    edges = graph.edges()
    rows = np.fromiter((index[v1] for v1, _ in edges), dtype=np.int64, count=len(edges))
    cols = np.fromiter((index[v2] for _, v2 in edges), dtype=np.int64, count=len(edges))
    adjacency = coo_matrix(
        (np.ones(len(edges), dtype=np.int8), (rows, cols)),
        shape=(len(vertices), len(vertices)),
    )
    count, labels = connected_components(adjacency, directed=False)

    # relabel so components follow vertex order
    order: Dict[int, int] = {}
    for label in labels:
        order.setdefault(int(label), len(order))
    components: List[Graph[V]] = [
        Graph.with_capacity(0, graph.edge_per_vertex_hint) for _ in range(count)
    ]
    for vertex, label in zip(vertices, labels):
        components[order[int(label)]].add_vertex(vertex)
    for v1, v2 in edges:
        components[order[int(labels[index[v1]])]].add_edge(v1, v2)

    logger.info("Split graph with %d vertices into %d component(s)", len(vertices), count)
    return components


def highest_vertex(graph: Graph[PlanarPoint]) -> Optional[PlanarPoint]:
    """Return the greatest vertex in :class:`PlanarPoint` order, if any."""

    if graph.is_empty():
        return None
    return max(graph.vertices())


__all__ = ["highest_vertex", "split"]
