"""Build point graphs from coordinate arrays."""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from .graph import Graph
from .point import PlanarPoint

logger = logging.getLogger(__name__)


def points_from_array(coords: object) -> List[PlanarPoint]:
    """Convert an ``(N, 2)`` array-like of coordinates into points."""

    arr = np.asarray(coords, dtype=np.float64)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"coordinates must have shape (N, 2), got {arr.shape}")
    return [PlanarPoint(float(x), float(y)) for x, y in arr]


def graph_from_arrays(coords: object, edges: Optional[object] = None) -> Graph[PlanarPoint]:
    """Build a graph from ``(N, 2)`` coordinates and ``(M, 2)`` vertex indices.

    Repeated coordinates collapse into one vertex, so edges indexing either copy
    land on the same vertex.
    """

    points = points_from_array(coords)
    raw = np.asarray(edges if edges is not None else [])
    if raw.size and raw.dtype.kind not in "iu":
        raise ValueError(f"edge indices must be integers, got dtype {raw.dtype}")
    pairs = raw.astype(np.int64)
    if pairs.size == 0:
        pairs = pairs.reshape(0, 2)
    if pairs.ndim != 2 or pairs.shape[1] != 2:
        raise ValueError(f"edges must have shape (M, 2), got {pairs.shape}")
    if pairs.size and (pairs.min() < 0 or pairs.max() >= len(points)):
        raise ValueError(f"edge indices must be in [0, {len(points)}), got {pairs.min()}..{pairs.max()}")

    graph = Graph.from_data(points, ((points[i], points[j]) for i, j in pairs.tolist()))
    logger.debug("Built graph with %d vertices from %d coordinate rows", len(graph), len(points))
    return graph


__all__ = ["graph_from_arrays", "points_from_array"]
