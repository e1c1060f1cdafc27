from .point import InvalidOrderingError, PlanarPoint, compare_height
from .order import ascending_order, descending_order
from .graph import Graph
from .intersect import find_crossings, intersect_point
from .builders import graph_from_arrays, points_from_array
from .config import PlanarizeConfig, get_planarize_config, set_planarize_config
from .planarize import IntersectionCandidate, highest_candidate, into_no_intersect
from .split import highest_vertex, split
from .planar_graph import PlanarGraph

__all__ = [
    'InvalidOrderingError',
    'PlanarPoint',
    'compare_height',
    'ascending_order',
    'descending_order',
    'Graph',
    'intersect_point',
    'find_crossings',
    'graph_from_arrays',
    'points_from_array',
    'PlanarizeConfig',
    'get_planarize_config',
    'set_planarize_config',
    'IntersectionCandidate',
    'highest_candidate',
    'into_no_intersect',
    'highest_vertex',
    'split',
    'PlanarGraph',
]
