"""Graph engine: the directed graph store and its path searches.

The store lives in ``directed_graph``; the searches are plain functions
in ``traversal`` (depth-first, breadth-first) and ``dijkstra``.
"""

from .dijkstra import dijkstra_shortest_path, edge_weight
from .directed_graph import DirectedGraph
from .traversal import breadth_first_search, depth_first_search

__all__ = [
    "DirectedGraph",
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
    "edge_weight",
]
