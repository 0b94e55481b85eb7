"""Top-level package for the directed graph engine.

The engine is a mutable directed graph of identifiable vertices and
opaque edge payloads, with depth-first, breadth-first and Dijkstra
path searches. Adapters load graphs from CSV files and wrap the
searches behind a name-based solver.
"""

from .domain import (
    ConfigurationError,
    DigraphError,
    Edge,
    GraphLoadError,
    NoPathFoundError,
    Path,
    Vertex,
    VertexNotFoundError,
)
from .graph import (
    DirectedGraph,
    breadth_first_search,
    depth_first_search,
    dijkstra_shortest_path,
    edge_weight,
)

__all__ = [
    "DirectedGraph",
    "Vertex",
    "Edge",
    "Path",
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
    "edge_weight",
    "DigraphError",
    "VertexNotFoundError",
    "NoPathFoundError",
    "GraphLoadError",
    "ConfigurationError",
]
