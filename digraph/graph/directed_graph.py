"""In-memory directed graph store.

Vertices are owned by identifier and edges by ordered (from, to) pair.
At most one edge exists for a given ordered pair; the reverse edge is a
separate edge with its own payload.

Every operation taking a vertex also accepts its identifier. An
identifier that does not resolve behaves exactly like an absent vertex.
"""

from __future__ import annotations

import logging
from typing import Dict, Generic, List, Optional, Union

from ..domain.models import Path
from ..ports.graph import E, Identifiable, V, WeightFunction
from .dijkstra import dijkstra_shortest_path, edge_weight
from .traversal import breadth_first_search, depth_first_search

logger = logging.getLogger(__name__)


class DirectedGraph(Generic[V, E]):
    """Mutable directed graph of identifiable vertices and opaque edges.

    Representation invariants:
    1. ``_vertices`` maps every vertex id to the vertex instance, so no
       two vertices share an id.
    2. ``_edges`` maps every vertex id to its outgoing edges, keyed by
       the id of the target vertex.
    3. Every id used as a key or nested key in ``_edges`` is a key of
       ``_vertices`` and vice versa.

    Not safe for concurrent mutation. Concurrent read-only searches on a
    graph nobody is mutating are fine.
    """

    def __init__(self) -> None:
        self._vertices: Dict[str, V] = {}
        self._edges: Dict[str, Dict[str, E]] = {}
        self._num_edges = 0

    # Vertices

    @property
    def vertices(self) -> List[V]:
        """All vertices in insertion order."""
        return list(self._vertices.values())

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return self._num_edges

    def upsert_vertex(self, vertex: V) -> V:
        """Add ``vertex`` unless a vertex with the same id already exists.

        Returns:
            The vertex now stored under that id: ``vertex`` itself if it
            was added, otherwise the existing instance, left unchanged.
        """
        existing = self._vertices.get(vertex.id)
        if existing is not None:
            return existing
        self._vertices[vertex.id] = vertex
        self._edges[vertex.id] = {}
        return vertex

    def get_vertex(self, vertex_id: str) -> Optional[V]:
        """Find the vertex identified by ``vertex_id``, or None."""
        return self._vertices.get(vertex_id)

    def neighbors(self, vertex: Union[V, str]) -> Optional[List[V]]:
        """Vertices reachable from ``vertex`` over one outgoing edge.

        Returns:
            None if ``vertex`` is not in the graph, an empty list if it
            has no outgoing edges.
        """
        vertex_id = _id_of(vertex)
        if vertex_id not in self._vertices:
            return None
        return [self._vertices[to_id] for to_id in self._edges[vertex_id]]

    def edges_from(self, vertex: Union[V, str]) -> Optional[List[E]]:
        """Payloads of the outgoing edges of ``vertex``.

        Returns:
            None if ``vertex`` is not in the graph, an empty list if it
            has no outgoing edges.
        """
        vertex_id = _id_of(vertex)
        if vertex_id not in self._vertices:
            return None
        return list(self._edges[vertex_id].values())

    # Edges

    def add_edge(
        self, from_vertex: Union[V, str], to_vertex: Union[V, str], edge: E
    ) -> bool:
        """Add a directed edge from ``from_vertex`` to ``to_vertex``.

        Vertex instances that are not in the graph yet are added first.
        Identifiers must already resolve.

        Returns:
            True if the edge was recorded. False, with the graph left
            untouched, for a self-loop, an unresolved identifier or an
            ordered pair that already has an edge.
        """
        from_id = _id_of(from_vertex)
        to_id = _id_of(to_vertex)
        if from_id == to_id:
            logger.debug("Rejected self-loop", extra={"vertex_id": from_id})
            return False
        if isinstance(from_vertex, str) and from_id not in self._vertices:
            return False
        if isinstance(to_vertex, str) and to_id not in self._vertices:
            return False
        if to_id in self._edges.get(from_id, {}):
            logger.debug(
                "Rejected duplicate edge",
                extra={"from_id": from_id, "to_id": to_id},
            )
            return False

        if not isinstance(from_vertex, str):
            self.upsert_vertex(from_vertex)
        if not isinstance(to_vertex, str):
            self.upsert_vertex(to_vertex)
        self._edges[from_id][to_id] = edge
        self._num_edges += 1
        return True

    def add_connection(
        self, first: Union[V, str], second: Union[V, str], edge: E
    ) -> bool:
        """Add edges in both directions carrying the same payload.

        Not atomic: when the first edge is added and the second one is
        rejected, the first edge stays in the graph.

        Returns:
            True only if both edges were added.
        """
        return self.add_edge(first, second, edge) and self.add_edge(
            second, first, edge
        )

    def get_edge(
        self, from_vertex: Union[V, str], to_vertex: Union[V, str]
    ) -> Optional[E]:
        """Edge payload for the ordered pair, or None if there is none."""
        return self._edges.get(_id_of(from_vertex), {}).get(_id_of(to_vertex))

    def remove_unconnected_vertices(self) -> int:
        """Drop every vertex that has no outgoing and no incoming edge.

        Returns:
            The number of vertices removed.
        """
        targets = {to_id for outgoing in self._edges.values() for to_id in outgoing}
        unconnected = [
            vertex_id
            for vertex_id, outgoing in self._edges.items()
            if not outgoing and vertex_id not in targets
        ]
        for vertex_id in unconnected:
            del self._edges[vertex_id]
            del self._vertices[vertex_id]

        if unconnected:
            logger.debug(
                "Removed unconnected vertices",
                extra={"removed": len(unconnected)},
            )
        return len(unconnected)

    # Searches

    def depth_first_search(self, start_id: str, target_id: str) -> Optional[Path[V]]:
        """See :func:`digraph.graph.traversal.depth_first_search`."""
        return depth_first_search(self, start_id, target_id)

    def breadth_first_search(
        self, start_id: str, target_id: str
    ) -> Optional[Path[V]]:
        """See :func:`digraph.graph.traversal.breadth_first_search`."""
        return breadth_first_search(self, start_id, target_id)

    def dijkstra_shortest_path(
        self,
        start_id: str,
        target_id: str,
        weight: WeightFunction = edge_weight,
    ) -> Optional[Path[V]]:
        """See :func:`digraph.graph.dijkstra.dijkstra_shortest_path`."""
        return dijkstra_shortest_path(self, start_id, target_id, weight)

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, str):
            return vertex in self._vertices
        vertex_id = getattr(vertex, "id", None)
        return isinstance(vertex_id, str) and vertex_id in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )

    def __str__(self) -> str:
        lines = []
        for vertex_id, outgoing in self._edges.items():
            targets = ", ".join(
                f"{self._vertices[to_id]}({edge})" for to_id, edge in outgoing.items()
            )
            lines.append(f"{self._vertices[vertex_id]}: [{targets}]")
        return "{ " + ",\n  ".join(lines) + "\n}"


def _id_of(vertex: Union[Identifiable, str]) -> str:
    if isinstance(vertex, str):
        return vertex
    return vertex.id
