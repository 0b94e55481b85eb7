"""CSV Graph Repository adapter.

Builds a DirectedGraph[Vertex, Edge] from two CSV files:

- vertices file: ``vertex_id,name``
- edges file: ``from_id,to_id,weight[,label][,bidirectional]``

Edges may name vertices absent from the vertices file; the graph adds
them on insertion. The repository only reads: there is no way back from
a graph to CSV.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError, VertexNotFoundError
from ...domain.models import Edge, Vertex
from ...graph.directed_graph import DirectedGraph

_TRUE_VALUES = {"1", "true", "yes", "y"}


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort. The graph is built once
    and cached until clear_cache() is called.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[DirectedGraph[Vertex, Edge]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> DirectedGraph[Vertex, Edge]:
        """Load the graph from CSV files.

        Returns:
            The directed graph.

        Raises:
            GraphLoadError: If a file cannot be read or a row cannot be
                parsed.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "vertices_path": str(self.config.vertices_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        graph: DirectedGraph[Vertex, Edge] = DirectedGraph()
        try:
            self._load_vertices(graph)
        except (OSError, KeyError, ValueError, csv.Error) as e:
            raise GraphLoadError(
                f"Failed to load vertices: {e}",
                file_path=str(self.config.vertices_path),
                cause=e,
            )
        try:
            rejected = self._load_edges(graph)
        except (OSError, KeyError, ValueError, csv.Error) as e:
            raise GraphLoadError(
                f"Failed to load edges: {e}",
                file_path=str(self.config.edges_path),
                cause=e,
            )

        if rejected:
            self._logger.warning(
                "Edges rejected while loading",
                extra={"rejected": rejected},
            )
        self._logger.info(
            "Graph loaded",
            extra={"vertices": graph.vertex_count, "edges": graph.edge_count},
        )
        self._graph = graph
        return graph

    def _load_vertices(self, graph: DirectedGraph[Vertex, Edge]) -> None:
        with self.config.vertices_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                vertex_id = (row.get("vertex_id") or "").strip()
                if not vertex_id:
                    self._logger.warning(
                        "Skipping vertex row without id",
                        extra={"line": reader.line_num},
                    )
                    continue
                name = (row.get("name") or "").strip()
                graph.upsert_vertex(Vertex(id=vertex_id, name=name or vertex_id))

    def _load_edges(self, graph: DirectedGraph[Vertex, Edge]) -> int:
        """Add every edge row to the graph; return the number rejected."""
        rejected = 0
        with self.config.edges_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                from_id = (row.get("from_id") or "").strip()
                to_id = (row.get("to_id") or "").strip()
                weight_str = (row.get("weight") or "").strip()

                if not from_id or not to_id or not weight_str:
                    self._logger.warning(
                        "Skipping incomplete edge row",
                        extra={"line": reader.line_num},
                    )
                    continue

                weight = float(weight_str)
                if weight < 0:
                    self._logger.warning(
                        "Skipping edge row with negative weight",
                        extra={"line": reader.line_num, "weight": weight},
                    )
                    continue

                edge = Edge(
                    weight=weight,
                    label=(row.get("label") or "").strip(),
                )
                from_vertex = graph.get_vertex(from_id) or Vertex(from_id, from_id)
                to_vertex = graph.get_vertex(to_id) or Vertex(to_id, to_id)

                bidirectional = (
                    (row.get("bidirectional") or "").strip().lower() in _TRUE_VALUES
                )
                if bidirectional:
                    added = graph.add_connection(from_vertex, to_vertex, edge)
                else:
                    added = graph.add_edge(from_vertex, to_vertex, edge)

                if not added:
                    rejected += 1
                    self._logger.debug(
                        "Edge rejected",
                        extra={"from_id": from_id, "to_id": to_id},
                    )
        return rejected

    def get_vertex(self, vertex_id: str) -> Optional[Vertex]:
        """Get vertex details by identifier.

        Args:
            vertex_id: The identifier to look up.

        Returns:
            The vertex, or None if not found.
        """
        return self.load().get_vertex(vertex_id)

    def get_vertex_or_raise(self, vertex_id: str) -> Vertex:
        """Get vertex details by identifier, raising if not found.

        Raises:
            VertexNotFoundError: If the vertex is not found.
        """
        vertex = self.get_vertex(vertex_id)
        if vertex is None:
            raise VertexNotFoundError(
                f"Vertex not found: {vertex_id}",
                vertex_id=vertex_id,
            )
        return vertex

    def list_vertices(self) -> Sequence[Vertex]:
        """List all vertices in load order."""
        return self.load().vertices

    def clear_cache(self) -> None:
        """Drop the cached graph so the next load() reads the files again."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
