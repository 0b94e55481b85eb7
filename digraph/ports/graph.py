"""Graph ports - Abstractions for vertices, searches and graph loading.

These protocols define the contracts between the graph engine and its
callers: what a vertex must expose, what a search looks like, and how
graphs are loaded and solved by the adapters.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
)

if TYPE_CHECKING:
    from ..domain.models import Path, Vertex
    from ..graph.directed_graph import DirectedGraph


class Identifiable(Protocol):
    """Anything with a stable, unique textual identifier.

    This is the only capability the graph requires from a vertex.
    """

    @property
    def id(self) -> str:
        ...


V = TypeVar("V", bound=Identifiable)
E = TypeVar("E")

# Maps an edge payload to a non-negative weight
WeightFunction = Callable[[Any], float]


class PathSearch(Protocol):
    """Signature shared by the search algorithms.

    Implementations: graph/traversal.py (depth_first_search,
    breadth_first_search) and graph/dijkstra.py (dijkstra_shortest_path).
    """

    def __call__(
        self, graph: DirectedGraph[Any, Any], start_id: str, target_id: str
    ) -> Optional[Path[Any]]:
        ...


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the graph
    from external data. It never writes back.
    """

    def load(self) -> DirectedGraph[Vertex, Any]:
        """Load the graph.

        Returns:
            A fully built directed graph.
        """
        ...

    def get_vertex(self, vertex_id: str) -> Optional[Vertex]:
        """Get vertex details by identifier.

        Args:
            vertex_id: The identifier to look up.

        Returns:
            The vertex, or None if not found.
        """
        ...

    def list_vertices(self) -> Sequence[Vertex]:
        """List all vertices in the graph.

        Returns:
            Sequence of all vertices in load order.
        """
        ...


class PathSolverPort(Protocol):
    """Port for path computation.

    Implementation: adapters/graph/search_solver.py

    The solver runs a named search and turns absence into typed errors.
    """

    @property
    def algorithms(self) -> list[str]:
        """Names of the searches the solver can run."""
        ...

    def solve(
        self,
        graph: DirectedGraph[Any, Any],
        start_id: str,
        target_id: str,
        algorithm: Optional[str] = None,
    ) -> Path[Any]:
        """Find a path between two vertices.

        Args:
            graph: The graph to search.
            start_id: Identifier of the start vertex.
            target_id: Identifier of the target vertex.
            algorithm: Search name; the configured default when omitted.

        Returns:
            The path found by the search.
        """
        ...
