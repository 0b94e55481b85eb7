"""Path Solver adapter.

This adapter wraps the search functions of the graph engine and adds:
- A registry of searches selectable by name
- Typed errors instead of None results
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Dict, Optional

from ...config import SearchConfig, get_config
from ...domain.errors import ConfigurationError, NoPathFoundError, VertexNotFoundError
from ...domain.models import Path
from ...graph.dijkstra import dijkstra_shortest_path, edge_weight
from ...graph.directed_graph import DirectedGraph
from ...graph.traversal import breadth_first_search, depth_first_search
from ...ports.graph import PathSearch, WeightFunction


@dataclass
class PathSolver:
    """Runs a named search over a directed graph.

    This adapter implements PathSolverPort.

    Attributes:
        config: Search configuration (default algorithm)
        weight: Weight function handed to Dijkstra
    """

    config: SearchConfig = field(default_factory=lambda: get_config().search)
    weight: WeightFunction = edge_weight

    _logger: logging.Logger = field(init=False, repr=False)
    _searches: Dict[str, PathSearch] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._searches = {
            "dfs": depth_first_search,
            "bfs": breadth_first_search,
            "dijkstra": partial(dijkstra_shortest_path, weight=self.weight),
        }

    @property
    def algorithms(self) -> list[str]:
        """Names accepted by solve() and solve_safe()."""
        return list(self._searches)

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
            algorithm: One of ``algorithms``; the configured default
                when omitted.

        Returns:
            The path found by the search.

        Raises:
            ConfigurationError: If the algorithm name is unknown.
            VertexNotFoundError: If start or target is not in the graph.
            NoPathFoundError: If the target cannot be reached.
        """
        name = algorithm or self.config.default_algorithm
        search = self._search_for(name)

        context = {"start_id": start_id, "target_id": target_id, "algorithm": name}
        self._logger.debug("Solving path", extra=context)

        if graph.get_vertex(start_id) is None:
            raise VertexNotFoundError(
                f"Start vertex not in graph: {start_id}",
                vertex_id=start_id,
            )
        if graph.get_vertex(target_id) is None:
            raise VertexNotFoundError(
                f"Target vertex not in graph: {target_id}",
                vertex_id=target_id,
            )

        path = search(graph, start_id, target_id)

        if path is None:
            self._logger.warning("No path found", extra=context)
            raise NoPathFoundError(
                f"No path from {start_id} to {target_id}",
                start_id=start_id,
                target_id=target_id,
                algorithm=name,
            )

        self._logger.info(
            "Path found",
            extra={
                **context,
                "stops": path.num_vertices,
                "total_weight": path.total_weight,
                "visited": len(path.visited),
            },
        )
        return path

    def solve_safe(
        self,
        graph: DirectedGraph[Any, Any],
        start_id: str,
        target_id: str,
        algorithm: Optional[str] = None,
    ) -> Optional[Path[Any]]:
        """Find a path, returning None on failure.

        Like solve(), but an unknown vertex or an unreachable target give
        None instead of an exception. An unknown algorithm name is still
        a ConfigurationError.
        """
        name = algorithm or self.config.default_algorithm
        return self._search_for(name)(graph, start_id, target_id)

    def _search_for(self, name: str) -> PathSearch:
        search = self._searches.get(name)
        if search is None:
            raise ConfigurationError(
                f"Unknown search algorithm: {name!r}",
                setting_name="algorithm",
                expected_type=" | ".join(self._searches),
            )
        return search
