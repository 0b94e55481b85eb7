"""Shortest weighted path using Dijkstra's algorithm.

Edge payloads are opaque to the graph; a caller-supplied weight function
turns each payload into a non-negative number. Negative weights are a
precondition violation and are not checked.
"""

from __future__ import annotations

import heapq
import itertools
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Set, Tuple

from ..domain.models import Path
from ..ports.graph import WeightFunction
from .traversal import reconstruct_path

if TYPE_CHECKING:
    from .directed_graph import DirectedGraph


def edge_weight(edge: Any) -> float:
    """Default weight function: read the ``weight`` attribute of the edge."""
    return float(edge.weight)


def dijkstra_shortest_path(
    graph: DirectedGraph[Any, Any],
    start_id: str,
    target_id: str,
    weight: WeightFunction = edge_weight,
) -> Optional[Path[Any]]:
    """Compute the lowest-weight path between two vertices.

    Each vertex moves from undiscovered to discovered (tentative
    distance) to processed (final distance). The heap holds
    ``(distance, sequence, vertex_id)`` entries; the sequence number
    makes ties pop in the order they were pushed. Entries for vertices
    that were already processed are skipped when popped.

    Parameters
    ----------
    graph:
        The graph to search.
    start_id:
        Identifier of the departure vertex.
    target_id:
        Identifier of the arrival vertex.
    weight:
        Maps an edge payload to its weight.

    Returns
    -------
    Path or None
        The path from ``start_id`` to ``target_id`` (inclusive) with its
        total weight and the discovered vertices, or None if either
        identifier is unknown or the target is unreachable.
    """
    start = graph.get_vertex(start_id)
    target = graph.get_vertex(target_id)
    if start is None or target is None:
        return None

    if start_id == target_id:
        return Path(vertices=(start,), total_weight=0.0, visited=(start,))

    distances: Dict[str, float] = {start_id: 0.0}
    previous: Dict[str, str] = {}
    discovered: Dict[str, Any] = {start_id: start}
    processed: Set[str] = set()

    sequence = itertools.count()
    heap: List[Tuple[float, int, str]] = [(0.0, next(sequence), start_id)]

    while heap:
        current_distance, _, u = heapq.heappop(heap)

        if u in processed:
            continue

        processed.add(u)

        if u == target_id:
            walk = reconstruct_path(graph, previous, start_id, target_id)
            return Path(
                vertices=walk,
                total_weight=current_distance,
                visited=tuple(discovered.values()),
            )

        for v in graph.neighbors(u) or ():
            if v.id in processed:
                continue
            new_distance = current_distance + weight(graph.get_edge(u, v.id))
            if new_distance < distances.get(v.id, float("inf")):
                distances[v.id] = new_distance
                previous[v.id] = u
                discovered.setdefault(v.id, v)
                heapq.heappush(heap, (new_distance, next(sequence), v.id))

    return None
