"""Unweighted path searches: depth-first and breadth-first.

Both searches resolve the start and target identifiers through the
graph and return None when either is unknown or when the target cannot
be reached. Neighbours are explored in the order the graph returns them,
so results are deterministic for a given construction order.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Dict, Iterator, List, Optional, Tuple

from ..domain.models import Path

if TYPE_CHECKING:
    from .directed_graph import DirectedGraph


def depth_first_search(
    graph: DirectedGraph[Any, Any], start_id: str, target_id: str
) -> Optional[Path[Any]]:
    """Find any directed walk from ``start_id`` to ``target_id``.

    A vertex is marked visited the first time it is reached and never
    entered again. The stack holds the walk from the start to the vertex
    being explored, so when the target is reached the stack is the path.

    Parameters
    ----------
    graph:
        The graph to search.
    start_id:
        Identifier of the start vertex.
    target_id:
        Identifier of the target vertex.

    Returns
    -------
    Path or None
        A path with ``total_weight`` 0, or None if either identifier is
        unknown or no walk exists. No guarantee that it is the shortest.
    """
    start = graph.get_vertex(start_id)
    target = graph.get_vertex(target_id)
    if start is None or target is None:
        return None

    visited: Dict[str, Any] = {start_id: start}
    if start_id == target_id:
        return Path(vertices=(start,), visited=(start,))

    stack: List[Tuple[Any, Iterator[Any]]] = [
        (start, iter(graph.neighbors(start_id) or ()))
    ]
    while stack:
        _, pending = stack[-1]
        neighbour = next(pending, None)
        if neighbour is None:
            stack.pop()
            continue
        if neighbour.id in visited:
            continue

        visited[neighbour.id] = neighbour
        if neighbour.id == target_id:
            walk = tuple(vertex for vertex, _ in stack) + (neighbour,)
            return Path(vertices=walk, visited=tuple(visited.values()))
        stack.append((neighbour, iter(graph.neighbors(neighbour.id) or ())))

    return None


def breadth_first_search(
    graph: DirectedGraph[Any, Any], start_id: str, target_id: str
) -> Optional[Path[Any]]:
    """Find a path from ``start_id`` to ``target_id`` with the fewest edges.

    Vertices are marked visited when they are discovered, not when they
    are dequeued. Each discovered vertex remembers the vertex it was
    first discovered from; on discovering the target the path is rebuilt
    by walking those predecessors back to the start.

    Parameters
    ----------
    graph:
        The graph to search.
    start_id:
        Identifier of the start vertex.
    target_id:
        Identifier of the target vertex.

    Returns
    -------
    Path or None
        A minimum-edge path with ``total_weight`` 0, or None if either
        identifier is unknown or the target is unreachable.
    """
    start = graph.get_vertex(start_id)
    target = graph.get_vertex(target_id)
    if start is None or target is None:
        return None

    visited: Dict[str, Any] = {start_id: start}
    if start_id == target_id:
        return Path(vertices=(start,), visited=(start,))

    predecessors: Dict[str, str] = {}
    queue: Deque[str] = deque([start_id])
    while queue:
        current_id = queue.popleft()
        for neighbour in graph.neighbors(current_id) or ():
            if neighbour.id in visited:
                continue

            visited[neighbour.id] = neighbour
            predecessors[neighbour.id] = current_id
            if neighbour.id == target_id:
                walk = reconstruct_path(graph, predecessors, start_id, target_id)
                return Path(vertices=walk, visited=tuple(visited.values()))
            queue.append(neighbour.id)

    return None


def reconstruct_path(
    graph: DirectedGraph[Any, Any],
    predecessors: Dict[str, str],
    start_id: str,
    target_id: str,
) -> Tuple[Any, ...]:
    """Walk predecessor links from the target back to the start."""
    ids = [target_id]
    while ids[-1] != start_id:
        ids.append(predecessors[ids[-1]])
    ids.reverse()
    return tuple(graph.get_vertex(vertex_id) for vertex_id in ids)
