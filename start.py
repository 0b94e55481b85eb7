"""Simple launcher for path searches over the configured CSV graph.

Usage: python start.py [algorithm] [start_id] [target_id]

Missing arguments are asked for interactively. The graph comes from
the CSV files named by the DIGRAPH_GRAPH_* settings.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from digraph.container import get_container
from digraph.domain.errors import DigraphError
from digraph.monitoring import configure_logging
from digraph.ports.graph import GraphRepositoryPort, PathSolverPort


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    configure_logging()

    container = get_container()
    repository = container.resolve(GraphRepositoryPort)
    solver = container.resolve(PathSolverPort)

    print("=== Directed graph search ===")
    print(f"Algorithms: {', '.join(solver.algorithms)}")
    try:
        algorithm = args[0] if len(args) > 0 else input("Algorithm: ").strip()
        start_id = args[1] if len(args) > 1 else input("Start vertex: ").strip()
        target_id = args[2] if len(args) > 2 else input("Target vertex: ").strip()
    except EOFError:
        print("Error: input closed before start and target were given")
        return 1

    try:
        graph = repository.load()
        path = solver.solve(graph, start_id, target_id, algorithm or None)
    except DigraphError as e:
        print(f"Error: {e}")
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
