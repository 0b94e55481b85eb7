"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads a graph from CSV files
- PathSolver: Runs depth-first, breadth-first or Dijkstra searches
"""

from .csv_repository import CSVGraphRepository
from .search_solver import PathSolver

__all__ = ["CSVGraphRepository", "PathSolver"]
