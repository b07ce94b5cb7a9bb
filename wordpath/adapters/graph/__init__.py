"""Graph adapters - Implementations of PathSolverPort.

Available implementations:
- DijkstraPathSolver: Finds cheapest word paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraPathSolver

__all__ = ["DijkstraPathSolver"]
