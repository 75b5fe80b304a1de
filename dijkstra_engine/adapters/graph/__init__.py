"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- AdjacencyListGraph: In-memory undirected graph
- MatrixGraphRepository: Builds a graph from a weight matrix
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .adjacency_list import AdjacencyListGraph
from .dijkstra_solver import DijkstraRouteSolver
from .matrix_repository import MatrixGraphRepository

__all__ = ["AdjacencyListGraph", "DijkstraRouteSolver", "MatrixGraphRepository"]
