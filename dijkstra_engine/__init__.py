"""Top-level package for the dijkstra-engine project.

Single-source shortest paths over weighted undirected graphs. The
Dijkstra engine works against the GraphPort protocol, so any graph
storage exposing vertices, incident edges and edge endpoints can be
searched.
"""

from .adapters.graph import AdjacencyListGraph, DijkstraRouteSolver, MatrixGraphRepository
from .domain import (
    Edge,
    EngineState,
    InvalidStateError,
    PathResult,
    ShortestPathError,
    Vertex,
)
from .graph import Dijkstra, attribute_weight, element_weight, unit_weight

__all__ = [
    "Dijkstra",
    "AdjacencyListGraph",
    "MatrixGraphRepository",
    "DijkstraRouteSolver",
    "Vertex",
    "Edge",
    "EngineState",
    "PathResult",
    "ShortestPathError",
    "InvalidStateError",
    "attribute_weight",
    "element_weight",
    "unit_weight",
]
