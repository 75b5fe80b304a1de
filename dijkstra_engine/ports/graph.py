"""Graph ports - Abstractions for graph access, loading and routing.

These protocols define the contracts the engine relies on. The
engine never depends on how a graph is stored, only on the small
query surface exposed by GraphPort.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Dict,
    Iterable,
    Optional,
    Protocol,
    Tuple,
)

if TYPE_CHECKING:
    from ..domain.models import Edge, PathResult, Vertex


class EdgeWeight(Protocol):
    """Maps an edge to its weight.

    Implementations must be pure for the duration of a run and
    should return non-negative values; the engine does not check.
    Stock implementations live in graph/weights.py.
    """

    def __call__(self, edge: Edge) -> float: ...


class GraphPort(Protocol):
    """Port for read access to an undirected graph.

    Implementation: adapters/graph/adjacency_list.py
    """

    def vertices(self) -> Iterable[Vertex]:
        """Enumerate all vertices (order irrelevant)."""
        ...

    def incident_edges(self, vertex: Vertex) -> Iterable[Edge]:
        """Enumerate the edges touching ``vertex`` (order irrelevant)."""
        ...

    def opposite(self, vertex: Vertex, edge: Edge) -> Vertex:
        """Return the endpoint of ``edge`` that is not ``vertex``."""
        ...

    def end_vertices(self, edge: Edge) -> Tuple[Vertex, Vertex]:
        """Return both endpoints of ``edge``."""
        ...


class GraphRepositoryPort(Protocol):
    """Port for obtaining a graph.

    Implementation: adapters/graph/matrix_repository.py
    """

    def load(self) -> GraphPort:
        """Build and return the graph.

        Returns:
            A graph ready to be searched.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation on top of the engine.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        graph: GraphPort,
        source: Vertex,
        target: Vertex,
        weight: Optional[EdgeWeight] = None,
    ) -> PathResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The graph to search.
            source: Start vertex.
            target: Finish vertex.
            weight: Optional edge-weight function.

        Returns:
            PathResult with the vertex and edge sequences.
        """
        ...

    def solve_all(
        self,
        graph: GraphPort,
        source: Vertex,
        weight: Optional[EdgeWeight] = None,
    ) -> Dict[Vertex, PathResult]:
        """Compute shortest paths from ``source`` to every vertex.

        Args:
            graph: The graph to search.
            source: Start vertex.
            weight: Optional edge-weight function.

        Returns:
            Mapping from each vertex to its PathResult.
        """
        ...
