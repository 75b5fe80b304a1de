"""Dijkstra Route Solver adapter.

This adapter drives the Dijkstra engine and adds:
- Domain model output (PathResult)
- Vertex validation
- Typed errors for unreachable targets
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Set

from ...domain.errors import NoPathFoundError, VertexNotFoundError
from ...domain.models import PathResult, Vertex
from ...graph.dijkstra import Dijkstra
from ...ports.graph import EdgeWeight, GraphPort


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    Implements RouteSolverPort. A fresh engine is created per call,
    so one solver can be shared between callers.

    Attributes:
        default_weight: Weight function used when a call passes none
    """

    default_weight: Optional[EdgeWeight] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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

        Raises:
            VertexNotFoundError: If source or target is not in the graph.
            NoPathFoundError: If target is unreachable from source.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": str(source), "target": str(target)},
        )

        known = self._vertex_set(graph)
        if source not in known:
            raise VertexNotFoundError(
                f"Source vertex not in graph: {source}",
                vertex=source,
            )
        if target not in known:
            raise VertexNotFoundError(
                f"Target vertex not in graph: {target}",
                vertex=target,
            )

        engine = self._engine(graph, weight)
        engine.initialize(source)
        engine.run(target)
        result = self._result(engine, source, target)

        if result.is_empty:
            self._logger.warning(
                "No route found",
                extra={"source": str(source), "target": str(target)},
            )
            raise NoPathFoundError(
                f"No path from {source} to {target}",
                source=source,
                target=target,
            )

        self._logger.info(
            "Route found",
            extra={
                "source": str(source),
                "target": str(target),
                "hops": result.num_edges,
                "distance": result.distance,
            },
        )
        return result

    def solve_safe(
        self,
        graph: GraphPort,
        source: Vertex,
        target: Vertex,
        weight: Optional[EdgeWeight] = None,
    ) -> PathResult:
        """Find the shortest path, returning an empty result on failure.

        Like solve(), but returns an empty PathResult instead of raising
        for unknown or unreachable vertices.
        """
        try:
            return self.solve(graph, source, target, weight)
        except (VertexNotFoundError, NoPathFoundError):
            return PathResult(source=source, target=target)

    def solve_all(
        self,
        graph: GraphPort,
        source: Vertex,
        weight: Optional[EdgeWeight] = None,
    ) -> Dict[Vertex, PathResult]:
        """Compute shortest paths from ``source`` to every vertex.

        Unreachable vertices map to empty results.

        Raises:
            VertexNotFoundError: If source is not in the graph.
        """
        if source not in self._vertex_set(graph):
            raise VertexNotFoundError(
                f"Source vertex not in graph: {source}",
                vertex=source,
            )

        engine = self._engine(graph, weight)
        engine.initialize(source)
        engine.run()

        results = {v: self._result(engine, source, v) for v in graph.vertices()}
        self._logger.info(
            "Shortest path tree computed",
            extra={
                "source": str(source),
                "reachable": sum(1 for r in results.values() if not r.is_empty),
            },
        )
        return results

    def _engine(self, graph: GraphPort, weight: Optional[EdgeWeight]) -> Dijkstra:
        return Dijkstra(graph, weight or self.default_weight)

    @staticmethod
    def _vertex_set(graph: GraphPort) -> Set[Vertex]:
        return set(graph.vertices())

    @staticmethod
    def _result(engine: Dijkstra, source: Vertex, target: Vertex) -> PathResult:
        return PathResult(
            source=source,
            target=target,
            distance=engine.distance_to(target),
            vertices=tuple(engine.path_vertices(target)),
            edges=tuple(engine.path_edges(target)),
        )
