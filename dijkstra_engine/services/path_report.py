"""Path report service - Shortest-path summary for every vertex.

Runs one full search from a source and renders, for each vertex,
the distance, the vertices on its path and the edges on its path:

    A -> D: 4.0
      path vertices: A D
      path edges: AD/4
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..domain.models import Edge, PathResult, Vertex
from ..ports.graph import EdgeWeight, GraphPort, RouteSolverPort


@dataclass
class PathReportService:
    """Builds and renders shortest-path reports.

    Attributes:
        route_solver: Computes the shortest-path tree
        weight: Optional edge-weight function passed to the solver
    """

    route_solver: RouteSolverPort
    weight: Optional[EdgeWeight] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build(self, graph: GraphPort, source: Vertex) -> List[PathResult]:
        """Compute one PathResult per vertex, in graph vertex order."""
        tree = self.route_solver.solve_all(graph, source, self.weight)
        return [tree[v] for v in graph.vertices()]

    def render(self, graph: GraphPort, results: Sequence[PathResult]) -> str:
        """Format results as the three-line-per-vertex report."""
        lines: List[str] = []
        for result in results:
            lines.append(f"{result.source} -> {result.target}: {result.distance}")
            lines.append(
                "  path vertices:" + "".join(f" {v}" for v in result.vertices)
            )
            lines.append(
                "  path edges:"
                + "".join(f" {self._edge_label(graph, e)}" for e in result.edges)
            )
        return "\n".join(lines)

    def report(self, graph: GraphPort, source: Vertex) -> str:
        """Build and render the report for ``source``."""
        results = self.build(graph, source)
        self._logger.debug(
            "Report built",
            extra={"source": str(source), "rows": len(results)},
        )
        return self.render(graph, results)

    @staticmethod
    def _edge_label(graph: GraphPort, edge: Edge) -> str:
        first, second = graph.end_vertices(edge)
        return f"{first}{second}/{edge.element}"
