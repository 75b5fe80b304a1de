"""Weight-matrix graph repository adapter.

Builds an undirected AdjacencyListGraph from vertex labels and a
symmetric weight matrix. Cells equal to the configured no-edge marker
are skipped, and only the upper triangle is read, so each pair of
vertices yields at most one edge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ...config import EngineConfig, get_config
from ...domain.errors import GraphError
from .adjacency_list import AdjacencyListGraph

SAMPLE_LABELS = ("A", "B", "C", "D", "E", "F", "G", "H", "I", "J")

SAMPLE_WEIGHTS = (
    (-1, 6, -1, 4, -1, -1, -1, -1, 9, -1),
    (6, -1, 3, 3, 1, -1, -1, -1, -1, -1),
    (-1, 3, -1, -1, 2, 2, -1, -1, -1, -1),
    (4, 3, -1, -1, 4, -1, 6, -1, -1, -1),
    (-1, 1, 2, 4, -1, 8, 6, 7, -1, -1),
    (-1, -1, 2, -1, 8, -1, -1, 11, -1, -1),
    (-1, -1, -1, 6, 6, -1, -1, 3, 2, 2),
    (-1, -1, -1, -1, 7, 11, 3, -1, -1, 4),
    (9, -1, -1, -1, -1, -1, 2, -1, -1, 1),
    (-1, -1, -1, -1, -1, -1, 2, 4, 1, -1),
)


@dataclass
class MatrixGraphRepository:
    """Graph repository backed by an in-memory weight matrix.

    Implements GraphRepositoryPort. The graph is built on the first
    call to load() and cached afterwards.

    Attributes:
        labels: Vertex payloads, one per matrix row
        weights: Square matrix of edge weights
        config: Engine configuration (no-edge marker)
    """

    labels: Sequence[Any]
    weights: Sequence[Sequence[float]]
    config: EngineConfig = field(default_factory=lambda: get_config().engine)
    _logger: logging.Logger = field(init=False, repr=False)

    _graph: Optional[AdjacencyListGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def default(cls, config: Optional[EngineConfig] = None) -> MatrixGraphRepository:
        """Repository for the built-in ten-vertex sample graph."""
        if config is None:
            return cls(labels=SAMPLE_LABELS, weights=SAMPLE_WEIGHTS)
        return cls(labels=SAMPLE_LABELS, weights=SAMPLE_WEIGHTS, config=config)

    def load(self) -> AdjacencyListGraph:
        """Build the graph from the matrix.

        Returns:
            The undirected graph.

        Raises:
            GraphError: If the matrix is not square or does not match
                the number of labels.
        """
        if self._graph is not None:
            return self._graph

        size = len(self.labels)
        if len(self.weights) != size or any(len(row) != size for row in self.weights):
            raise GraphError(
                f"Weight matrix must be {size}x{size} to match the labels",
                vertex_count=size,
            )

        graph = AdjacencyListGraph()
        verts = [graph.insert_vertex(label) for label in self.labels]

        marker = self.config.no_edge_marker
        for u in range(size):
            for v in range(u + 1, size):
                if self.weights[u][v] == marker:
                    continue
                graph.insert_edge(verts[u], verts[v], self.weights[u][v])

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": graph.num_vertices(), "edges": graph.num_edges()},
        )
        return graph

    def clear_cache(self) -> None:
        """Drop the cached graph so the next load() rebuilds it."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
