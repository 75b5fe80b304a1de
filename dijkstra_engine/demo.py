"""Sample run of the engine on the built-in ten-vertex graph.

Prints the distance, path vertices and path edges from the source
to every vertex. The source label comes from the command line or,
failing that, from SPE_ENGINE_DEFAULT_SOURCE.

    python -m dijkstra_engine.demo [LABEL]
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .adapters.graph import DijkstraRouteSolver, MatrixGraphRepository
from .config import get_config
from .monitoring import configure_logging
from .services import PathReportService


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    config = get_config()
    configure_logging(config.observability)

    graph = MatrixGraphRepository.default(config.engine).load()

    label = args[0] if args else config.engine.default_source
    source = graph.get_vertex(label)
    if source is None:
        print(f"Unknown source vertex: {label}")
        sys.exit(1)

    service = PathReportService(route_solver=DijkstraRouteSolver())
    print(service.report(graph, source))


if __name__ == "__main__":
    main()
