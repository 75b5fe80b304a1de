"""Ports layer - Abstract interfaces (Protocols) for the engine.

Ports define the contracts between the algorithm core and the
adapters that store graphs or consume results.
"""

from .graph import EdgeWeight, GraphPort, GraphRepositoryPort, RouteSolverPort

__all__ = [
    "EdgeWeight",
    "GraphPort",
    "GraphRepositoryPort",
    "RouteSolverPort",
]
