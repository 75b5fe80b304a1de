"""Shared fixtures for the test suite."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from dijkstra_engine.adapters.graph import AdjacencyListGraph, MatrixGraphRepository
from dijkstra_engine.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Ensure every test sees configuration built from its own environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def diamond():
    """A-B 1, A-C 4, B-C 1, C-D 1, plus an isolated vertex E."""
    g = AdjacencyListGraph()
    a, b, c, d, e = (g.insert_vertex(label) for label in "ABCDE")
    edges = {
        "AB": g.insert_edge(a, b, 1.0),
        "AC": g.insert_edge(a, c, 4.0),
        "BC": g.insert_edge(b, c, 1.0),
        "CD": g.insert_edge(c, d, 1.0),
    }
    return SimpleNamespace(graph=g, A=a, B=b, C=c, D=d, E=e, edges=edges)


@pytest.fixture
def sample_graph():
    """The built-in ten-vertex sample graph."""
    return MatrixGraphRepository.default().load()
