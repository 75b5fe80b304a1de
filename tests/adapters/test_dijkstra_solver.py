"""Tests for the Dijkstra route solver adapter."""

import math

import pytest

from dijkstra_engine.adapters.graph import AdjacencyListGraph, DijkstraRouteSolver
from dijkstra_engine.domain.errors import NoPathFoundError, VertexNotFoundError
from dijkstra_engine.graph.weights import unit_weight


@pytest.fixture
def solver():
    return DijkstraRouteSolver()


def test_solve_returns_path_result(solver, diamond):
    result = solver.solve(diamond.graph, diamond.A, diamond.D)

    assert result.source == diamond.A
    assert result.target == diamond.D
    assert result.distance == 3.0
    assert result.vertices == (diamond.A, diamond.B, diamond.C, diamond.D)
    assert result.num_edges == 3
    assert not result.is_empty


def test_solve_source_to_itself(solver, diamond):
    result = solver.solve(diamond.graph, diamond.B, diamond.B)

    assert result.distance == 0.0
    assert result.vertices == (diamond.B,)
    assert result.edges == ()


def test_solve_unreachable_raises(solver, diamond):
    with pytest.raises(NoPathFoundError) as exc_info:
        solver.solve(diamond.graph, diamond.A, diamond.E)
    assert exc_info.value.source == diamond.A
    assert exc_info.value.target == diamond.E


def test_solve_unknown_vertex_raises(solver, diamond):
    stranger = AdjacencyListGraph().insert_vertex("Z")

    with pytest.raises(VertexNotFoundError):
        solver.solve(diamond.graph, stranger, diamond.A)
    with pytest.raises(VertexNotFoundError):
        solver.solve(diamond.graph, diamond.A, stranger)


def test_solve_safe_returns_empty_result(solver, diamond):
    result = solver.solve_safe(diamond.graph, diamond.A, diamond.E)

    assert result.is_empty
    assert math.isinf(result.distance)


def test_solve_with_weight_override(solver, diamond):
    result = solver.solve(diamond.graph, diamond.A, diamond.D, weight=unit_weight)

    assert result.distance == 2.0
    assert result.vertices == (diamond.A, diamond.C, diamond.D)


def test_default_weight_is_used(diamond):
    solver = DijkstraRouteSolver(default_weight=unit_weight)
    result = solver.solve(diamond.graph, diamond.A, diamond.D)

    assert result.distance == 2.0


def test_solve_all(solver, diamond):
    tree = solver.solve_all(diamond.graph, diamond.A)

    assert set(tree) == set(diamond.graph.vertices())
    assert tree[diamond.C].distance == 2.0
    assert tree[diamond.E].is_empty


def test_solve_logs_route(solver, diamond, caplog):
    with caplog.at_level("INFO", logger="dijkstra_engine.adapters.graph.dijkstra_solver"):
        solver.solve(diamond.graph, diamond.A, diamond.D)

    assert "Route found" in caplog.text


def test_solve_logs_missing_route(solver, diamond, caplog):
    with caplog.at_level("WARNING", logger="dijkstra_engine.adapters.graph.dijkstra_solver"):
        solver.solve_safe(diamond.graph, diamond.A, diamond.E)

    assert "No route found" in caplog.text
