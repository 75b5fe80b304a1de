import pytest

from dijkstra_engine import demo
from dijkstra_engine.adapters.graph import DijkstraRouteSolver
from dijkstra_engine.services import PathReportService


def test_report_lists_every_vertex(sample_graph):
    service = PathReportService(route_solver=DijkstraRouteSolver())
    a = sample_graph.get_vertex("A")

    results = service.build(sample_graph, a)

    assert [r.target.element for r in results] == list("ABCDEFGHIJ")


def test_render_format(sample_graph):
    service = PathReportService(route_solver=DijkstraRouteSolver())
    a = sample_graph.get_vertex("A")

    lines = service.report(sample_graph, a).splitlines()

    assert lines[0] == "A -> A: 0.0"
    assert lines[1] == "  path vertices: A"
    assert lines[2] == "  path edges:"
    assert "A -> H: 13.0" in lines
    h_row = lines.index("A -> H: 13.0")
    assert lines[h_row + 1] == "  path vertices: A D G H"
    assert lines[h_row + 2] == "  path edges: AD/4 DG/6 GH/3"


def test_render_unreachable(diamond):
    service = PathReportService(route_solver=DijkstraRouteSolver())

    lines = service.report(diamond.graph, diamond.A).splitlines()

    assert lines[-3:] == ["A -> E: inf", "  path vertices:", "  path edges:"]


def test_demo_prints_report(capsys):
    demo.main([])

    out = capsys.readouterr().out
    assert out.startswith("A -> A: 0.0")
    assert "A -> J: 10.0" in out


def test_demo_uses_configured_source(monkeypatch, capsys):
    monkeypatch.setenv("SPE_ENGINE_DEFAULT_SOURCE", "J")
    demo.main([])

    assert capsys.readouterr().out.startswith("J -> A: 10.0")


def test_demo_unknown_source_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        demo.main(["Z"])

    assert exc_info.value.code == 1
    assert "Unknown source vertex: Z" in capsys.readouterr().out
