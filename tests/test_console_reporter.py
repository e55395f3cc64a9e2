import io
import math

from sssp.adapters.reporting import ConsoleRouteReporter
from sssp.adapters.reporting.console_reporter import format_distance
from sssp.domain.models import AdjacencyCheck, GraphSummary, RouteResult, RouteStop


def test_route_line_and_subtotal():
    stream = io.StringIO()
    route = RouteResult(
        source="Chicago",
        destination="Detroit",
        stops=(RouteStop("Chicago", 0), RouteStop("Detroit", 283)),
        total_distance=283,
    )

    ConsoleRouteReporter(stream).report_route(route, title="Route 1")

    lines = stream.getvalue().splitlines()
    assert lines[1] == "Route 1"
    assert lines[3] == "Chicago (0) -> Detroit (283)"
    assert lines[4] == "Route subtotal: 283"


def test_empty_route_message():
    stream = io.StringIO()

    ConsoleRouteReporter(stream).report_route(RouteResult(source="A", destination="B"))

    assert stream.getvalue() == "No path found between A and B.\n"


def test_total_and_summary():
    stream = io.StringIO()
    reporter = ConsoleRouteReporter(stream)

    reporter.report_total(1234, 7)
    reporter.report_summary(
        GraphSummary(
            vertex_count=4,
            edge_count=3,
            source="A",
            source_degree=2,
            adjacency=(AdjacencyCheck("A", "D", False),),
        )
    )

    output = stream.getvalue()
    assert "Total distance over 7 routes: 1234" in output
    assert "Edges: 3" in output
    assert "Are A and D adjacent? no" in output


def test_defaults_to_stdout(capsys):
    ConsoleRouteReporter().report_total(5, 1)

    assert "Total distance over 1 route: 5" in capsys.readouterr().out


def test_format_distance():
    assert format_distance(0) == "0"
    assert format_distance(92) == "92"
    assert format_distance(math.inf) == "unreachable"
