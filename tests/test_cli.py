import pytest

from sssp.cli import apply_overrides, build_parser, main, parse_route
from sssp.config import get_config
from sssp.domain.errors import ConfigurationError
from sssp.domain.models import Operation

TRIANGLE_LINES = ["A,B,1", "B,C,1", "A,C,5"]


def test_parse_route():
    assert parse_route("Los Angeles:Dallas") == ("Los Angeles", "Dallas")

    for bad in ("Dallas", ":Dallas", "Dallas:"):
        with pytest.raises(ConfigurationError):
            parse_route(bad)


def test_overrides_leave_unset_values_alone(tmp_path):
    args = build_parser().parse_args(
        ["--data", str(tmp_path / "edges.csv"), "--operation", "all"]
    )

    config = apply_overrides(get_config(), args)

    assert config.graph.edges_path == tmp_path / "edges.csv"
    assert config.query.operation == Operation.ALL
    assert config.query.source_node == "Chicago"
    assert get_config().query.operation == Operation.ROUTES


def test_routes_operation(write_csv, capsys):
    path = write_csv(TRIANGLE_LINES)

    code = main(["--data", str(path), "--route", "A:C", "--route", "C:B"])

    out = capsys.readouterr().out
    assert code == 0
    assert "A (0) -> B (1) -> C (2)" in out
    assert "Total distance over 2 routes: 3" in out


def test_all_operation(write_csv, capsys):
    path = write_csv(TRIANGLE_LINES)

    code = main(["--data", str(path), "--operation", "all", "--source", "B"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Shortest distance to C from B" in out
    assert out.count("Route subtotal") == 3


def test_info_operation(write_csv, capsys):
    path = write_csv(TRIANGLE_LINES)

    code = main(
        ["--data", str(path), "--operation", "info", "--source", "A", "--adjacent", "B:C"]
    )

    out = capsys.readouterr().out
    assert code == 0
    assert "Vertices: 3" in out
    assert "Edges: 3" in out
    assert "Degree of A: 2" in out
    assert "Are B and C adjacent? yes" in out


def test_info_with_default_checks_needs_their_vertices(write_csv, capsys):
    path = write_csv(TRIANGLE_LINES)

    assert main(["--data", str(path), "--operation", "info", "--source", "A"]) == 1
    assert "Vertex not in graph: Chicago" in capsys.readouterr().err


def test_unknown_vertex_exits_with_error(write_csv, capsys):
    path = write_csv(TRIANGLE_LINES)

    code = main(["--data", str(path), "--route", "A:Z"])

    assert code == 1
    assert "Vertex not in graph: Z" in capsys.readouterr().err


def test_malformed_row_exits_with_error_unless_skipped(write_csv, capsys):
    path = write_csv(TRIANGLE_LINES + ["C,D,far"])

    assert main(["--data", str(path), "--route", "A:C"]) == 1
    assert "Weight is not a non-negative integer" in capsys.readouterr().err

    assert main(["--data", str(path), "--route", "A:C", "--skip-invalid-rows"]) == 0


def test_bad_route_argument_exits_with_error(write_csv, capsys):
    path = write_csv(TRIANGLE_LINES)

    assert main(["--data", str(path), "--route", "A-C"]) == 1
    assert "FROM:TO" in capsys.readouterr().err


def test_missing_data_file(tmp_path, capsys):
    assert main(["--data", str(tmp_path / "missing.csv")]) == 1
    assert "Failed to load graph" in capsys.readouterr().err


def test_invalid_operation_is_rejected_by_argparse():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--operation", "nope"])


def test_bundled_tour_runs(capsys):
    assert main([]) == 0
    assert "Total distance over 7 routes" in capsys.readouterr().out


def test_unknown_log_level_exits_with_error(write_csv, capsys):
    path = write_csv(TRIANGLE_LINES)

    assert main(["--data", str(path), "--route", "A:C", "--log-level", "LOUD"]) == 1
    assert "Unknown log level: 'LOUD'" in capsys.readouterr().err


def test_malformed_environment_value_exits_with_error(write_csv, monkeypatch, capsys):
    path = write_csv(TRIANGLE_LINES)
    monkeypatch.setenv("SSSP_GRAPH_SKIP_INVALID_ROWS", "sometimes")

    assert main(["--data", str(path), "--route", "A:C"]) == 1
    assert "Invalid SSSP_* environment setting" in capsys.readouterr().err
