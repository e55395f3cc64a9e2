import pytest

from sssp.domain.errors import RowParseError, VertexNotFoundError
from sssp.graph import Edge, GraphBuilder, build_graph, parse_weight


def test_adjacency_and_degree_after_build():
    graph = build_graph([("A", "B", 5), ("B", "C", 3)])

    assert graph.are_adjacent("A", "B")
    assert graph.are_adjacent("B", "A")
    assert not graph.are_adjacent("A", "C")
    assert graph.degree("B") == 2
    assert graph.vertex_count() == 3
    assert graph.edge_count() == 2


def test_vertices_keep_first_seen_order():
    graph = build_graph([("C", "A", 1), ("A", "B", 2), ("B", "D", 1)])

    assert [v.name for v in graph.all_vertices()] == ["C", "A", "B", "D"]
    assert [v.index for v in graph] == [0, 1, 2, 3]


def test_duplicate_row_adds_one_edge_each_way():
    graph = build_graph([("A", "B", 5), ("A", "B", 5)])

    assert graph.degree("A") == 1
    assert graph.degree("B") == 1
    assert graph.edge_count() == 1
    assert graph.incident_edges("A") == [Edge(source=0, target=1, weight=5)]


def test_reversed_row_does_not_add_or_reweigh_edges():
    graph = build_graph([("A", "B", 5), ("B", "A", 7)])

    assert graph.degree("A") == 1
    assert graph.degree("B") == 1
    assert graph.incident_edges("B")[0].weight == 5


def test_names_are_case_sensitive():
    graph = build_graph([("a", "A", 1)])

    assert graph.vertex_count() == 2
    assert "a" in graph and "A" in graph


def test_self_loop_row_creates_a_single_vertex():
    graph = build_graph([("A", "A", 3), ("A", "B", 2)])

    assert graph.vertex_count() == 2
    assert graph.degree("A") == 2
    assert graph.degree("B") == 1
    assert graph.are_adjacent("A", "A")
    assert graph.edge_count() == 2


def test_neighbors_follow_edge_order():
    graph = build_graph([("A", "B", 1), ("A", "C", 2), ("D", "A", 3)])

    assert [v.name for v in graph.neighbors("A")] == ["B", "C", "D"]


def test_unknown_name_raises_not_found():
    graph = build_graph([("A", "B", 1)])

    with pytest.raises(VertexNotFoundError) as excinfo:
        graph.degree("Z")
    assert excinfo.value.vertex_name == "Z"

    with pytest.raises(VertexNotFoundError):
        graph.are_adjacent("A", "Z")
    with pytest.raises(VertexNotFoundError) as excinfo:
        graph.are_adjacent("Y", "Z")
    assert excinfo.value.vertex_name == "Y"
    with pytest.raises(VertexNotFoundError):
        graph.neighbors("Z")


def test_vertices_compare_by_identity_not_edges():
    graph = build_graph([("A", "B", 1)])

    assert graph.get_vertex("A") == graph.all_vertices()[0]
    assert graph.get_vertex("A") != graph.get_vertex("B")
    assert len({graph.get_vertex("A"), graph.vertex_at(0)}) == 1


@pytest.mark.parametrize(
    "raw, expected",
    [("0", 0), (" 12 ", 12), ("092", 92), (7, 7), (0, 0)],
)
def test_parse_weight_accepts_non_negative_integers(raw, expected):
    assert parse_weight(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "abc", "-3", "1.5", "5_0", "+4", "\u0663", "\u00b2", -1, True, None, 2.0],
)
def test_parse_weight_rejects_everything_else(raw):
    with pytest.raises(RowParseError) as excinfo:
        parse_weight(raw, row_number=4)
    assert excinfo.value.field_name == "weight"
    assert excinfo.value.row_number == 4


def test_zero_weight_is_distinct_from_malformed_weight():
    graph = build_graph([("A", "B", "0")])
    assert graph.incident_edges("A")[0].weight == 0

    with pytest.raises(RowParseError) as excinfo:
        build_graph([("A", "B", "1"), ("A", "C", "x")])
    assert excinfo.value.row_number == 2
    assert excinfo.value.raw_value == "x"


def test_empty_name_is_a_parse_failure():
    with pytest.raises(RowParseError) as excinfo:
        build_graph([("", "B", 1)])
    assert excinfo.value.field_name == "source"

    with pytest.raises(RowParseError) as excinfo:
        build_graph([("A", "", 1)])
    assert excinfo.value.field_name == "destination"


def test_lenient_builder_records_rejected_rows():
    builder = GraphBuilder(skip_invalid_rows=True)
    builder.add_rows(
        [
            ("A", "B", "1"),
            ("B", "C", "oops"),
            ("", "C", "2"),
            ("C", "D", "4"),
        ]
    )
    graph = builder.build()

    assert [v.name for v in graph] == ["A", "B", "C", "D"]
    assert not graph.are_adjacent("B", "C")
    assert graph.are_adjacent("C", "D")
    assert [r.row_number for r in builder.rejected_rows] == [2, 3]
    assert builder.rejected_rows[0].values == ("B", "C", "oops")


def test_add_row_reports_whether_it_applied():
    builder = GraphBuilder(skip_invalid_rows=True)

    assert builder.add_row("A", "B", 1) is True
    assert builder.add_row("A", "B", "bad") is False


def test_isolated_vertex_has_no_edges():
    builder = GraphBuilder()
    builder.add_row("A", "B", 1)
    island = builder.add_vertex("D")
    graph = builder.build()

    assert builder.add_vertex("D") is island
    assert graph.degree("D") == 0
    assert graph.neighbors("D") == []
    assert graph.edge_count() == 1
    assert graph.vertex_count() == 3


def test_built_graph_ignores_later_rows():
    builder = GraphBuilder()
    builder.add_row("A", "B", 1)
    graph = builder.build()

    builder.add_row("A", "C", 1)

    assert graph.vertex_count() == 2
    assert graph.edge_count() == 1
    assert graph.degree("A") == 1
    assert [v.name for v in graph.neighbors("A")] == ["B"]
    assert builder.build().degree("A") == 2
