import pytest

from shortpath.domain.errors import GraphError, GraphParseError
from shortpath.graph.load_graph import (
    build_graph,
    format_adjacency_list,
    format_adjacency_matrix,
    parse_adjacency_list,
    parse_adjacency_matrix,
    split_node_names,
    validate_graph,
)


def test_parse_adjacency_list_mirrors_edges():
    graph = parse_adjacency_list("A B 1\nB C 2\n")

    assert graph == {"A": {"B": 1}, "B": {"A": 1, "C": 2}, "C": {"B": 2}}


def test_parse_adjacency_list_skips_blank_lines_and_extra_spaces():
    graph = parse_adjacency_list("\n   A    B   3  \n\n\tC D 0\n")

    assert graph["A"] == {"B": 3}
    assert graph["D"] == {"C": 0}


def test_parse_adjacency_list_single_token_declares_isolated_node():
    graph = parse_adjacency_list("A B 1\nX\n")

    assert graph["X"] == {}


def test_parse_adjacency_list_repeated_edge_keeps_last_weight():
    graph = parse_adjacency_list("A B 1\nB A 5\n")

    assert graph == {"A": {"B": 5}, "B": {"A": 5}}


@pytest.mark.parametrize("line", ["A B", "A B 1 2"])
def test_parse_adjacency_list_rejects_bad_token_count(line):
    with pytest.raises(GraphParseError) as excinfo:
        parse_adjacency_list(f"A C 1\n{line}")

    assert excinfo.value.line_number == 2
    assert "Expected format: Node1 Node2 Weight" in excinfo.value.message


@pytest.mark.parametrize("weight", ["-1", "abc", "1.5"])
def test_parse_adjacency_list_rejects_bad_weight(weight):
    with pytest.raises(GraphParseError) as excinfo:
        parse_adjacency_list(f"A B {weight}")

    assert "non-negative integer" in str(excinfo.value)


def test_parse_adjacency_list_empty_text():
    assert parse_adjacency_list("") == {}


def test_split_node_names():
    assert split_node_names(" A, B ,,C ") == ["A", "B", "C"]
    assert split_node_names(["A", " ", "B"]) == ["A", "B"]


def test_parse_adjacency_matrix_sample():
    matrix = "0 1 4\n1 0 2\n4 2 0"

    graph = parse_adjacency_matrix(matrix, "A,B,C")

    assert graph == {
        "A": {"B": 1, "C": 4},
        "B": {"A": 1, "C": 2},
        "C": {"A": 4, "B": 2},
    }


def test_parse_adjacency_matrix_upper_triangle_is_mirrored():
    graph = parse_adjacency_matrix("0 3\n0 0", ["A", "B"])

    assert graph == {"A": {"B": 3}, "B": {"A": 3}}


def test_parse_adjacency_matrix_names_without_rows_are_isolated():
    assert parse_adjacency_matrix("", "X, Y") == {"X": {}, "Y": {}}


def test_parse_adjacency_matrix_empty_everything():
    assert parse_adjacency_matrix("", "") == {}


def test_parse_adjacency_matrix_requires_names():
    with pytest.raises(GraphParseError, match="Node names are required"):
        parse_adjacency_matrix("0 1\n1 0", "")


def test_parse_adjacency_matrix_rejects_duplicate_names():
    with pytest.raises(GraphParseError, match="unique"):
        parse_adjacency_matrix("0 1\n1 0", "A,A")


def test_parse_adjacency_matrix_rejects_wrong_row_count():
    with pytest.raises(GraphParseError, match="row count"):
        parse_adjacency_matrix("0 1\n1 0", "A,B,C")


def test_parse_adjacency_matrix_rejects_wrong_column_count():
    with pytest.raises(GraphParseError, match="column count in row 2"):
        parse_adjacency_matrix("0 1\n1", "A,B")


@pytest.mark.parametrize("cell", ["x", "-2"])
def test_parse_adjacency_matrix_rejects_bad_cell(cell):
    with pytest.raises(GraphParseError, match=r"\[1,2\]"):
        parse_adjacency_matrix(f"0 {cell}\n0 0", "A,B")


def test_parse_adjacency_matrix_rejects_asymmetric_cells():
    with pytest.raises(GraphParseError, match="Asymmetric"):
        parse_adjacency_matrix("0 1\n2 0", "A,B")


def test_build_graph_includes_isolated_nodes():
    graph = build_graph([("A", "B", 2)], nodes=["C"])

    assert graph == {"C": {}, "A": {"B": 2}, "B": {"A": 2}}


@pytest.mark.parametrize("weight", [-1, 1.5, "3", True])
def test_build_graph_rejects_bad_weight(weight):
    with pytest.raises(GraphError):
        build_graph([("A", "B", weight)])


def test_validate_graph_accepts_symmetric_graph():
    validate_graph({"A": {"B": 0}, "B": {"A": 0}, "C": {}})


@pytest.mark.parametrize(
    "graph",
    [
        {"A": {"B": 1}, "B": {}},
        {"A": {"B": 1}, "B": {"A": 2}},
        {"A": {"B": 1}},
        {"A": {"B": -1}, "B": {"A": -1}},
    ],
)
def test_validate_graph_rejects_malformed_graph(graph):
    with pytest.raises(GraphError):
        validate_graph(graph)


def test_format_adjacency_list_round_trip():
    graph = build_graph([("A", "B", 1), ("B", "C", 2)], nodes=["X"])

    text = format_adjacency_list(graph)

    assert text.splitlines() == ["A B 1", "B C 2", "X"]
    assert parse_adjacency_list(text) == graph


def test_format_adjacency_matrix_orders_columns():
    graph = build_graph([("A", "B", 1), ("B", "C", 2)])

    matrix, names = format_adjacency_matrix(graph, "C")

    assert names == ["C", "A", "B"]
    assert matrix.splitlines() == ["0 0 2", "0 0 1", "2 1 0"]
    assert parse_adjacency_matrix(matrix, names) == {
        "C": {"B": 2},
        "A": {"B": 1},
        "B": {"A": 1, "C": 2},
    }


@pytest.mark.parametrize("weight", ["1_000", "+3", "٣"])
def test_parse_adjacency_list_accepts_only_plain_digits(weight):
    with pytest.raises(GraphParseError):
        parse_adjacency_list(f"A B {weight}")


@pytest.mark.parametrize("cell", ["1_0", "+3", "٣"])
def test_parse_adjacency_matrix_accepts_only_plain_digits(cell):
    with pytest.raises(GraphParseError, match="Must be an integer"):
        parse_adjacency_matrix(f"0 {cell}\n{cell} 0", "A,B")


def test_parse_adjacency_matrix_reports_source_line_numbers():
    with pytest.raises(GraphParseError) as excinfo:
        parse_adjacency_matrix("0 1\n\n1 x", "A,B", first_line=5)

    assert excinfo.value.line_number == 7


def test_format_adjacency_matrix_rejects_zero_weight_edge():
    graph = parse_adjacency_list("A B 0\nB C 2")

    with pytest.raises(GraphError, match="weight 0"):
        format_adjacency_matrix(graph)
