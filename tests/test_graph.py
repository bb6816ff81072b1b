import pytest

from grafolab.graph import Graph, GraphError, load_graph, parse_graph

SAMPLE = """0 1 0
4
a
b
c
d
a b 3
b c 4
a c 10
c d 1
"""


def test_parse_flags_and_order():
    graph = parse_graph(SAMPLE)
    assert graph.order == 4
    assert graph.directed is False
    assert graph.edge_weighted is True
    assert graph.vertex_weighted is False


def test_undirected_edges_are_mirrored():
    graph = parse_graph(SAMPLE)
    assert [edge.target for edge in graph.node("b").edges] == ["a", "c"]
    assert [edge.weight for edge in graph.node("b").edges] == [3, 4]


def test_dumps_round_trip():
    graph = parse_graph(SAMPLE)
    text = graph.dumps()
    assert parse_graph(text).dumps() == text
    assert text.splitlines()[0] == "0 1 0"


def test_dumps_writes_each_undirected_edge_once():
    lines = parse_graph(SAMPLE).dumps().splitlines()
    edge_lines = lines[2 + 4:]
    assert sorted(edge_lines) == sorted(["a b 3", "b c 4", "a c 10", "c d 1"])


def test_describe_lists_adjacency():
    text = parse_graph(SAMPLE).describe()
    assert "Tipo: Nao direcionado" in text
    assert "Ponderado (arestas): Sim" in text
    assert "Vertice a -> b (Peso: 3), c (Peso: 10)" in text
    assert text.endswith("\n\n")


def test_describe_isolated_vertex():
    graph = parse_graph("1 0 0\n2\na\nb\na b\n")
    assert "Vertice b -> sem adjacentes" in graph.describe()
    assert "Tipo: Direcionado" in graph.describe()


def test_vertex_weights_parsed_and_described():
    graph = parse_graph("1 0 1\n2\nx 5\ny 7\nx y\n")
    assert graph.node("x").weight == 5
    assert graph.node("y").edges == []
    assert "Vertice x (Peso: 5) -> y" in graph.describe()
    assert "x 5" in graph.dumps().splitlines()


def test_unknown_source_is_ignored_in_directed_graph():
    graph = parse_graph("1 0 0\n2\na\nb\nz a\na b\n")
    assert [edge.target for edge in graph.node("a").edges] == ["b"]
    assert graph.node("b").edges == []


def test_unknown_source_still_mirrored_in_undirected_graph():
    graph = parse_graph("0 0 0\n1\na\nz a\n")
    assert [edge.target for edge in graph.node("a").edges] == ["z"]


def test_ids_take_first_character():
    graph = parse_graph("0 0 0\n2\nalpha\nbeta\nalpha beta\n")
    assert graph.has_node("a")
    assert graph.has_node("b")
    assert [edge.target for edge in graph.node("a").edges] == ["b"]


def test_trailing_lone_token_is_ignored():
    graph = parse_graph("1 0 0\n2\na\nb\na b\na\n")
    assert len(graph.node("a").edges) == 1


@pytest.mark.parametrize(
    "text",
    ["", "0 x 0\n1\na\n", "0 0 0\n3\na\nb\n", "0 1 0\n2\na\nb\na b\n", "0 0 0\n2\na\na\n"],
)
def test_malformed_input_raises(text):
    with pytest.raises(GraphError):
        parse_graph(text)


def test_add_node_rejects_duplicates():
    graph = Graph()
    graph.add_node("a")
    with pytest.raises(GraphError):
        graph.add_node("a")


def test_add_edge_unknown_vertex_raises():
    graph = Graph()
    graph.add_node("a")
    with pytest.raises(GraphError):
        graph.add_edge("a", "q")


def test_node_unknown_raises():
    with pytest.raises(GraphError):
        Graph().node("a")


@pytest.mark.parametrize("directed, expected", [(False, ["a"]), (True, [])])
def test_add_edge_reverse_only_when_undirected(directed, expected):
    graph = Graph(directed=directed)
    graph.add_node("a")
    graph.add_node("b")
    graph.add_edge("a", "b", 2)
    assert [edge.target for edge in graph.node("b").edges] == expected
    assert graph.node("a").edges[0].weight == 2