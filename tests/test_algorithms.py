import pytest

from grafolab.algorithms import (
    articulation_points,
    center,
    diameter,
    dfs_tree,
    dijkstra_path,
    direct_transitive_closure,
    eccentricities,
    floyd_path,
    indirect_transitive_closure,
    kruskal_mst,
    periphery,
    prim_mst,
    radius,
)
from grafolab.graph import GraphError, parse_graph

DIRECTED = "1 0 0\n5\na\nb\nc\nd\ne\na b\nb c\nc a\nc d\n"
WEIGHTED = "0 1 0\n4\na\nb\nc\nd\na b 3\nb c 4\na c 10\nc d 1\n"
PATH3 = "0 0 0\n3\na\nb\nc\na b\nb c\n"


def _path_cost(graph, path):
    total = 0
    for source, target in zip(path, path[1:]):
        total += min(e.weight for e in graph.node(source).edges if e.target == target)
    return total


def _edge_total(tree):
    return sum(edge.weight for node in tree.nodes for edge in node.edges) // 2


def test_direct_closure():
    graph = parse_graph(DIRECTED)
    assert direct_transitive_closure(graph, "a") == ["b", "c", "d"]
    assert direct_transitive_closure(graph, "d") == []


def test_indirect_closure():
    graph = parse_graph(DIRECTED)
    assert indirect_transitive_closure(graph, "d") == ["a", "b", "c"]
    assert indirect_transitive_closure(graph, "e") == []


def test_closures_are_mutually_consistent():
    graph = parse_graph(DIRECTED)
    ids = [node.id for node in graph.nodes]
    for u in ids:
        for v in ids:
            if u != v:
                assert (v in direct_transitive_closure(graph, u)) == (
                    u in indirect_transitive_closure(graph, v)
                )


def test_closure_unknown_vertex():
    with pytest.raises(GraphError):
        direct_transitive_closure(parse_graph(DIRECTED), "z")


@pytest.mark.parametrize("finder", [dijkstra_path, floyd_path])
def test_shortest_path(finder):
    graph = parse_graph(WEIGHTED)
    assert finder(graph, "a", "d") == ["a", "b", "c", "d"]
    assert finder(graph, "b", "b") == ["b"]


def test_dijkstra_and_floyd_agree_on_cost():
    graph = parse_graph(WEIGHTED)
    ids = [node.id for node in graph.nodes]
    for u in ids:
        for v in ids:
            d_path = dijkstra_path(graph, u, v)
            f_path = floyd_path(graph, u, v)
            assert d_path[0] == f_path[0] == u
            assert d_path[-1] == f_path[-1] == v
            assert _path_cost(graph, d_path) == _path_cost(graph, f_path)


@pytest.mark.parametrize("finder", [dijkstra_path, floyd_path])
def test_unreachable_gives_empty_path(finder):
    assert finder(parse_graph(DIRECTED), "d", "a") == []


def test_dijkstra_rejects_negative_weights():
    graph = parse_graph("1 1 0\n2\na\nb\na b -1\n")
    with pytest.raises(GraphError):
        dijkstra_path(graph, "a", "b")


def test_floyd_handles_negative_edges():
    graph = parse_graph("1 1 0\n3\na\nb\nc\na b 4\na c 1\nc b -2\n")
    assert floyd_path(graph, "a", "b") == ["a", "c", "b"]


def test_floyd_rejects_negative_cycle():
    graph = parse_graph("1 1 0\n2\na\nb\na b -1\nb a -1\n")
    with pytest.raises(GraphError):
        floyd_path(graph, "a", "b")


@pytest.mark.parametrize("builder", [prim_mst, kruskal_mst])
def test_mst_spans_subset(builder):
    graph = parse_graph(WEIGHTED)
    tree = builder(graph, ["a", "b", "c", "d"])
    assert [node.id for node in tree.nodes] == ["a", "b", "c", "d"]
    assert _edge_total(tree) == 8
    assert sum(len(node.edges) for node in tree.nodes) == 2 * (tree.order - 1)
    assert direct_transitive_closure(tree, "a") == ["b", "c", "d"]


def test_prim_and_kruskal_agree():
    graph = parse_graph(WEIGHTED)
    for ids in (["a", "b", "c"], ["d", "c", "a"], ["a", "c"]):
        assert _edge_total(prim_mst(graph, ids)) == _edge_total(kruskal_mst(graph, ids))


def test_mst_on_pair_uses_the_direct_edge():
    tree = kruskal_mst(parse_graph(WEIGHTED), ["a", "c"])
    assert tree.node("a").edges[0].target == "c"
    assert tree.node("a").edges[0].weight == 10


@pytest.mark.parametrize("builder", [prim_mst, kruskal_mst])
@pytest.mark.parametrize(
    "text, ids",
    [
        (DIRECTED, ["a", "b"]),
        (WEIGHTED, ["a", "d"]),
        (WEIGHTED, ["a", "a"]),
        (WEIGHTED, ["a", "z"]),
        (WEIGHTED, []),
    ],
)
def test_mst_errors(builder, text, ids):
    with pytest.raises(GraphError):
        builder(parse_graph(text), ids)


def test_dfs_tree_undirected():
    graph = parse_graph(WEIGHTED)
    tree = dfs_tree(graph, "a")
    assert tree.order == graph.order
    assert sum(len(node.edges) for node in tree.nodes) == 2 * (tree.order - 1)
    assert tree.nodes[0].id == "a"


def test_dfs_tree_directed_follows_edges():
    tree = dfs_tree(parse_graph(DIRECTED), "a")
    assert [node.id for node in tree.nodes] == ["a", "b", "c", "d"]
    assert not tree.has_node("e")
    assert tree.directed is True
    assert tree.node("d").edges == []


def test_dfs_tree_unknown_vertex():
    with pytest.raises(GraphError):
        dfs_tree(parse_graph(DIRECTED), "z")


def test_metrics_on_path():
    graph = parse_graph(PATH3)
    assert radius(graph) == 1
    assert diameter(graph) == 2
    assert center(graph) == ["b"]
    assert periphery(graph) == ["a", "c"]


def test_metric_invariants():
    graph = parse_graph(WEIGHTED)
    values = eccentricities(graph)
    assert list(values) == ["a", "b", "c", "d"]
    assert radius(graph) <= diameter(graph)
    assert all(values[node_id] == radius(graph) for node_id in center(graph))
    assert all(values[node_id] == diameter(graph) for node_id in periphery(graph))


def test_single_vertex_metrics():
    graph = parse_graph("0 0 0\n1\na\n")
    assert radius(graph) == diameter(graph)
    assert center(graph) == periphery(graph) == ["a"]


@pytest.mark.parametrize("text", [DIRECTED, "0 0 0\n0\n"])
def test_metrics_need_connected_graph(text):
    with pytest.raises(GraphError):
        radius(parse_graph(text))


@pytest.mark.parametrize(
    "text, expected",
    [
        (PATH3, ["b"]),
        ("0 0 0\n3\na\nb\nc\na b\nb c\nc a\n", []),
        ("0 0 0\n5\na\nb\nc\nd\ne\na b\nb c\nc a\nc d\nd e\ne c\n", ["c"]),
    ],
)
def test_articulation_points(text, expected):
    assert articulation_points(parse_graph(text)) == expected