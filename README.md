# grafolab

grafolab loads a graph from a plain-text file and runs classic graph
algorithms on it, either from an interactive menu or as a library.
Every vertex is named by a single character.

## Installing

    pip install .

With the test dependencies:

    pip install ".[test]"

## Input format

The first line holds three flags, each `0` or `1`: directed, weighted
edges, weighted vertices. The second line holds the number of vertices.
Next comes one entry per vertex: its id, followed by its weight if
vertices are weighted. Everything after that is a list of edges: source,
target, and a weight if edges are weighted.

    0 1 0
    4
    a
    b
    c
    d
    a b 3
    b c 1
    a c 5
    c d 2

The input is read as whitespace-separated tokens, so line breaks are not
significant. Only the first character of each id token is used. In an
undirected graph each edge is stored in both directions. An edge whose
source is not a declared vertex is dropped; a trailing lone token is
ignored. Missing or non-integer flags, counts and weights, and duplicate
vertex ids, raise `GraphError`.

## Command line

    grafolab graph.txt

Without an argument it prints a usage line and exits with status 1; if
the file cannot be read or parsed it reports the error and exits with
status 1. Otherwise it shows a menu:

- (a) direct transitive closure of a vertex
- (b) indirect transitive closure of a vertex
- (c) shortest path using Dijkstra
- (d) shortest path using Floyd
- (e) minimum spanning tree of a vertex subset using Prim
- (f) minimum spanning tree of a vertex subset using Kruskal
- (g) depth-first traversal tree
- (h) radius, diameter, center and periphery
- (0) quit

The menu repeats until `0` or end of input. For (e) and (f) you first
give the size of the subset, then that many distinct, existing vertex
ids. Errors raised by an algorithm (unknown vertex, disconnected graph,
and so on) are printed as `Erro: ...` and the menu continues.

After each result you are asked whether to write it to a file in the
current directory: `fecho_trans_dir.txt`, `fecho_trans_indir.txt`,
`caminho_minimo_dijkstra.txt`, `caminho_minimo_floyd.txt`,
`agm_prim.txt`, `agm_kruskal.txt`,
`arvore_caminhamento_profundidade.txt` or `propriedades_grafo.txt`.
Trees are written in the input format, so they can be loaded again.

## Library use

```python
from grafolab.graph import load_graph
from grafolab.algorithms import dijkstra_path, prim_mst, radius, center
from grafolab.reports import format_path

graph = load_graph("graph.txt")
path = dijkstra_path(graph, "a", "d")
print(format_path(path, "SHORTEST PATH"))

tree = prim_mst(graph, ["a", "b", "c"])
print(tree.describe())
tree.save("tree.txt")

print(radius(graph), center(graph))
```

### `grafolab.graph`

- `Graph` holds the flags `directed`, `edge_weighted`,
  `vertex_weighted` and the ordered list `nodes` of `Node` objects, each
  with an `id`, a `weight` and a list of `Edge` objects (`target`,
  `weight`).
- `Graph.order`, `Graph.node(id)`, `Graph.has_node(id)`,
  `Graph.add_node(id, weight=0)`, `Graph.add_edge(source, target, weight=0)`
  (an undirected graph also gets the reverse edge).
- `Graph.describe()` returns a readable summary and adjacency list.
- `Graph.dumps()` and `Graph.save(path)` write the input format; edges
  of an undirected graph are written only once.
- `parse_graph(text)` and `load_graph(path)` read it.

### `grafolab.algorithms`

In a graph without edge weights every edge counts as 1.

- `direct_transitive_closure(graph, id)` and
  `indirect_transitive_closure(graph, id)`: vertices reachable from, or
  reaching, the given vertex, in graph order.
- `dijkstra_path(graph, source, target)` and
  `floyd_path(graph, source, target)`: a shortest path as a list of ids,
  or an empty list if there is none. Dijkstra rejects negative weights;
  Floyd rejects negative cycles.
- `prim_mst(graph, ids)` and `kruskal_mst(graph, ids)`: minimum spanning
  tree of the subgraph induced by `ids`, as a new `Graph`. The graph must
  be undirected and the induced subgraph connected.
- `dfs_tree(graph, id)`: depth-first search tree rooted at `id`.
- `eccentricities(graph)`, `radius(graph)`, `diameter(graph)`,
  `center(graph)`, `periphery(graph)`: these require a non-empty graph in
  which every vertex reaches every other.
- `articulation_points(graph)`: cut vertices of the underlying
  undirected graph, in graph order.

Unknown vertices and unmet requirements raise `GraphError`.

### `grafolab.reports`

`format_vertices`, `format_path` and `format_properties` return the text
blocks the menu prints; `save_vertices`, `save_path` and
`save_properties` write the corresponding files. A path's total distance
is shown only when a non-negative `distance` is given.

## What it does not do

The interactive menu has no entry for articulation points; call
`articulation_points` from Python instead. Vertex ids are limited to a
single character.