"""Traversal, shortest-path, spanning-tree and metric algorithms on graphs."""

from __future__ import annotations

import heapq
import math
from collections import deque
from itertools import count

from grafolab.graph import Edge, Graph, GraphError

Adjacency = dict[str, list[tuple[str, int]]]


def _cost(graph: Graph, edge: Edge) -> int:
    # Unweighted graphs count every edge as one step.
    return edge.weight if graph.edge_weighted else 1


def _require(graph: Graph, *node_ids: str) -> None:
    for node_id in node_ids:
        if not graph.has_node(node_id):
            raise GraphError(f"unknown vertex: {node_id!r}")


def _adjacency(graph: Graph) -> Adjacency:
    known = {vertex.id for vertex in graph.nodes}
    return {
        vertex.id: [(edge.target, _cost(graph, edge)) for edge in vertex.edges if edge.target in known]
        for vertex in graph.nodes
    }


def _reachable(adjacency: Adjacency, start: str) -> set[str]:
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour, _ in adjacency[current]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return seen


def direct_transitive_closure(graph: Graph, node_id: str) -> list[str]:
    """Vertices reachable from node_id, in graph order."""
    _require(graph, node_id)
    reached = _reachable(_adjacency(graph), node_id)
    return [v.id for v in graph.nodes if v.id in reached and v.id != node_id]


def indirect_transitive_closure(graph: Graph, node_id: str) -> list[str]:
    """Vertices from which node_id can be reached, in graph order."""
    _require(graph, node_id)
    reverse: Adjacency = {vertex.id: [] for vertex in graph.nodes}
    for source, targets in _adjacency(graph).items():
        for target, cost in targets:
            reverse[target].append((source, cost))
    reached = _reachable(reverse, node_id)
    return [v.id for v in graph.nodes if v.id in reached and v.id != node_id]


def _walk_back(previous: dict[str, str], source: str, target: str) -> list[str]:
    path = [target]
    while path[-1] != source:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def dijkstra_path(graph: Graph, source: str, target: str) -> list[str]:
    """Shortest path by Dijkstra's algorithm; empty if target is unreachable."""
    _require(graph, source, target)
    adjacency = _adjacency(graph)
    if any(cost < 0 for targets in adjacency.values() for _, cost in targets):
        raise GraphError("Dijkstra's algorithm requires non-negative edge weights")
    distance = {source: 0}
    previous: dict[str, str] = {}
    settled: set[str] = set()
    heap = [(0, source)]
    while heap:
        current_distance, current = heapq.heappop(heap)
        if current in settled:
            continue
        settled.add(current)
        if current == target:
            break
        for neighbour, cost in adjacency[current]:
            candidate = current_distance + cost
            if neighbour not in distance or candidate < distance[neighbour]:
                distance[neighbour] = candidate
                previous[neighbour] = current
                heapq.heappush(heap, (candidate, neighbour))
    if target not in settled:
        return []
    return _walk_back(previous, source, target)


def _floyd(graph: Graph) -> tuple[dict[str, dict[str, float]], dict[str, dict[str, str | None]]]:
    ids = [vertex.id for vertex in graph.nodes]
    distance: dict[str, dict[str, float]] = {
        u: {v: (0 if u == v else math.inf) for v in ids} for u in ids
    }
    following: dict[str, dict[str, str | None]] = {
        u: {v: (u if u == v else None) for v in ids} for u in ids
    }
    for source, targets in _adjacency(graph).items():
        for target, cost in targets:
            if cost < distance[source][target]:
                distance[source][target] = cost
                following[source][target] = target
    for middle in ids:
        for u in ids:
            through = distance[u][middle]
            if through == math.inf:
                continue
            for v in ids:
                candidate = through + distance[middle][v]
                if candidate < distance[u][v]:
                    distance[u][v] = candidate
                    following[u][v] = following[u][middle]
    if any(distance[u][u] < 0 for u in ids):
        raise GraphError("graph contains a negative cycle")
    return distance, following


def floyd_path(graph: Graph, source: str, target: str) -> list[str]:
    """Shortest path by the Floyd-Warshall algorithm; empty if unreachable."""
    _require(graph, source, target)
    distance, following = _floyd(graph)
    if distance[source][target] == math.inf:
        return []
    path = [source]
    while path[-1] != target:
        step = following[path[-1]][target]
        assert step is not None
        path.append(step)
    return path


def _induced_edges(graph: Graph, node_ids: list[str]) -> list[tuple[int, str, str, int]]:
    if graph.directed:
        raise GraphError("minimum spanning trees require an undirected graph")
    if not node_ids:
        raise GraphError("the vertex subset is empty")
    if len(set(node_ids)) != len(node_ids):
        raise GraphError("the vertex subset has repeated vertices")
    _require(graph, *node_ids)
    members = set(node_ids)
    return [
        (_cost(graph, edge), vertex.id, edge.target, edge.weight)
        for vertex in graph.nodes
        if vertex.id in members
        for edge in vertex.edges
        if edge.target in members and edge.target != vertex.id
    ]


def _empty_tree(graph: Graph, node_ids: list[str]) -> Graph:
    tree = Graph(
        directed=False,
        edge_weighted=graph.edge_weighted,
        vertex_weighted=graph.vertex_weighted,
    )
    for node_id in node_ids:
        tree.add_node(node_id, graph.node(node_id).weight)
    return tree


def prim_mst(graph: Graph, node_ids: list[str]) -> Graph:
    """Minimum spanning tree of the induced subgraph, by Prim's algorithm."""
    node_ids = list(node_ids)
    edges = _induced_edges(graph, node_ids)
    adjacency: dict[str, list[tuple[int, str, int]]] = {node_id: [] for node_id in node_ids}
    for cost, source, target, weight in edges:
        adjacency[source].append((cost, target, weight))
    tree = _empty_tree(graph, node_ids)
    in_tree = {node_ids[0]}
    tie = count()
    heap: list[tuple[int, int, str, str, int]] = []

    def push(vertex: str) -> None:
        for cost, target, weight in adjacency[vertex]:
            if target not in in_tree:
                heapq.heappush(heap, (cost, next(tie), vertex, target, weight))

    push(node_ids[0])
    while heap and len(in_tree) < len(node_ids):
        _, _, source, target, weight = heapq.heappop(heap)
        if target in in_tree:
            continue
        in_tree.add(target)
        tree.add_edge(source, target, weight)
        push(target)
    if len(in_tree) < len(node_ids):
        raise GraphError("the induced subgraph is not connected")
    return tree


def kruskal_mst(graph: Graph, node_ids: list[str]) -> Graph:
    """Minimum spanning tree of the induced subgraph, by Kruskal's algorithm."""
    node_ids = list(node_ids)
    edges = sorted(_induced_edges(graph, node_ids), key=lambda item: item[0])
    tree = _empty_tree(graph, node_ids)
    parent = {node_id: node_id for node_id in node_ids}

    def find(vertex: str) -> str:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    added = 0
    for _, source, target, weight in edges:
        root_source, root_target = find(source), find(target)
        if root_source != root_target:
            parent[root_source] = root_target
            tree.add_edge(source, target, weight)
            added += 1
    if added != len(node_ids) - 1:
        raise GraphError("the induced subgraph is not connected")
    return tree


def dfs_tree(graph: Graph, node_id: str) -> Graph:
    """Depth-first search tree rooted at node_id."""
    _require(graph, node_id)
    lookup = {vertex.id: vertex for vertex in graph.nodes}
    tree = Graph(
        directed=graph.directed,
        edge_weighted=graph.edge_weighted,
        vertex_weighted=graph.vertex_weighted,
    )
    tree.add_node(node_id, lookup[node_id].weight)
    visited = {node_id}
    stack = [(node_id, iter(lookup[node_id].edges))]
    while stack:
        current, pending = stack[-1]
        for edge in pending:
            target = edge.target
            if target in lookup and target not in visited:
                visited.add(target)
                tree.add_node(target, lookup[target].weight)
                tree.add_edge(current, target, edge.weight)
                stack.append((target, iter(lookup[target].edges)))
                break
        else:
            stack.pop()
    return tree


def eccentricities(graph: Graph) -> dict[str, int]:
    """Eccentricity of every vertex, in graph order."""
    if not graph.nodes:
        raise GraphError("the graph has no vertices")
    distance, _ = _floyd(graph)
    result: dict[str, int] = {}
    for vertex in graph.nodes:
        farthest = max(distance[vertex.id].values())
        if farthest == math.inf:
            raise GraphError("the graph is not connected")
        result[vertex.id] = int(farthest)
    return result


def radius(graph: Graph) -> int:
    return min(eccentricities(graph).values())


def diameter(graph: Graph) -> int:
    return max(eccentricities(graph).values())


def center(graph: Graph) -> list[str]:
    """Vertices whose eccentricity equals the radius."""
    values = eccentricities(graph)
    smallest = min(values.values())
    return [node_id for node_id, value in values.items() if value == smallest]


def periphery(graph: Graph) -> list[str]:
    """Vertices whose eccentricity equals the diameter."""
    values = eccentricities(graph)
    largest = max(values.values())
    return [node_id for node_id, value in values.items() if value == largest]


def articulation_points(graph: Graph) -> list[str]:
    """Cut vertices of the underlying undirected graph, in graph order."""
    ids = [vertex.id for vertex in graph.nodes]
    neighbours: dict[str, dict[str, None]] = {node_id: {} for node_id in ids}
    for vertex in graph.nodes:
        for edge in vertex.edges:
            if edge.target in neighbours and edge.target != vertex.id:
                neighbours[vertex.id][edge.target] = None
                neighbours[edge.target][vertex.id] = None

    discovered: dict[str, int] = {}
    low: dict[str, int] = {}
    points: set[str] = set()
    clock = count()
    for root in ids:
        if root in discovered:
            continue
        discovered[root] = low[root] = next(clock)
        root_children = 0
        stack: list[tuple[str, str | None, object]] = [(root, None, iter(neighbours[root]))]
        while stack:
            current, parent, pending = stack[-1]
            advanced = False
            for neighbour in pending:  # type: ignore[attr-defined]
                if neighbour not in discovered:
                    discovered[neighbour] = low[neighbour] = next(clock)
                    stack.append((neighbour, current, iter(neighbours[neighbour])))
                    advanced = True
                    break
                if neighbour != parent:
                    low[current] = min(low[current], discovered[neighbour])
            if advanced:
                continue
            stack.pop()
            if parent is None:
                continue
            low[parent] = min(low[parent], low[current])
            if parent == root:
                root_children += 1
            elif low[current] >= discovered[parent]:
                points.add(parent)
        if root_children > 1:
            points.add(root)
    return [node_id for node_id in ids if node_id in points]