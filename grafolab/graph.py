"""Adjacency-list graph model and its plain-text file format."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


class GraphError(Exception):
    """Raised for malformed graph data or references to unknown vertices."""


@dataclass
class Edge:
    """An outgoing edge, identified by the vertex it points to."""

    target: str
    weight: int = 0


@dataclass
class Node:
    """A vertex with its optional weight and its outgoing edges."""

    id: str
    weight: int = 0
    edges: list[Edge] = field(default_factory=list)


@dataclass
class Graph:
    """A graph stored as an ordered adjacency list."""

    directed: bool = False
    edge_weighted: bool = False
    vertex_weighted: bool = False
    nodes: list[Node] = field(default_factory=list)

    @property
    def order(self) -> int:
        """Number of vertices."""
        return len(self.nodes)

    def node(self, node_id: str) -> Node:
        """Return the vertex with the given id."""
        for candidate in self.nodes:
            if candidate.id == node_id:
                return candidate
        raise GraphError(f"unknown vertex: {node_id!r}")

    def has_node(self, node_id: str) -> bool:
        return any(candidate.id == node_id for candidate in self.nodes)

    def add_node(self, node_id: str, weight: int = 0) -> Node:
        """Append a new vertex and return it."""
        if not isinstance(node_id, str) or not node_id:
            raise GraphError(f"invalid vertex id: {node_id!r}")
        if self.has_node(node_id):
            raise GraphError(f"duplicate vertex: {node_id!r}")
        created = Node(node_id, weight)
        self.nodes.append(created)
        return created

    def add_edge(self, source: str, target: str, weight: int = 0) -> Edge:
        """Add an edge; undirected graphs also get the reverse edge."""
        origin = self.node(source)
        destination = self.node(target)
        edge = Edge(target, weight)
        origin.edges.append(edge)
        if not self.directed:
            destination.edges.append(Edge(source, weight))
        return edge

    def describe(self) -> str:
        """Human-readable summary of the structure and adjacency list."""
        lines = [
            "==========ESTRUTURA DO GRAFO==========",
            f"Ordem: {self.order} vertices",
            f"Tipo: {'Direcionado' if self.directed else 'Nao direcionado'}",
            f"Ponderado (vertices): {'Sim' if self.vertex_weighted else 'Nao'}",
            f"Ponderado (arestas): {'Sim' if self.edge_weighted else 'Nao'}",
            "=========================================",
            "",
            "LISTA DE ADJACENCIA:",
        ]
        for vertex in self.nodes:
            head = f"Vertice {vertex.id}"
            if self.vertex_weighted:
                head += f" (Peso: {vertex.weight})"
            if vertex.edges:
                adjacent = ", ".join(
                    edge.target + (f" (Peso: {edge.weight})" if self.edge_weighted else "")
                    for edge in vertex.edges
                )
            else:
                adjacent = "sem adjacentes"
            lines.append(f"{head} -> {adjacent}")
        return "\n".join(lines) + "\n\n"

    def dumps(self) -> str:
        """Serialise the graph in the same format that parse_graph reads."""
        lines = [
            f"{int(self.directed)} {int(self.edge_weighted)} {int(self.vertex_weighted)}",
            str(self.order),
        ]
        for vertex in self.nodes:
            lines.append(vertex.id + (f" {vertex.weight}" if self.vertex_weighted else ""))
        for vertex in self.nodes:
            for edge in vertex.edges:
                # Undirected edges are stored twice; keep only one copy.
                if not self.directed and vertex.id > edge.target:
                    continue
                line = f"{vertex.id} {edge.target}"
                if self.edge_weighted:
                    line += f" {edge.weight}"
                lines.append(line)
        return "\n".join(lines) + "\n"

    def save(self, path: str | Path) -> None:
        Path(path).write_text(self.dumps(), encoding="utf-8")


def _take_int(tokens: Iterator[str], what: str) -> int:
    token = next(tokens, None)
    if token is None:
        raise GraphError(f"missing {what}")
    try:
        return int(token)
    except ValueError:
        raise GraphError(f"expected an integer for {what}, got {token!r}") from None


def parse_graph(text: str) -> Graph:
    """Build a graph from its whitespace-separated text form."""
    tokens = iter(text.split())
    graph = Graph(
        directed=bool(_take_int(tokens, "directed flag")),
        edge_weighted=bool(_take_int(tokens, "edge weight flag")),
        vertex_weighted=bool(_take_int(tokens, "vertex weight flag")),
    )
    count = _take_int(tokens, "vertex count")
    if count < 0:
        raise GraphError(f"negative vertex count: {count}")
    for _ in range(count):
        token = next(tokens, None)
        if token is None:
            raise GraphError("missing vertex id")
        weight = _take_int(tokens, "vertex weight") if graph.vertex_weighted else 0
        graph.add_node(token[0], weight)

    lookup = {vertex.id: vertex for vertex in graph.nodes}
    for first in tokens:
        second = next(tokens, None)
        if second is None:
            break
        weight = _take_int(tokens, "edge weight") if graph.edge_weighted else 0
        source, target = first[0], second[0]
        if source in lookup:
            lookup[source].edges.append(Edge(target, weight))
        if not graph.directed and target in lookup:
            lookup[target].edges.append(Edge(source, weight))
    return graph


def load_graph(path: str | Path) -> Graph:
    """Read and parse a graph file."""
    return parse_graph(Path(path).read_text(encoding="utf-8"))