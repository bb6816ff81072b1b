"""Interactive menu for running graph algorithms on a loaded graph."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from grafolab import algorithms, reports
from grafolab.graph import Graph, GraphError, load_graph

MENU = (
    "Digite uma das opcoes abaixo e pressione enter:\n\n"
    "(a) Fecho transitivo direto de um no;\n"
    "(b) Fecho transitivo indireto de um no;\n"
    "(c) Caminho minimo (Djikstra);\n"
    "(d) Caminho minimo (Floyd);\n"
    "(e) Arvore Geradora Minima (Algoritmo de Prim);\n"
    "(f) Arvore Geradora Minima (Algoritmo de Kruskal);\n"
    "(g) Arvore de caminhamento em profundidade;\n"
    "(h) Raio, diametro, centro e periferia do grafo;\n"
    "(0) Sair;\n\n"
)


class _Tokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def next(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def push_back(self, token: str) -> None:
        self._pending.appendleft(token)


class Console:
    """Menu-driven session reading answers from one stream and writing to another."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        directory: str | Path = ".",
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.directory = Path(directory)
        self._tokens = _Tokens(self.stdin)

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read_char(self) -> str:
        token = self._tokens.next()
        if len(token) > 1:
            self._tokens.push_back(token[1:])
        return token[0]

    def _read_int(self) -> int | None:
        token = self._tokens.next()
        try:
            return int(token)
        except ValueError:
            return None

    def read_node_id(self) -> str:
        """Prompt for and return a single-character vertex id."""
        self._write("Digite o id de um no: ")
        node_id = self._read_char()
        self._write("\n")
        return node_id

    def read_node_set(self, graph: Graph, size: int) -> list[str]:
        """Prompt until `size` distinct existing vertex ids have been given."""
        chosen: list[str] = []
        while len(chosen) < size:
            node_id = self.read_node_id()
            if not graph.has_node(node_id):
                self._write("Vertice nao existe\n")
            elif node_id in chosen:
                self._write("Valor repetido\n")
            else:
                chosen.append(node_id)
        return chosen

    def ask_save(self, filename: str) -> bool:
        """Ask whether a result should also be written to `filename`."""
        while True:
            self._write(f"Imprimir em arquivo externo? ({filename})\n(1) Sim;\n(2) Nao.\n")
            answer = self._read_int()
            self._write("\n")
            if answer == 1:
                return True
            if answer == 2:
                return False
            self._write("Resposta invalida\n")

    def _target(self, filename: str) -> Path:
        return self.directory / filename

    def _closure(
        self, graph: Graph, compute: Callable[[Graph, str], list[str]], label: str, filename: str
    ) -> None:
        node_id = self.read_node_id()
        vertices = compute(graph, node_id)
        title = f"{label} {node_id}"
        self._write(reports.format_vertices(vertices, title))
        if self.ask_save(filename):
            target = self._target(filename)
            reports.save_vertices(vertices, target, title)
            self._write(f"Resultado salvo em {target}\n")

    def _shortest(
        self, graph: Graph, compute: Callable[[Graph, str, str], list[str]], label: str, filename: str
    ) -> None:
        source = self.read_node_id()
        target_id = self.read_node_id()
        path = compute(graph, source, target_id)
        title = f"CAMINHO MINIMO ({label}) DE {source} PARA {target_id}"
        self._write(reports.format_path(path, title))
        if self.ask_save(filename):
            target = self._target(filename)
            reports.save_path(path, target, title)
            self._write(f"Resultado salvo em {target}\n")

    def _show_tree(self, tree: Graph, heading: str, filename: str) -> None:
        self._write(heading + "\n")
        self._write(tree.describe())
        if self.ask_save(filename):
            target = self._target(filename)
            tree.save(target)
            self._write(f"Grafo salvo em: {target}\n")

    def _spanning_tree(
        self, graph: Graph, compute: Callable[[Graph, list[str]], Graph], label: str, filename: str
    ) -> None:
        self._write("Digite o tamanho do subconjunto: ")
        size = self._read_int()
        if size is None or not 0 < size <= graph.order:
            self._write("Valor invalido\n")
            return
        ids = self.read_node_set(graph, size)
        tree = compute(graph, ids)
        self._show_tree(tree, f"ARVORE GERADORA MINIMA ({label})", filename)

    def _depth_first(self, graph: Graph) -> None:
        node_id = self.read_node_id()
        tree = algorithms.dfs_tree(graph, node_id)
        self._show_tree(
            tree, "ARVORE DE CAMINHAMENTO EM PROFUNDIDADE", "arvore_caminhamento_profundidade.txt"
        )

    def _properties(self, graph: Graph) -> None:
        values = (
            algorithms.radius(graph),
            algorithms.diameter(graph),
            algorithms.center(graph),
            algorithms.periphery(graph),
        )
        self._write(reports.format_properties(*values))
        filename = "propriedades_grafo.txt"
        if self.ask_save(filename):
            target = self._target(filename)
            reports.save_properties(*values, target)
            self._write(f"Resultado em: {target}\n")

    def run(self, graph: Graph) -> None:
        """Show the menu and serve choices until '0' or end of input."""
        actions: dict[str, Callable[[], None]] = {
            "a": lambda: self._closure(
                graph, algorithms.direct_transitive_closure,
                "FECHO TRANSITIVO DIRETO DE", "fecho_trans_dir.txt",
            ),
            "b": lambda: self._closure(
                graph, algorithms.indirect_transitive_closure,
                "FECHO TRANSITIVO INDIRETO DE", "fecho_trans_indir.txt",
            ),
            "c": lambda: self._shortest(
                graph, algorithms.dijkstra_path, "DIJKSTRA", "caminho_minimo_dijkstra.txt"
            ),
            "d": lambda: self._shortest(
                graph, algorithms.floyd_path, "FLOYD", "caminho_minimo_floyd.txt"
            ),
            "e": lambda: self._spanning_tree(graph, algorithms.prim_mst, "PRIM", "agm_prim.txt"),
            "f": lambda: self._spanning_tree(
                graph, algorithms.kruskal_mst, "KRUSKAL", "agm_kruskal.txt"
            ),
            "g": lambda: self._depth_first(graph),
            "h": lambda: self._properties(graph),
        }
        while True:
            self._write(MENU)
            try:
                choice = self._read_char()
            except EOFError:
                return
            if choice == "0":
                return
            action = actions.get(choice)
            if action is None:
                self._write("Opção inválida\n")
                continue
            try:
                action()
            except GraphError as exc:
                self._write(f"Erro: {exc}\n")
            except EOFError:
                return


def main(argv: list[str] | None = None) -> int:
    """Load the graph named on the command line and start the menu."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Uso: grafolab <arquivo_entrada>")
        return 1
    try:
        graph = load_graph(args[0])
    except (OSError, GraphError) as exc:
        print(f"Erro ao abrir o arquivo: {args[0]} ({exc})", file=sys.stderr)
        return 1
    Console().run(graph)
    return 0


if __name__ == "__main__":
    sys.exit(main())