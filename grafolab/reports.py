"""Text renderings of algorithm results, for the screen and for files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

_RULE = "========================================="
_PROPERTIES_RULE = "============================================"


def _has_distance(distance: int | None) -> bool:
    return distance is not None and distance >= 0


def format_vertices(vertices: Iterable[str], title: str) -> str:
    """Screen block listing a set of vertices."""
    vertices = list(vertices)
    lines = [f"========== {title} =========="]
    if vertices:
        lines.append("Vertices: " + ", ".join(vertices))
    else:
        lines.append("Conjunto Vazio")
    lines.append(_RULE)
    return "\n".join(lines) + "\n\n"


def save_vertices(vertices: Iterable[str], path: str | Path, title: str) -> None:
    """Write a set of vertices to a file."""
    vertices = list(vertices)
    text = (
        f"{title}\n"
        f"Numero de vertices: {len(vertices)}\n"
        f"Vertices: {', '.join(vertices)}\n"
    )
    Path(path).write_text(text, encoding="utf-8")


def format_path(path: Iterable[str], title: str, distance: int | None = None) -> str:
    """Screen block showing a path and, if known, its total distance."""
    path = list(path)
    lines = [f"========== {title} =========="]
    if path:
        lines.append("Caminho: " + " -> ".join(path))
        if _has_distance(distance):
            lines.append(f"Distancia total: {distance}")
    else:
        lines.append("Caminho Vazio")
    lines.append(_RULE)
    return "\n".join(lines) + "\n\n"


def save_path(
    path: Iterable[str], filename: str | Path, title: str, distance: int | None = None
) -> None:
    """Write a path, and its total distance if known, to a file."""
    path = list(path)
    lines = [
        title,
        f"Numero de vertices no caminho: {len(path)}",
        "Caminho: " + " -> ".join(path),
    ]
    if _has_distance(distance):
        lines.append(f"Distancia total: {distance}")
    Path(filename).write_text("\n".join(lines) + "\n", encoding="utf-8")


def format_properties(
    radius: int, diameter: int, center: Iterable[str], periphery: Iterable[str]
) -> str:
    """Screen block with radius, diameter, center and periphery."""
    center = list(center)
    periphery = list(periphery)
    lines = [
        "========== PROPRIEDADES DO GRAFO ==========",
        f"Raio: {radius}",
        f"Diametro: {diameter}",
        "Centro: " + (", ".join(center) if center else "Vazio"),
        "Periferia: " + (", ".join(periphery) if periphery else "Vazio"),
        _PROPERTIES_RULE,
    ]
    return "\n".join(lines) + "\n\n"


def save_properties(
    radius: int,
    diameter: int,
    center: Iterable[str],
    periphery: Iterable[str],
    path: str | Path,
) -> None:
    """Write radius, diameter, center and periphery to a file."""
    text = (
        "PROPRIEDADES DO GRAFO\n"
        f"Raio: {radius}\n"
        f"Diametro: {diameter}\n"
        f"Centro: {' '.join(center)}\n"
        f"Periferia: {' '.join(periphery)}\n"
    )
    Path(path).write_text(text, encoding="utf-8")