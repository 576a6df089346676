"""
Canonical ordering for graphs.

Atoms sort lexicographically; children sort by their own canonical text.
Graph construction runs these, so every Graph is canonical and two graphs
with the same logical content print identically.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .graph import Graph


def sort_atoms(atoms: Iterable[str]) -> Tuple[str, ...]:
    return tuple(sorted(atoms))


def sort_children(children: Iterable["Graph"]) -> Tuple["Graph", ...]:
    return tuple(sorted(children, key=str))


def canonicalize(graph: "Graph") -> "Graph":
    """Rebuild *graph* post-order so every level is sorted. Idempotent."""
    kids = [canonicalize(c) for c in graph.children]
    return graph.replace(atoms=sort_atoms(graph.atoms), children=sort_children(kids))


def is_canonical(graph: "Graph") -> bool:
    if tuple(graph.atoms) != sort_atoms(graph.atoms):
        return False
    if tuple(graph.children) != sort_children(graph.children):
        return False
    return all(is_canonical(c) for c in graph.children)
