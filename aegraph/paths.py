"""
Path search over a graph.

get_paths_to(graph, target) returns the address of every occurrence of an
atom (str) or a subgraph (Graph) in the tree. An occurrence that is the only
element of its node is not reported: a lone atom or lone cut is never a
removal target.
"""

from __future__ import annotations

from typing import Iterator, Set, Union

from .core.address import Address
from .core.graph import Graph


def iter_paths_to_atom(graph: Graph, atom: str, *, keep_lone: bool = False) -> Iterator[Address]:
    """
    Atoms at this level first, then each child in index order.

    keep_lone lifts the singleton exclusion for *graph* itself (not for its
    descendants); deiteration uses it because the dominating copy sits
    outside the searched child.
    """
    n_children = graph.num_children()
    if graph.size() > 1 or keep_lone:
        for i, a in enumerate(graph.atoms):
            if a == atom:
                yield Address((n_children + i,))

    for i, child in enumerate(graph.children):
        if child.contains(atom):
            for path in iter_paths_to_atom(child, atom):
                yield path.prefixed(i)


def iter_paths_to_subgraph(graph: Graph, sub: Graph, *, keep_lone: bool = False) -> Iterator[Address]:
    """Depth first; a matching child is reported and not searched further."""
    lone_ok = graph.size() > 1 or keep_lone
    for i, child in enumerate(graph.children):
        if lone_ok and child == sub:
            yield Address((i,))
        else:
            for path in iter_paths_to_subgraph(child, sub):
                yield path.prefixed(i)


def get_paths_to(graph: Graph, target: Union[str, Graph], *, keep_lone: bool = False) -> Set[Address]:
    if isinstance(target, Graph):
        return set(iter_paths_to_subgraph(graph, target, keep_lone=keep_lone))
    if isinstance(target, str):
        return set(iter_paths_to_atom(graph, target, keep_lone=keep_lone))
    raise TypeError(f"get_paths_to expects str or Graph, got {type(target).__name__}")


def iter_addresses(graph: Graph) -> Iterator[Address]:
    """Every element address in the tree: children, their contents, atoms."""
    for i, child in enumerate(graph.children):
        yield Address((i,))
        for path in iter_addresses(child):
            yield path.prefixed(i)
    n_children = graph.num_children()
    for i in range(graph.num_atoms()):
        yield Address((n_children + i,))
