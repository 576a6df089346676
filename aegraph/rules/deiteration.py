# aegraph/rules/deiteration.py
"""
Deiteration rule: remove a copy of a cut or atom that already appears at
the enclosing level.

Only pairs rooted at the graph's own level are considered: a child or atom
of the root dominates copies found anywhere inside a sibling child.
"""

from __future__ import annotations

import logging
from typing import Sequence, Set

from ..core.address import Address, edit_parent, remove_element
from ..core.graph import Graph
from ..paths import iter_paths_to_atom, iter_paths_to_subgraph

logger = logging.getLogger(__name__)


def find_deiterable(graph: Graph) -> Set[Address]:
    found: Set[Address] = set()

    for i, dominator in enumerate(graph.children):
        for j, other in enumerate(graph.children):
            if i == j:
                continue
            for path in iter_paths_to_subgraph(other, dominator, keep_lone=True):
                found.add(path.prefixed(j))

    for atom in graph.atoms:
        for j, other in enumerate(graph.children):
            for path in iter_paths_to_atom(other, atom, keep_lone=True):
                found.add(path.prefixed(j))

    logger.debug("%d deiteration sites in %s", len(found), graph)
    return found


def deiterate(graph: Graph, address: Sequence[int]) -> Graph:
    """Remove the copy *address* names; same mechanics as erase()."""
    out = edit_parent(graph, address, remove_element)
    logger.debug("deiterated %s: %s -> %s", list(address), graph, out)
    return out
