# aegraph/rules/erasure.py
"""
Erasure rule: remove an element from an odd nesting level.

Levels count cuts descended from the root, starting at *level* (0 by
default). The only element of a node is never offered, except at level -1:
starting there treats the root itself as a positive context one level up,
so its last remaining element may still be erased.
"""

from __future__ import annotations

import logging
from typing import Sequence, Set

from ..core.address import Address, edit_parent, remove_element
from ..core.graph import Graph

logger = logging.getLogger(__name__)


def _erasable_from(graph: Graph, level: int) -> Set[Address]:
    found: Set[Address] = set()
    if level % 2 == 1 and (graph.size() > 1 or level == -1):
        found.update(Address((i,)) for i in range(graph.size()))

    for i, child in enumerate(graph.children):
        for path in _erasable_from(child, level + 1):
            found.add(path.prefixed(i))
    return found


def find_erasable(graph: Graph, level: int = 0) -> Set[Address]:
    found = _erasable_from(graph, level)
    logger.debug("%d erasure sites from level %d in %s", len(found), level, graph)
    return found


def erase(graph: Graph, address: Sequence[int]) -> Graph:
    """Remove the child or atom *address* names from its parent."""
    out = edit_parent(graph, address, remove_element)
    logger.debug("erased %s: %s -> %s", list(address), graph, out)
    return out
