# aegraph/rules/double_cut.py
"""
Double cut rule.

A double cut is a cut whose only content is one nested cut: [[X]]. Removing
or inserting such a pair around any element preserves meaning.
"""

from __future__ import annotations

import logging
from typing import Sequence, Set

from ..core.address import Address, Step, StepKind, edit_parent
from ..core.graph import Graph
from ..errors import InvalidAddressError
from ..paths import iter_addresses

logger = logging.getLogger(__name__)


def is_double_cut(g: Graph) -> bool:
    return g.num_children() == 1 and g.num_atoms() == 0


def find_double_cuts(graph: Graph) -> Set[Address]:
    """Address of the outer cut of every double cut, at any depth."""
    found: Set[Address] = set()
    for i, child in enumerate(graph.children):
        if is_double_cut(child):
            found.add(Address((i,)))
        for path in find_double_cuts(child):
            found.add(path.prefixed(i))
    return found


def remove_double_cut(graph: Graph, address: Sequence[int]) -> Graph:
    """
    Remove the double cut whose outer cut *address* names. The inner cut's
    atoms and children move up into the outer cut's parent.
    """

    def splice(parent: Graph, step: Step) -> Graph:
        if step.kind is not StepKind.CHILD:
            raise InvalidAddressError("Double cut address names an atom", address)
        outer = parent.children[step.index]
        if not is_double_cut(outer):
            raise InvalidAddressError(f"Not a double cut: {outer}", address)
        inner = outer.children[0]
        siblings = parent.children[:step.index] + parent.children[step.index + 1:]
        return parent.replace(
            atoms=parent.atoms + inner.atoms,
            children=siblings + inner.children,
        )

    out = edit_parent(graph, address, splice)
    logger.debug("removed double cut at %s: %s -> %s", list(address), graph, out)
    return out


def find_double_cut_insertions(graph: Graph) -> Set[Address]:
    """Every element of the tree can be wrapped in a double cut."""
    return set(iter_addresses(graph))


def insert_double_cut(graph: Graph, address: Sequence[int]) -> Graph:
    """
    Wrap the element at *address* in [[...]]. An empty address wraps the
    whole content of the root: (X, Y) becomes ([[X, Y]]).
    """
    if len(address) == 0:
        inner = Graph(graph.atoms, graph.children, polarity=False)
        return Graph(children=[Graph(children=[inner], polarity=False)], polarity=graph.polarity)

    def wrap(parent: Graph, step: Step) -> Graph:
        if step.kind is StepKind.CHILD:
            inner = Graph(children=[parent.children[step.index]], polarity=False)
            rest = parent.without_child(step.index)
        else:
            inner = Graph([parent.atoms[step.index]], polarity=False)
            rest = parent.without_atom(step.index)
        outer = Graph(children=[inner], polarity=False)
        return rest.replace(children=rest.children + (outer,))

    out = edit_parent(graph, address, wrap)
    logger.debug("inserted double cut at %s: %s -> %s", list(address), graph, out)
    return out
