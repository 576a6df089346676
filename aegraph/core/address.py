"""
Addresses into a graph.

An address is a tuple of ints. At each level, indices below num_children()
name child cuts and the next num_atoms() indices name atoms. Every step but
the last descends into a child; the last names the target.

Raw indices are only interpreted here: resolve() turns them into tagged
Steps (CHILD i / ATOM i, with i an index into children or atoms directly),
and the rule engines work on Steps from then on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable, NamedTuple, Optional, Sequence, Tuple, Union

from ..errors import InvalidAddressError

if TYPE_CHECKING:  # pragma: no cover
    from .graph import Graph


class StepKind(str, Enum):
    CHILD = "child"
    ATOM = "atom"


class Step(NamedTuple):
    kind: StepKind
    index: int


class Address(tuple):
    """Immutable path of unified indices. Equal to (and hashes like) a plain tuple."""

    def __new__(cls, indices: Iterable[int] = ()):
        items = tuple(indices)
        for i in items:
            # bool is an int subclass, but True is not an index.
            if isinstance(i, bool) or not isinstance(i, int):
                raise InvalidAddressError(
                    f"Address steps must be ints, got {type(i).__name__}", items
                )
            if i < 0:
                raise InvalidAddressError("Address steps must be >= 0", items)
        return super().__new__(cls, items)

    def __repr__(self) -> str:
        return f"Address({list(self)})"

    @property
    def parent(self) -> "Address":
        return Address(self[:-1])

    @property
    def last(self) -> Optional[int]:
        return self[-1] if self else None

    def prefixed(self, index: int) -> "Address":
        return Address((index, *self))

    def extended(self, index: int) -> "Address":
        return Address((*self, index))


def slot(node: "Graph", index: int) -> Optional[Step]:
    """Tag one unified index at *node*, or None if it is out of range."""
    if index < node.num_children():
        return Step(StepKind.CHILD, index)
    if index < node.size():
        return Step(StepKind.ATOM, index - node.num_children())
    return None


@dataclass(frozen=True)
class Resolution:
    """
    An address resolved against a graph.

    nodes[k] is the node at which steps[k] is taken, so nodes[0] is the root
    and nodes[-1] is the parent of the target.
    """

    address: Address
    nodes: Tuple["Graph", ...]
    steps: Tuple[Step, ...]

    @property
    def parent(self) -> "Graph":
        return self.nodes[-1]

    @property
    def target(self) -> Step:
        return self.steps[-1]


def resolve(graph: "Graph", address: Sequence[int]) -> Resolution:
    addr = address if isinstance(address, Address) else Address(address)
    nodes = []
    steps = []
    node = graph
    for depth, index in enumerate(addr):
        step = slot(node, index)
        if step is None:
            raise InvalidAddressError(
                f"Index {index} out of range at depth {depth} (size {node.size()})", addr
            )
        nodes.append(node)
        steps.append(step)
        if depth < len(addr) - 1:
            if step.kind is not StepKind.CHILD:
                raise InvalidAddressError(f"Cannot descend through an atom at depth {depth}", addr)
            node = node.children[step.index]
    return Resolution(addr, tuple(nodes), tuple(steps))


def locate(graph: "Graph", address: Sequence[int]) -> Union["Graph", str]:
    res = resolve(graph, address)
    if not res.steps:
        return graph
    step = res.target
    if step.kind is StepKind.CHILD:
        return res.parent.children[step.index]
    return res.parent.atoms[step.index]


def edit_parent(
    graph: "Graph",
    address: Sequence[int],
    edit: Callable[["Graph", Step], "Graph"],
) -> "Graph":
    """
    Apply *edit* to the parent of the addressed element and rebuild the path
    back to the root. Untouched subtrees are shared with *graph*.
    """
    res = resolve(graph, address)
    if not res.steps:
        raise InvalidAddressError("Empty address names the root, not an element", res.address)

    replacement = edit(res.parent, res.target)
    for node, step in zip(reversed(res.nodes[:-1]), reversed(res.steps[:-1])):
        replacement = node.replace_child(step.index, replacement)
    return replacement


def remove_element(parent: "Graph", step: Step) -> "Graph":
    if step.kind is StepKind.CHILD:
        return parent.without_child(step.index)
    return parent.without_atom(step.index)
