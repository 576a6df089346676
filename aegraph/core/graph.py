"""
aegraph GRAPH CORE
==================
An existential graph is a tree of nested contexts.

  sheet of assertion  (...)   polarity True, the unenclosed root
  cut                 [...]   polarity False, one level of negation

Each node owns its atoms (propositional letters) and its child cuts outright.
Nodes are immutable: rule appliers build new trees and share the subtrees
they did not touch.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Set, Tuple, Union

from .canon import sort_atoms, sort_children
from .notation import check_atom, join_level


class Graph:
    """One context of an existential graph: atoms plus nested cuts."""

    __slots__ = ("polarity", "atoms", "children", "_text")

    def __init__(
        self,
        atoms: Iterable[str] = (),
        children: Iterable["Graph"] = (),
        polarity: bool = True,
    ):
        kids = []
        for c in children:
            if not isinstance(c, Graph):
                raise TypeError(f"children must be Graph, got {type(c).__name__}")
            # anything nested is a cut, whatever it was built as
            kids.append(c.as_cut() if c.polarity else c)

        self.polarity = bool(polarity)
        self.atoms: Tuple[str, ...] = sort_atoms(check_atom(a) for a in atoms)
        self.children: Tuple[Graph, ...] = sort_children(kids)
        self._text = join_level(
            self.polarity, (c._text for c in self.children), self.atoms
        )

    # ---------- structural identity ----------

    def _body(self) -> str:
        return self._text[1:-1]

    def structurally_equal(self, other) -> bool:
        if not isinstance(other, Graph):
            return False
        return self._body() == other._body()

    __eq__ = structurally_equal

    def __ne__(self, other) -> bool:
        return not self.structurally_equal(other)

    def __hash__(self):
        return hash(self._body())

    def __lt__(self, other: "Graph") -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._text < other._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Graph({self._text!r})"

    # ---------- counts ----------

    def num_atoms(self) -> int:
        return len(self.atoms)

    def num_children(self) -> int:
        return len(self.children)

    def size(self) -> int:
        return self.num_atoms() + self.num_children()

    def depth(self) -> int:
        """Number of cuts on the deepest path below this node."""
        if not self.children:
            return 0
        return 1 + max(c.depth() for c in self.children)

    def count_nodes(self) -> int:
        return 1 + sum(c.count_nodes() for c in self.children)

    # ---------- construction helpers ----------

    def replace(
        self,
        *,
        atoms: Optional[Iterable[str]] = None,
        children: Optional[Iterable["Graph"]] = None,
        polarity: Optional[bool] = None,
    ) -> "Graph":
        return Graph(
            self.atoms if atoms is None else atoms,
            self.children if children is None else children,
            self.polarity if polarity is None else polarity,
        )

    def as_cut(self) -> "Graph":
        if not self.polarity:
            return self
        return self.replace(polarity=False)

    def replace_child(self, index: int, child: "Graph") -> "Graph":
        kids = list(self.children)
        kids[index] = child
        return self.replace(children=kids)

    def without_child(self, index: int) -> "Graph":
        return self.replace(children=self.children[:index] + self.children[index + 1:])

    def without_atom(self, index: int) -> "Graph":
        return self.replace(atoms=self.atoms[:index] + self.atoms[index + 1:])

    # ---------- access ----------

    def child_or_atom_at(self, index: int) -> "Graph":
        """
        Unified access: a child cut, a one-atom sheet wrapping an atom, or an
        empty sheet when *index* is out of range. Never raises.
        """
        if 0 <= index < self.num_children():
            return self.children[index]
        if self.num_children() <= index < self.size():
            return Graph([self.atoms[index - self.num_children()]])
        return Graph()

    def node_at(self, address: Sequence[int]) -> Union["Graph", str]:
        """The cut or atom an address names; the root for an empty address."""
        from .address import locate

        return locate(self, address)

    # ---------- containment ----------

    def contains(self, item: Union[str, "Graph"]) -> bool:
        if isinstance(item, Graph):
            return self._contains_graph(item)
        if isinstance(item, str):
            return self._contains_atom(item)
        raise TypeError(f"contains() expects str or Graph, got {type(item).__name__}")

    def _contains_atom(self, atom: str) -> bool:
        if atom in self.atoms:
            return True
        return any(c._contains_atom(atom) for c in self.children)

    def _contains_graph(self, other: "Graph") -> bool:
        if other in self.children:
            return True
        return any(c._contains_graph(other) for c in self.children)

    def get_paths_to(self, target: Union[str, "Graph"]) -> Set[Tuple[int, ...]]:
        from ..paths import get_paths_to

        return get_paths_to(self, target)

    # ---------- rules ----------

    def find_double_cuts(self):
        from ..rules.double_cut import find_double_cuts

        return find_double_cuts(self)

    def remove_double_cut(self, address: Sequence[int]) -> "Graph":
        from ..rules.double_cut import remove_double_cut

        return remove_double_cut(self, address)

    def find_double_cut_insertions(self):
        from ..rules.double_cut import find_double_cut_insertions

        return find_double_cut_insertions(self)

    def insert_double_cut(self, address: Sequence[int]) -> "Graph":
        from ..rules.double_cut import insert_double_cut

        return insert_double_cut(self, address)

    def find_erasable(self, level: int = 0):
        from ..rules.erasure import find_erasable

        return find_erasable(self, level)

    def erase(self, address: Sequence[int]) -> "Graph":
        from ..rules.erasure import erase

        return erase(self, address)

    def find_deiterable(self):
        from ..rules.deiteration import find_deiterable

        return find_deiterable(self)

    def deiterate(self, address: Sequence[int]) -> "Graph":
        from ..rules.deiteration import deiterate

        return deiterate(self, address)


EMPTY_SHEET = Graph()
EMPTY_CUT = Graph(polarity=False)
