"""
aegraph: graph parser

Parses the bracket notation into a canonical Graph:
  (A, [B, C], [[D]])
  [A]
  ()

"(...)" is the sheet of assertion, "[...]" a cut. Nested elements that start
with "[" are cuts; anything else is an atom. Atoms may not contain any of
"()[]," so "(A, B(C))" raises MalformedInputError rather than yielding an
atom "B(C)".
"""

from __future__ import annotations

from .graph import Graph
from .notation import polarity_of, split_level
from ..errors import MalformedInputError


def parse_graph(text: str) -> Graph:
    """
    Parse a graph literal into a Graph.
    Raises MalformedInputError on invalid syntax.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_graph expects str, got {type(text).__name__}")
    s = text.strip()
    if not s:
        raise MalformedInputError("Empty graph text")

    polarity = polarity_of(s)
    atoms = []
    children = []
    for element in split_level(s[1:-1]):
        if element.startswith("["):
            children.append(parse_graph(element))
        else:
            atoms.append(element)
    return Graph(atoms, children, polarity)


def render_graph(graph: Graph) -> str:
    """Canonical text of *graph*; parse_graph(render_graph(g)) == g."""
    return str(graph)
