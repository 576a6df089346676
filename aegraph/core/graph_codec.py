"""
aegraph: Graph <-> JSON object codec

Encodes a Graph as
  {"polarity": "sheet" | "cut", "atoms": [...], "cuts": [...]}

For CLI payloads and debugging. The text notation stays the canonical
interchange format.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .graph import Graph

SHEET = "sheet"
CUT = "cut"


def graph_to_json_obj(g: Graph) -> Dict[str, Any]:
    return {
        "polarity": SHEET if g.polarity else CUT,
        "atoms": list(g.atoms),
        "cuts": [graph_to_json_obj(c) for c in g.children],
    }


def graph_from_json_obj(obj: Mapping[str, Any]) -> Graph:
    """Inverse of graph_to_json_obj. Raises ValueError on a bad shape."""
    if not isinstance(obj, Mapping):
        raise ValueError(f"graph object must be a mapping, got {type(obj).__name__}")

    polarity = obj.get("polarity", SHEET)
    if polarity not in (SHEET, CUT):
        raise ValueError(f"polarity must be {SHEET!r} or {CUT!r}, got {polarity!r}")

    atoms = obj.get("atoms", [])
    cuts = obj.get("cuts", [])
    if not isinstance(atoms, list) or not all(isinstance(a, str) for a in atoms):
        raise ValueError("atoms must be a list of strings")
    if not isinstance(cuts, list):
        raise ValueError("cuts must be a list")

    return Graph(atoms, [graph_from_json_obj(c) for c in cuts], polarity == SHEET)
