# aegraph/__init__.py
"""
aegraph public API surface.

    - Model: Graph, EMPTY_SHEET, EMPTY_CUT
    - Text codec: parse, render (aliases of parse_graph, render_graph)
    - Canonical form: canonicalize
    - Addresses: Address, Step, StepKind, get_paths_to
    - Rules: find_double_cuts / remove_double_cut,
             find_double_cut_insertions / insert_double_cut,
             find_erasable / erase, find_deiterable / deiterate
    - Registry: get_rule, list_rule_names
    - Errors: AEGraphError, MalformedInputError, InvalidAddressError

Every Graph method that transforms returns a new Graph; nothing mutates.
"""

from __future__ import annotations

from .errors import AEGraphError, InvalidAddressError, MalformedInputError
from .core.graph import Graph, EMPTY_SHEET, EMPTY_CUT
from .core.graph_parser import parse_graph, render_graph
from .core.canon import canonicalize
from .core.address import Address, Step, StepKind
from .paths import get_paths_to
from .rules import (
    find_double_cuts,
    remove_double_cut,
    find_double_cut_insertions,
    insert_double_cut,
    find_erasable,
    erase,
    find_deiterable,
    deiterate,
)
from .rule_registry import Rule, get_rule, list_rule_names

parse = parse_graph
render = render_graph

__all__ = [
    "AEGraphError",
    "InvalidAddressError",
    "MalformedInputError",
    "Graph",
    "EMPTY_SHEET",
    "EMPTY_CUT",
    "parse",
    "render",
    "parse_graph",
    "render_graph",
    "canonicalize",
    "Address",
    "Step",
    "StepKind",
    "get_paths_to",
    "find_double_cuts",
    "remove_double_cut",
    "find_double_cut_insertions",
    "insert_double_cut",
    "find_erasable",
    "erase",
    "find_deiterable",
    "deiterate",
    "Rule",
    "get_rule",
    "list_rule_names",
]
