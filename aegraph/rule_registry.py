# aegraph/rule_registry.py
"""
Registry of named inference rules.

Maps API-facing names like "double-cut" to a Rule holding the finder and
applier, so drivers can talk in rule names instead of importing functions.

    get_rule("erasure").find(g)          -> set of addresses
    get_rule("erasure").apply(g, (0, 1)) -> new Graph
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Set

from .core.address import Address
from .core.graph import Graph
from .rules import (
    deiterate,
    erase,
    find_deiterable,
    find_double_cut_insertions,
    find_double_cuts,
    find_erasable,
    insert_double_cut,
    remove_double_cut,
)


@dataclass(frozen=True)
class Rule:
    name: str
    find: Callable[..., Set[Address]]
    apply: Callable[[Graph, Any], Graph]
    summary: str = ""
    # keyword arguments the finder understands (e.g. erasure's level)
    find_options: tuple = field(default_factory=tuple)


_REGISTRY: Dict[str, Rule] = {}


def register_rule(rule: Rule) -> None:
    """Register (or overwrite) a rule under its name."""
    _ensure_defaults()
    _REGISTRY[rule.name] = rule


def get_rule(name: str) -> Rule:
    """
    Look up a rule by name.

    Raises:
        KeyError: if no rule is registered under *name*.
    """
    _ensure_defaults()
    try:
        return _REGISTRY[name]
    except KeyError:
        known = ", ".join(list_rule_names())
        raise KeyError(f"Unknown rule {name!r}; known rules: {known}") from None


def has_rule(name: str) -> bool:
    _ensure_defaults()
    return name in _REGISTRY


def list_rule_names() -> List[str]:
    _ensure_defaults()
    return sorted(_REGISTRY)


def clear_registry() -> None:
    """Drop every rule, including the defaults (mostly for tests)."""
    _REGISTRY.clear()


def _ensure_defaults() -> None:
    if _REGISTRY:
        return
    for rule in _default_rules():
        _REGISTRY[rule.name] = rule


def _default_rules() -> List[Rule]:
    return [
        Rule(
            "double-cut",
            find_double_cuts,
            remove_double_cut,
            "remove a pair of directly nested cuts",
        ),
        Rule(
            "insert-double-cut",
            find_double_cut_insertions,
            insert_double_cut,
            "wrap an element in a pair of nested cuts",
        ),
        Rule(
            "erasure",
            find_erasable,
            erase,
            "remove an element from an odd nesting level",
            ("level",),
        ),
        Rule(
            "deiteration",
            find_deiterable,
            deiterate,
            "remove a copy dominated by the enclosing level",
        ),
    ]
