"""
aegraph bracket notation: low-level text helpers.

  (A, [B, C], [[D]])

"(" ")" delimit the sheet of assertion, "[" "]" delimit a cut. Elements are
separated by commas at bracket depth 0. This module knows nothing about the
Graph type; it only splits and joins text.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from ..errors import MalformedInputError

SHEET_DELIMITERS = ("(", ")")
CUT_DELIMITERS = ("[", "]")
SEPARATOR = ", "

# Characters that can never appear inside an atom.
RESERVED = frozenset("()[],")


def delimiters(polarity: bool) -> Tuple[str, str]:
    return SHEET_DELIMITERS if polarity else CUT_DELIMITERS


def polarity_of(text: str) -> bool:
    """
    Return the polarity named by the outer delimiters of *text*.
    Raises MalformedInputError unless they are a matching () or [] pair.
    """
    if len(text) < 2:
        raise MalformedInputError("Expected a bracketed graph", text)
    pair = (text[0], text[-1])
    if pair == SHEET_DELIMITERS:
        return True
    if pair == CUT_DELIMITERS:
        return False
    raise MalformedInputError(
        "Outer delimiters must be a matching '()' or '[]' pair", text
    )


def split_level(body: str) -> List[str]:
    """
    Split the content of one bracket pair into its depth-0 elements.

    Commas inside nested cuts do not split. Elements are whitespace-trimmed.
    Empty content yields no elements; an empty element among others is an
    error, as is any unbalanced bracket.
    """
    parts: List[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(body):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth < 0:
                raise MalformedInputError("Unbalanced ']'", body, i)
        elif ch == "," and depth == 0:
            parts.append(body[start:i].strip())
            start = i + 1
    if depth != 0:
        raise MalformedInputError("Unclosed '['", body)

    last = body[start:].strip()
    if not parts and not last:
        return []
    parts.append(last)
    if "" in parts:
        raise MalformedInputError("Empty element", body)
    return parts


def check_atom(atom: str) -> str:
    if not isinstance(atom, str):
        raise TypeError(f"atom must be str, got {type(atom).__name__}")
    token = atom.strip()
    if not token or token != atom:
        raise MalformedInputError("Atoms must be non-empty and trimmed", atom)
    bad = RESERVED.intersection(token)
    if bad:
        raise MalformedInputError(
            f"Atom contains reserved characters {sorted(bad)}", atom
        )
    return token


def join_level(polarity: bool, child_texts: Iterable[str], atoms: Iterable[str]) -> str:
    """Children first, then atoms, with no dangling separator."""
    left, right = delimiters(polarity)
    return left + SEPARATOR.join([*child_texts, *atoms]) + right
