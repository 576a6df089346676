"""
Error taxonomy for aegraph.

Both concrete errors also derive from ValueError so callers that only know
"bad input" can catch them without importing this module.
"""

from __future__ import annotations

from typing import Sequence


class AEGraphError(Exception):
    """Base class for every error raised by the aegraph core."""


class MalformedInputError(AEGraphError, ValueError):
    """Textual graph input could not be parsed."""

    def __init__(self, message: str, text: str | None = None, pos: int | None = None):
        self.text = text
        self.pos = pos
        if pos is not None:
            message = f"{message} at pos {pos}"
        if text is not None:
            message = f"{message}: {text!r}"
        super().__init__(message)


class InvalidAddressError(AEGraphError, ValueError):
    """An address does not resolve to a site of the shape a rule needs."""

    def __init__(self, message: str, address: Sequence[int] | None = None):
        self.address = tuple(address) if address is not None else None
        if address is not None:
            message = f"{message} (address={list(address)})"
        super().__init__(message)
