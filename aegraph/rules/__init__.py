"""
Rule engines. Each rule pairs a finder (all legal sites) with an applier
(transform at one site, returning a new Graph).
"""

from .double_cut import (  # noqa: F401
    find_double_cuts,
    remove_double_cut,
    find_double_cut_insertions,
    insert_double_cut,
)
from .erasure import find_erasable, erase  # noqa: F401
from .deiteration import find_deiterable, deiterate  # noqa: F401
