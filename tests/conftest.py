"""
Pytest configuration for aegraph tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE, default "default")
- repo_root fixture for CLI smoke tests that run `python -m aegraph...`
- total_elements helper shared by the rule property tests
"""

import os
from pathlib import Path

import pytest

from aegraph.core.graph import Graph

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# - print_blob=True makes failures easy to reproduce
# - "ci" runs more examples; "dev" fewer for quick local loops

try:
    from hypothesis import settings

    settings.register_profile("default", print_blob=True, deadline=None)
    settings.register_profile("ci", print_blob=True, deadline=None, max_examples=500)
    settings.register_profile("dev", print_blob=True, deadline=None, max_examples=25)
    settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
except ImportError:
    pass  # hypothesis not installed; fuzz modules skip themselves


REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def repo_root() -> Path:
    return REPO_ROOT


def total_elements(g: Graph) -> int:
    """Atoms plus cuts anywhere below *g* (g itself not counted)."""
    return g.size() + sum(total_elements(c) for c in g.children)
