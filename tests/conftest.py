"""Shared test fixtures for patternbook."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from patternbook.tree import Composite, Leaf

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def visited() -> list[Any]:
    """Collects leaf values in the order they are acted on."""
    return []


@pytest.fixture
def sample_tree(visited: list[Any]) -> dict[str, Composite]:
    """root -> [foo, bar, baz, branch -> [hello, world]]."""
    branch = Composite(
        [Leaf("hello", visited.append), Leaf("world", visited.append)],
        name="branch",
    )
    root = Composite(name="root")
    for value in ("foo", "bar", "baz"):
        root.add(Leaf(value, visited.append))
    root.add(branch)
    return {"root": root, "branch": branch}


@pytest.fixture
def sample_tree_dir() -> Path:
    return FIXTURE_DIR / "sample_tree"
