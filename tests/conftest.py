"""Shared test fixtures for apitree.

Provides the petstore fixture spec and small helpers for inspecting
generated trees. These fixtures are automatically discovered by pytest and
available to all test modules without explicit imports.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from apitree.tree import CollectionTree


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Raw spec fixtures (plain dicts loaded from JSON files)
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_31_raw() -> dict[str, Any]:
    """Load raw petstore 3.1 spec dict (paths, tags and webhooks)."""
    with open(FIXTURES_DIR / "petstore_3.1.json") as f:
        return json.load(f)


@pytest.fixture
def petstore_paths(petstore_31_raw: dict[str, Any]) -> dict[str, Any]:
    """A private copy of the petstore ``paths`` mapping."""
    return copy.deepcopy(petstore_31_raw["paths"])


# ---------------------------------------------------------------------------
# Tree inspection helpers
# ---------------------------------------------------------------------------


def node_ids(tree: CollectionTree) -> list[str]:
    """Readable identifiers of every node, in insertion order."""
    return [str(node.key) for node in tree.nodes()]


def edge_ids(tree: CollectionTree) -> list[tuple[str, str]]:
    """Readable ``(parent, child)`` identifiers of every edge, in insertion order."""
    return [(str(parent), str(child)) for parent, child in tree.edges()]


def child_ids(tree: CollectionTree, node_id: str) -> list[str]:
    """Readable identifiers of the children of the node rendered as *node_id*."""
    for node in tree.nodes():
        if str(node.key) == node_id:
            return [str(child.key) for child in tree.children(node.key)]
    raise AssertionError(f"No node {node_id!r} in tree")
