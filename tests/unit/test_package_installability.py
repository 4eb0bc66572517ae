# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Import-level checks for the installed package.

Every node package, its ``handlers`` subpackage and every name listed in
an ``__all__`` must resolve. Catches missing ``__init__.py`` files,
stale re-exports and import cycles between nodes.
"""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest

pytestmark = pytest.mark.unit

PACKAGE_DIR = Path(__file__).parent.parent.parent / "src" / "spacecompiler"

# Node name -> handler entry point. Adding a node means adding it here.
NODE_ENTRY_POINTS = {
    "node_segmenter_compute": "handle_segment",
    "node_tree_builder_compute": "handle_tree_build",
    "node_semantic_analyzer_compute": "handle_semantic_analysis",
    "node_link_graph_parser_compute": "handle_link_graph_parse",
    "node_compilation_orchestrator": "handle_compilation",
}

PUBLIC_PACKAGES = [
    "spacecompiler",
    "spacecompiler.config",
    "spacecompiler.enums",
    "spacecompiler.models",
    *(f"spacecompiler.nodes.{node}" for node in NODE_ENTRY_POINTS),
]


@pytest.mark.parametrize("node", sorted(NODE_ENTRY_POINTS))
def test_handler_entry_point(node: str) -> None:
    handlers = importlib.import_module(f"spacecompiler.nodes.{node}.handlers")
    entry_point = getattr(handlers, NODE_ENTRY_POINTS[node], None)
    assert callable(entry_point), f"{node}.handlers lacks {NODE_ENTRY_POINTS[node]}"


@pytest.mark.parametrize("package", PUBLIC_PACKAGES)
def test_all_names_resolve(package: str) -> None:
    module = importlib.import_module(package)
    missing = [name for name in module.__all__ if not hasattr(module, name)]
    assert not missing, f"{package}.__all__ lists unresolved names: {missing}"


def test_version() -> None:
    assert importlib.import_module("spacecompiler").__version__ == "0.1.0"


def test_every_node_dir_is_registered() -> None:
    on_disk = {
        child.name
        for child in (PACKAGE_DIR / "nodes").iterdir()
        if child.is_dir() and child.name.startswith("node_")
    }
    assert on_disk == set(NODE_ENTRY_POINTS)


def test_every_package_dir_has_init() -> None:
    missing = [
        str(path.relative_to(PACKAGE_DIR))
        for path in PACKAGE_DIR.rglob("*")
        if path.is_dir()
        and path.name != "__pycache__"
        and any(path.glob("*.py"))
        and not (path / "__init__.py").exists()
    ]
    assert not missing, f"Directories without __init__.py: {missing}"
