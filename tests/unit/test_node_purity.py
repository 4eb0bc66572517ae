# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AST-based purity check for node shells.

Every ``node.py`` must be a thin shell: imports, one ``Node*`` class whose
only method is ``async def compute`` returning a direct handler call, and
``__all__``. All behavior lives in the node's handlers.
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

pytestmark = pytest.mark.unit

NODES_DIR = Path(__file__).parent.parent.parent / "src" / "spacecompiler" / "nodes"

ALLOWED_TOP_LEVEL_TYPES = (ast.Import, ast.ImportFrom, ast.ClassDef, ast.Assign, ast.Expr)

FORBIDDEN_CALLS = frozenset({"open", "print", "input", "exec", "eval"})


def _node_files() -> list[Path]:
    return sorted(NODES_DIR.glob("node_*/node.py"))


def _violations(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    found: list[str] = []

    for stmt in tree.body:
        if not isinstance(stmt, ALLOWED_TOP_LEVEL_TYPES):
            found.append(f"line {stmt.lineno}: module-level {type(stmt).__name__}")
        if isinstance(stmt, ast.Assign):
            names = [t.id for t in stmt.targets if isinstance(t, ast.Name)]
            if names != ["__all__"]:
                found.append(f"line {stmt.lineno}: module-level assignment {names}")

    classes = [s for s in tree.body if isinstance(s, ast.ClassDef)]
    if len(classes) != 1 or not classes[0].name.startswith("Node"):
        found.append("expected exactly one Node* class")
        return found

    for item in classes[0].body:
        if isinstance(item, ast.Expr) and isinstance(item.value, ast.Constant):
            continue
        if not isinstance(item, ast.AsyncFunctionDef) or item.name != "compute":
            found.append(f"line {item.lineno}: class member other than compute")
            continue
        body = [
            s
            for s in item.body
            if not (isinstance(s, ast.Expr) and isinstance(s.value, ast.Constant))
        ]
        if len(body) != 1 or not isinstance(body[0], ast.Return):
            found.append(f"line {item.lineno}: compute must only return a handler call")
        elif not isinstance(body[0].value, ast.Call):
            found.append(f"line {item.lineno}: compute must return a call")

    for node in ast.walk(tree):
        if (
            isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id in FORBIDDEN_CALLS
        ):
            found.append(f"line {node.lineno}: forbidden call {node.func.id}()")

    return found


def test_node_files_found() -> None:
    assert len(_node_files()) == 5


@pytest.mark.parametrize("path", _node_files(), ids=lambda p: p.parent.name)
def test_node_shell_is_pure(path: Path) -> None:
    violations = _violations(path)
    assert not violations, f"{path.parent.name}/node.py:\n  " + "\n  ".join(violations)
