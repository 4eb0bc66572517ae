# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_compilation_orchestrator."""

from __future__ import annotations

from spacecompiler.nodes.node_compilation_orchestrator.handlers.exceptions import (
    CompilationError,
    CompilationValidationError,
    ProjectDescriptionNotFoundError,
)
from spacecompiler.nodes.node_compilation_orchestrator.handlers.handler_compilation import (
    compile_file,
    compile_files,
    compile_project,
    handle_compilation,
)

__all__ = [
    "CompilationError",
    "CompilationValidationError",
    "ProjectDescriptionNotFoundError",
    "compile_file",
    "compile_files",
    "compile_project",
    "handle_compilation",
]
