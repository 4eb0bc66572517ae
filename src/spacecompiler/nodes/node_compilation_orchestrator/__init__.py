# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Compilation orchestrator node."""

from spacecompiler.nodes.node_compilation_orchestrator.handlers import (
    CompilationError,
    CompilationValidationError,
    ProjectDescriptionNotFoundError,
    compile_file,
    compile_files,
    compile_project,
    handle_compilation,
)
from spacecompiler.nodes.node_compilation_orchestrator.models import (
    EnumCompilationOperation,
    ModelCompilationRequest,
    ModelCompilationResult,
)
from spacecompiler.nodes.node_compilation_orchestrator.node import (
    NodeCompilationOrchestrator,
)

__all__ = [
    "CompilationError",
    "CompilationValidationError",
    "EnumCompilationOperation",
    "ModelCompilationRequest",
    "ModelCompilationResult",
    "NodeCompilationOrchestrator",
    "ProjectDescriptionNotFoundError",
    "compile_file",
    "compile_files",
    "compile_project",
    "handle_compilation",
]
