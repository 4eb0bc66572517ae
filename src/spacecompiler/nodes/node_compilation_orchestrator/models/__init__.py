# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for node_compilation_orchestrator."""

from __future__ import annotations

from spacecompiler.nodes.node_compilation_orchestrator.models.enum_compilation_operation import (
    EnumCompilationOperation,
)
from spacecompiler.nodes.node_compilation_orchestrator.models.model_compilation_request import (
    ModelCompilationRequest,
)
from spacecompiler.nodes.node_compilation_orchestrator.models.model_compilation_result import (
    ModelCompilationResult,
)

__all__ = [
    "EnumCompilationOperation",
    "ModelCompilationRequest",
    "ModelCompilationResult",
]
