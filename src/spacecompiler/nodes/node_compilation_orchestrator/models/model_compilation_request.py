# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request model for NodeCompilationOrchestrator."""

from __future__ import annotations

from pydantic import BaseModel, Field

from spacecompiler.config.model_compiler_limits import ModelCompilerLimits
from spacecompiler.nodes.node_compilation_orchestrator.models.enum_compilation_operation import (
    EnumCompilationOperation,
)


class ModelCompilationRequest(BaseModel):
    """A compilation request routed to one orchestrator operation.

    Attributes:
        operation: Entry point to run.
        files: File name to content, in compilation order. COMPILE_FILE
            expects exactly one entry.
        content_type: Content kind for COMPILE_FILE; detected from the file
            extension when omitted.
        project_file: Name of the project description for COMPILE_PROJECT;
            the first ``.spaceproj`` entry is used when omitted.
        limits: Segmentation and block-size limits.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    operation: EnumCompilationOperation
    files: dict[str, str] = Field(default_factory=dict)
    content_type: str | None = Field(default=None)
    project_file: str | None = Field(default=None)
    limits: ModelCompilerLimits = Field(default_factory=ModelCompilerLimits)


__all__ = ["ModelCompilationRequest"]
