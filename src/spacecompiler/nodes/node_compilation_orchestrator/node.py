# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Node CompilationOrchestrator: segment, build and analyze in one call.

Supported operations (``EnumCompilationOperation``):
    - compile_file: one file into one analyzed resource
    - compile_files: several files, one resource each
    - compile_project: ``.spaceproj`` graph with compiled file nodes

Does NOT:
    - Read files from disk or extract archives
    - Serve HTTP requests
"""

from __future__ import annotations

from spacecompiler.nodes.node_compilation_orchestrator.handlers.handler_compilation import (
    handle_compilation,
)
from spacecompiler.nodes.node_compilation_orchestrator.models.model_compilation_request import (
    ModelCompilationRequest,
)
from spacecompiler.nodes.node_compilation_orchestrator.models.model_compilation_result import (
    ModelCompilationResult,
)


class NodeCompilationOrchestrator:
    """Thin shell routing requests through ``handle_compilation``.

    Example:
        ```python
        result = await NodeCompilationOrchestrator().compute(
            ModelCompilationRequest(
                operation=EnumCompilationOperation.COMPILE_PROJECT,
                files={
                    "zoo.spaceproj": "Animals: (Dogs)\\nDogs: dogs.txt",
                    "dogs.txt": "Dogs bark.",
                },
            )
        )
        ```
    """

    async def compute(self, input_data: ModelCompilationRequest) -> ModelCompilationResult:
        """Run the requested compilation by delegating to handler function."""
        return handle_compilation(input_data)


__all__ = ["NodeCompilationOrchestrator"]
