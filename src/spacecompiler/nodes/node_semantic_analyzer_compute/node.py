# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Node SemanticAnalyzerCompute: heuristic metadata for a resource tree.

Pure compute, zero I/O. Analysis is statistical (word frequencies,
sentence lengths, keyword tables); no model calls are made.
"""

from __future__ import annotations

from spacecompiler.nodes.node_semantic_analyzer_compute.handlers.handler_resource_analysis import (
    handle_semantic_analysis,
)
from spacecompiler.nodes.node_semantic_analyzer_compute.models.model_semantic_analysis_input import (
    ModelSemanticAnalysisInput,
)
from spacecompiler.nodes.node_semantic_analyzer_compute.models.model_semantic_analysis_output import (
    ModelSemanticAnalysisOutput,
)


class NodeSemanticAnalyzerCompute:
    """Thin shell delegating to ``handle_semantic_analysis``."""

    async def compute(
        self, input_data: ModelSemanticAnalysisInput
    ) -> ModelSemanticAnalysisOutput:
        """Enrich the resource by delegating to handler function."""
        return handle_semantic_analysis(input_data)


__all__ = ["NodeSemanticAnalyzerCompute"]
