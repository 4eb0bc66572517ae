# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for node_semantic_analyzer_compute."""

from __future__ import annotations

from spacecompiler.nodes.node_semantic_analyzer_compute.models.model_semantic_analysis_input import (
    ModelSemanticAnalysisInput,
)
from spacecompiler.nodes.node_semantic_analyzer_compute.models.model_semantic_analysis_output import (
    ModelSemanticAnalysisOutput,
)
from spacecompiler.nodes.node_semantic_analyzer_compute.models.model_text_analysis import (
    ModelTextAnalysis,
)

__all__ = [
    "ModelSemanticAnalysisInput",
    "ModelSemanticAnalysisOutput",
    "ModelTextAnalysis",
]
