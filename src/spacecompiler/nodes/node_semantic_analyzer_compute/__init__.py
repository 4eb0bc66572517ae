# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Semantic analyzer compute node."""

from spacecompiler.nodes.node_semantic_analyzer_compute.handlers import (
    analyze,
    analyze_text,
    handle_semantic_analysis,
)
from spacecompiler.nodes.node_semantic_analyzer_compute.models import (
    ModelSemanticAnalysisInput,
    ModelSemanticAnalysisOutput,
    ModelTextAnalysis,
)
from spacecompiler.nodes.node_semantic_analyzer_compute.node import (
    NodeSemanticAnalyzerCompute,
)

__all__ = [
    "ModelSemanticAnalysisInput",
    "ModelSemanticAnalysisOutput",
    "ModelTextAnalysis",
    "NodeSemanticAnalyzerCompute",
    "analyze",
    "analyze_text",
    "handle_semantic_analysis",
]
