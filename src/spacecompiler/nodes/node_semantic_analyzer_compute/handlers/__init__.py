# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_semantic_analyzer_compute."""

from __future__ import annotations

from spacecompiler.nodes.node_semantic_analyzer_compute.handlers.handler_resource_analysis import (
    analyze,
    handle_semantic_analysis,
)
from spacecompiler.nodes.node_semantic_analyzer_compute.handlers.handler_text_analysis import (
    analyze_text,
    compute_text_analysis,
)

__all__ = [
    "analyze",
    "analyze_text",
    "compute_text_analysis",
    "handle_semantic_analysis",
]
