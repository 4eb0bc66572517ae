# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Node SegmenterCompute: raw content to ordered fragments.

Pure compute, zero I/O, deterministic. Delegates to ``handle_segment``.

Strategies:
    TEXT: blank-line paragraphs, short-paragraph merging, sentence splitting
    JSON: depth-first walk emitting value and container-summary fragments

Does NOT:
    - Build blocks (see node_tree_builder_compute)
    - Attach semantic metadata (see node_semantic_analyzer_compute)
"""

from __future__ import annotations

from spacecompiler.nodes.node_segmenter_compute.handlers.handler_segmenter import (
    handle_segment,
)
from spacecompiler.nodes.node_segmenter_compute.models.model_segment_input import (
    ModelSegmentInput,
)
from spacecompiler.nodes.node_segmenter_compute.models.model_segment_output import (
    ModelSegmentOutput,
)


class NodeSegmenterCompute:
    """Thin async shell around the segmentation handler.

    Example:
        ```python
        node = NodeSegmenterCompute()
        output = await node.compute(
            ModelSegmentInput(content='{"name": "Test"}', kind="json")
        )
        ```
    """

    async def compute(self, input_data: ModelSegmentInput) -> ModelSegmentOutput:
        """Segment content by delegating to handler function."""
        return handle_segment(input_data)


__all__ = ["NodeSegmenterCompute"]
