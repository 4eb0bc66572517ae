# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Node TreeBuilderCompute: fragments to a resource-level block tree."""

from __future__ import annotations

from spacecompiler.nodes.node_tree_builder_compute.handlers.handler_tree_builder import (
    handle_tree_build,
)
from spacecompiler.nodes.node_tree_builder_compute.models.model_tree_build_input import (
    ModelTreeBuildInput,
)
from spacecompiler.nodes.node_tree_builder_compute.models.model_tree_build_output import (
    ModelTreeBuildOutput,
)


class NodeTreeBuilderCompute:
    """Pure compute node packing fragments into size-bounded blocks.

    Thin shell; all computation is delegated to ``handle_tree_build``.
    """

    async def compute(self, input_data: ModelTreeBuildInput) -> ModelTreeBuildOutput:
        """Build the resource tree by delegating to handler function."""
        return handle_tree_build(input_data)


__all__ = ["NodeTreeBuilderCompute"]
