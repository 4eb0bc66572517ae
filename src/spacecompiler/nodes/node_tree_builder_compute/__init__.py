# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tree builder compute node."""

from spacecompiler.nodes.node_tree_builder_compute.handlers import build, handle_tree_build
from spacecompiler.nodes.node_tree_builder_compute.models import (
    ModelTreeBuildInput,
    ModelTreeBuildOutput,
)
from spacecompiler.nodes.node_tree_builder_compute.node import NodeTreeBuilderCompute

__all__ = [
    "ModelTreeBuildInput",
    "ModelTreeBuildOutput",
    "NodeTreeBuilderCompute",
    "build",
    "handle_tree_build",
]
