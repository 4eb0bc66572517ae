# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for node_tree_builder_compute."""

from __future__ import annotations

from spacecompiler.nodes.node_tree_builder_compute.models.model_tree_build_input import (
    ModelTreeBuildInput,
)
from spacecompiler.nodes.node_tree_builder_compute.models.model_tree_build_output import (
    ModelTreeBuildOutput,
)

__all__ = ["ModelTreeBuildInput", "ModelTreeBuildOutput"]
