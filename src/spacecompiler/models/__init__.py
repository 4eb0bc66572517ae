# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared data models: fragments, blocks, resources and project graphs."""

from spacecompiler.models.model_block import BLOCK_SEPARATOR, ModelBlock
from spacecompiler.models.model_fragment import ModelFragment
from spacecompiler.models.model_graph_node import ModelGraphNode, normalize_node_key
from spacecompiler.models.model_metadata import MetadataMap, MetadataValue
from spacecompiler.models.model_parsed_resource import ModelParsedResource
from spacecompiler.models.model_project_graph import ModelProjectGraph

__all__ = [
    "BLOCK_SEPARATOR",
    "MetadataMap",
    "MetadataValue",
    "ModelBlock",
    "ModelFragment",
    "ModelGraphNode",
    "ModelParsedResource",
    "ModelProjectGraph",
    "normalize_node_key",
]
