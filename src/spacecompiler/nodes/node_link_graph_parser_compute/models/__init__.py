# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for node_link_graph_parser_compute."""

from __future__ import annotations

from spacecompiler.nodes.node_link_graph_parser_compute.models.model_link_declaration import (
    ModelLinkDeclaration,
)
from spacecompiler.nodes.node_link_graph_parser_compute.models.model_link_graph_parse_input import (
    ModelLinkGraphParseInput,
)
from spacecompiler.nodes.node_link_graph_parser_compute.models.model_link_graph_parse_output import (
    ModelLinkGraphParseOutput,
)
from spacecompiler.nodes.node_link_graph_parser_compute.models.model_link_graph_state import (
    LinkGraphNodeState,
    ModelLinkGraphState,
)

__all__ = [
    "LinkGraphNodeState",
    "ModelLinkDeclaration",
    "ModelLinkGraphParseInput",
    "ModelLinkGraphParseOutput",
    "ModelLinkGraphState",
]
