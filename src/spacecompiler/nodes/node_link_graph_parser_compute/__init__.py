# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Link-graph parser compute node."""

from spacecompiler.nodes.node_link_graph_parser_compute.handlers import (
    handle_link_graph_parse,
    parse_links,
)
from spacecompiler.nodes.node_link_graph_parser_compute.models import (
    ModelLinkGraphParseInput,
    ModelLinkGraphParseOutput,
)
from spacecompiler.nodes.node_link_graph_parser_compute.node import (
    NodeLinkGraphParserCompute,
)

__all__ = [
    "ModelLinkGraphParseInput",
    "ModelLinkGraphParseOutput",
    "NodeLinkGraphParserCompute",
    "handle_link_graph_parse",
    "parse_links",
]
