# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_link_graph_parser_compute."""

from __future__ import annotations

from spacecompiler.nodes.node_link_graph_parser_compute.handlers.handler_link_graph import (
    handle_link_graph_parse,
    parse_links,
)

__all__ = ["handle_link_graph_parse", "parse_links"]
