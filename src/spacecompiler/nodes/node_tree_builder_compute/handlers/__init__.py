# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_tree_builder_compute."""

from __future__ import annotations

from spacecompiler.nodes.node_tree_builder_compute.handlers.handler_tree_builder import (
    build,
    handle_tree_build,
    pack_blocks,
)

__all__ = ["build", "handle_tree_build", "pack_blocks"]
