# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Project graph model: one owning node table plus key-based edges."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from spacecompiler.models.model_graph_node import ModelGraphNode, normalize_node_key
from spacecompiler.models.model_metadata import MetadataMap


class ModelProjectGraph(BaseModel):
    """Rooted (possibly forest) graph of project nodes.

    ``nodes`` is the single source of truth. Roots and children are keys
    into it, so a node reachable along several paths is stored once.

    Attributes:
        nodes: Node table keyed by case-folded name, in first-seen order.
        root_keys: Keys of the root nodes, in node-table order.
        metadata: Graph metadata (counts, warnings, parse timestamp).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    nodes: dict[str, ModelGraphNode] = Field(default_factory=dict)
    root_keys: tuple[str, ...] = Field(default=())
    metadata: MetadataMap = Field(default_factory=dict)

    @property
    def roots(self) -> list[ModelGraphNode]:
        """Root nodes in node-table order."""
        return [self.nodes[key] for key in self.root_keys]

    def get_node(self, name: str) -> ModelGraphNode | None:
        """Look a node up by name, case-insensitively."""
        return self.nodes.get(normalize_node_key(name))

    def children_of(self, node: ModelGraphNode | str) -> list[ModelGraphNode]:
        """Resolve a node's child keys to nodes.

        Raises:
            KeyError: If ``node`` is a name that is not in the graph.
        """
        if isinstance(node, str):
            found = self.get_node(node)
            if found is None:
                raise KeyError(node)
            node = found
        return [self.nodes[key] for key in node.child_keys]


__all__ = ["ModelProjectGraph"]
