# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutable working state for one link-notation parse.

Nodes live in a single table keyed by case-folded name; edges are child
keys. The state is mutated while lines are read and declarations are
resolved, then frozen into a ``ModelProjectGraph``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from spacecompiler.enums.enum_metadata_key import EnumMetadataKey
from spacecompiler.models.model_graph_node import ModelGraphNode, normalize_node_key
from spacecompiler.models.model_metadata import MetadataMap
from spacecompiler.models.model_project_graph import ModelProjectGraph
from spacecompiler.nodes.node_link_graph_parser_compute.models.model_link_declaration import (
    ModelLinkDeclaration,
)

__all__ = ["LinkGraphNodeState", "ModelLinkGraphState"]


@dataclass
class LinkGraphNodeState:
    """Mutable accumulator for one named node.

    Attributes:
        name: Display name from the first sighting.
        key: Case-folded identity key.
        file_path: Latest file mapping, if any.
        child_keys: Child keys in first-added order, without duplicates.
        placeholder: True when the node was only referenced as a child.
    """

    name: str
    key: str
    file_path: str | None = None
    child_keys: list[str] = field(default_factory=list)
    placeholder: bool = False

    def add_child(self, key: str) -> None:
        if key not in self.child_keys:
            self.child_keys.append(key)

    def freeze(self) -> ModelGraphNode:
        metadata: MetadataMap = {}
        if self.placeholder:
            metadata[EnumMetadataKey.PLACEHOLDER] = True
        return ModelGraphNode(
            name=self.name,
            key=self.key,
            file_path=self.file_path,
            child_keys=tuple(self.child_keys),
            metadata=metadata,
        )


@dataclass
class ModelLinkGraphState:
    """Node table, pending declarations and collected warnings."""

    nodes: dict[str, LinkGraphNodeState] = field(default_factory=dict)
    declarations: list[ModelLinkDeclaration] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def find(self, name: str) -> LinkGraphNodeState | None:
        return self.nodes.get(normalize_node_key(name))

    def ensure(self, name: str, *, placeholder: bool = False) -> LinkGraphNodeState:
        """Return the node for ``name``, creating it on first sighting."""
        key = normalize_node_key(name)
        node = self.nodes.get(key)
        if node is None:
            node = LinkGraphNodeState(name=name, key=key, placeholder=placeholder)
            self.nodes[key] = node
        return node

    def root_keys(self) -> tuple[str, ...]:
        """Keys of nodes nobody links to, or every key when that is empty."""
        linked = {key for node in self.nodes.values() for key in node.child_keys}
        roots = tuple(key for key in self.nodes if key not in linked)
        return roots or tuple(self.nodes)

    def freeze(self, metadata: MetadataMap) -> ModelProjectGraph:
        root_keys = self.root_keys()
        return ModelProjectGraph(
            nodes={key: node.freeze() for key, node in self.nodes.items()},
            root_keys=root_keys,
            metadata={
                **metadata,
                EnumMetadataKey.NODE_COUNT: len(self.nodes),
                EnumMetadataKey.ROOT_COUNT: len(root_keys),
                EnumMetadataKey.PLACEHOLDER_COUNT: sum(
                    1 for node in self.nodes.values() if node.placeholder
                ),
                EnumMetadataKey.WARNINGS: list(self.warnings),
            },
        )
