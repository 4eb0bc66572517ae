# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Graph node model for project link graphs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from spacecompiler.enums.enum_metadata_key import EnumMetadataKey
from spacecompiler.models.model_metadata import MetadataMap
from spacecompiler.models.model_parsed_resource import ModelParsedResource


def normalize_node_key(name: str) -> str:
    """Case-insensitive identity key for a node name."""
    return name.strip().casefold()


class ModelGraphNode(BaseModel):
    """A named node of a project graph.

    Children are stored as identity keys into the owning
    ``ModelProjectGraph.nodes`` table, never as nested nodes.

    Attributes:
        name: Display name as first written.
        key: Case-folded identity key.
        file_path: Referenced file, for file nodes.
        child_keys: Ordered, duplicate-free child keys.
        parsed_content: Compiled content of ``file_path``, when compiled.
        metadata: Node metadata (``placeholder`` marks synthesized nodes).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, description="Display name.")
    key: str = Field(min_length=1, description="Case-folded identity key.")
    file_path: str | None = Field(default=None)
    child_keys: tuple[str, ...] = Field(default=())
    parsed_content: ModelParsedResource | None = Field(default=None)
    metadata: MetadataMap = Field(default_factory=dict)

    @property
    def is_placeholder(self) -> bool:
        """True when the node was only referenced, never declared."""
        return self.metadata.get(EnumMetadataKey.PLACEHOLDER) is True

    @property
    def is_file_node(self) -> bool:
        """True when the node maps to a file."""
        return self.file_path is not None


__all__ = ["ModelGraphNode", "normalize_node_key"]
