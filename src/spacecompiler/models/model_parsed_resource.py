# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parsed resource model: the resource-level tree of blocks."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from spacecompiler.models.model_block import ModelBlock
from spacecompiler.models.model_fragment import ModelFragment
from spacecompiler.models.model_metadata import MetadataMap


class ModelParsedResource(BaseModel):
    """A compiled resource (file, document, upload).

    Attributes:
        resource_id: Resource identifier (file name, URL, ...).
        resource_type: Resource type label (``text``, ``json``, ...).
        metadata: Resource-level metadata.
        blocks: Blocks in order; owned exclusively by this resource.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    resource_id: str = Field(description="Resource identifier.")
    resource_type: str = Field(default="text", description="Resource type label.")
    metadata: MetadataMap = Field(default_factory=dict)
    blocks: tuple[ModelBlock, ...] = Field(default=())

    def iter_fragments(self) -> tuple[ModelFragment, ...]:
        """All fragments of all blocks, in order."""
        return tuple(f for block in self.blocks for f in block.fragments)


__all__ = ["ModelParsedResource"]
