# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Compilation result model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from spacecompiler.models.model_metadata import MetadataMap
from spacecompiler.models.model_parsed_resource import ModelParsedResource
from spacecompiler.models.model_project_graph import ModelProjectGraph


class ModelCompilationResult(BaseModel):
    """Outcome of a file, multi-file or project compilation.

    Attributes:
        resources: Analyzed resources, one per compiled file, in order.
        graph: Project graph with ``parsed_content`` filled in. Only set by
            project compilation.
        metadata: ``file_count``, ``total_blocks`` and ``total_fragments``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    resources: tuple[ModelParsedResource, ...] = Field(default=())
    graph: ModelProjectGraph | None = Field(default=None)
    metadata: MetadataMap = Field(default_factory=dict)

    def get_resource(self, resource_id: str) -> ModelParsedResource | None:
        for resource in self.resources:
            if resource.resource_id == resource_id:
                return resource
        return None


__all__ = ["ModelCompilationResult"]
