# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Input model for TreeBuilderCompute."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from spacecompiler.config.model_compiler_limits import DEFAULT_MAX_BLOCK_SIZE
from spacecompiler.models.model_fragment import ModelFragment


class ModelTreeBuildInput(BaseModel):
    """Input for packing fragments into a parsed resource.

    Attributes:
        fragments: Fragments in segmenter order.
        resource_id: Identifier recorded on the resource.
        resource_type: Type label recorded on the resource.
        max_block_size: Character budget of one block.
        parsed_at: Timestamp recorded in resource metadata. Defaults to the
            current UTC time; pass a fixed value for replayable output.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    fragments: tuple[ModelFragment, ...] = Field(default=())
    resource_id: str = Field(description="Resource identifier (file name, URL, ...).")
    resource_type: str = Field(default="text")
    max_block_size: int = Field(default=DEFAULT_MAX_BLOCK_SIZE, gt=0)
    parsed_at: datetime | None = Field(default=None)


__all__ = ["ModelTreeBuildInput"]
