# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output model for TreeBuilderCompute."""

from __future__ import annotations

from pydantic import BaseModel, Field

from spacecompiler.models.model_parsed_resource import ModelParsedResource


class ModelTreeBuildOutput(BaseModel):
    """Built resource tree."""

    model_config = {"frozen": True, "extra": "ignore"}

    resource: ModelParsedResource = Field(description="Resource with its blocks.")


__all__ = ["ModelTreeBuildOutput"]
