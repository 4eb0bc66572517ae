# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Input model for SemanticAnalyzerCompute."""

from __future__ import annotations

from pydantic import BaseModel, Field

from spacecompiler.models.model_parsed_resource import ModelParsedResource


class ModelSemanticAnalysisInput(BaseModel):
    """A built resource to enrich with semantic metadata."""

    model_config = {"frozen": True, "extra": "forbid"}

    resource: ModelParsedResource = Field(description="Resource to analyze.")


__all__ = ["ModelSemanticAnalysisInput"]
