# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output model for SemanticAnalyzerCompute."""

from __future__ import annotations

from pydantic import BaseModel, Field

from spacecompiler.models.model_parsed_resource import ModelParsedResource


class ModelSemanticAnalysisOutput(BaseModel):
    """Enriched copy of the input resource.

    Attributes:
        resource: Resource whose fragments, blocks and own metadata carry
            ``semantic_``-prefixed analysis keys.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    resource: ModelParsedResource


__all__ = ["ModelSemanticAnalysisOutput"]
