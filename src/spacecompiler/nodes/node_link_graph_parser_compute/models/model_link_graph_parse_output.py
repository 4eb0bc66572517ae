# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output model for LinkGraphParserCompute."""

from __future__ import annotations

from pydantic import BaseModel, Field

from spacecompiler.models.model_project_graph import ModelProjectGraph


class ModelLinkGraphParseOutput(BaseModel):
    """Resolved project graph."""

    model_config = {"frozen": True, "extra": "ignore"}

    graph: ModelProjectGraph = Field(description="Resolved graph.")


__all__ = ["ModelLinkGraphParseOutput"]
