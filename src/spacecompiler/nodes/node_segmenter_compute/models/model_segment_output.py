# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output model for SegmenterCompute."""

from __future__ import annotations

from pydantic import BaseModel, Field

from spacecompiler.enums.enum_content_kind import EnumContentKind
from spacecompiler.models.model_fragment import ModelFragment


class ModelSegmentOutput(BaseModel):
    """Result of a segmentation request.

    Attributes:
        fragments: Fragments in emission order (``order`` = index).
        kind: Strategy that actually produced the fragments. TEXT when JSON
            parsing failed and the content was segmented as text.
        fell_back_to_text: True when JSON input could not be parsed.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    fragments: tuple[ModelFragment, ...] = Field(default=())
    kind: EnumContentKind = Field(description="Effective segmentation strategy.")
    fell_back_to_text: bool = Field(default=False)


__all__ = ["ModelSegmentOutput"]
