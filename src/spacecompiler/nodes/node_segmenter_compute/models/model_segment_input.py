# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Input model for SegmenterCompute."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from spacecompiler.config.model_compiler_limits import (
    DEFAULT_MAX_PARAGRAPH_LENGTH,
    DEFAULT_MIN_PARAGRAPH_LENGTH,
)
from spacecompiler.enums.enum_content_kind import EnumContentKind


class ModelSegmentInput(BaseModel):
    """Input for a segmentation request.

    Attributes:
        content: Raw content (plain text or a JSON document).
        kind: Content kind. Free-form labels such as ``"txt"`` are accepted;
            anything that is not ``json`` resolves to text.
        min_length: Paragraphs shorter than this are merged with neighbours.
        max_length: Units longer than this are split on sentence ends.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    content: str = Field(description="Raw content to segment.")
    kind: EnumContentKind = Field(
        default=EnumContentKind.TEXT,
        description="Content kind selecting the segmentation strategy.",
    )
    min_length: int = Field(default=DEFAULT_MIN_PARAGRAPH_LENGTH, gt=0)
    max_length: int = Field(default=DEFAULT_MAX_PARAGRAPH_LENGTH, gt=0)

    @field_validator("kind", mode="before")
    @classmethod
    def resolve_kind_label(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return EnumContentKind.from_label(value)
        return value

    @model_validator(mode="after")
    def validate_length_bounds(self) -> ModelSegmentInput:
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must not exceed "
                f"max_length ({self.max_length})"
            )
        return self


__all__ = ["ModelSegmentInput"]
