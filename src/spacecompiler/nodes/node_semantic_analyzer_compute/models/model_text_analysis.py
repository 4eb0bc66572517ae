# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Heuristic text analysis result."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from spacecompiler.enums.enum_content_category import EnumContentCategory
from spacecompiler.enums.enum_metadata_key import SEMANTIC_PREFIX
from spacecompiler.enums.enum_readability_level import EnumReadabilityLevel
from spacecompiler.models.model_metadata import MetadataMap


class ModelTextAnalysis(BaseModel):
    """Statistical and lexical features of one piece of text.

    Field order is the order in which the features appear in metadata.
    Ratios and averages are floats rounded half-to-even; counts are ints.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    top_keywords: dict[str, int] = Field(
        default_factory=dict,
        description="Up to 10 most frequent non-stop words, ties in first-seen order",
    )
    unique_word_count: int = Field(default=0, ge=0)
    total_word_count: int = Field(default=0, ge=0)
    lexical_diversity: float = Field(default=0.0, ge=0.0, le=1.0)
    sentence_count: int = Field(default=0, ge=0)
    avg_sentence_length: float = Field(default=0.0, ge=0.0)
    content_category: EnumContentCategory = Field(default=EnumContentCategory.GENERAL)
    has_questions: bool = False
    has_lists: bool = False
    has_numbers: bool = False
    has_urls: bool = False
    avg_word_length: float = Field(default=0.0, ge=0.0)
    readability_score: float = Field(default=0.0, ge=0.0)
    readability_level: EnumReadabilityLevel = Field(
        default=EnumReadabilityLevel.VERY_EASY
    )

    def to_metadata(self, prefix: str = "") -> MetadataMap:
        """Render as a JSON metadata map, keys optionally prefixed."""
        return {
            f"{prefix}{key}": value
            for key, value in self.model_dump(mode="json").items()
        }

    def to_semantic_metadata(self) -> MetadataMap:
        """Render with the ``semantic_`` key prefix used on the tree."""
        return self.to_metadata(SEMANTIC_PREFIX)


__all__ = ["ModelTextAnalysis"]
