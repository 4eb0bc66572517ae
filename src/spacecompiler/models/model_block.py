# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Block model: a size-bounded run of consecutive fragments."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from spacecompiler.models.model_fragment import ModelFragment
from spacecompiler.models.model_metadata import MetadataMap

BLOCK_SEPARATOR = "\n\n"


class ModelBlock(BaseModel):
    """One compilation unit of the parsed tree.

    Attributes:
        order: Index of the block within its resource.
        kind: Always ``"block"``.
        content: Fragment contents joined by a blank line, in fragment order.
        fragments: The fragments in this block (never empty).
        metadata: Builder metadata, later enriched with ``semantic_`` keys.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    order: int = Field(ge=0, description="Index of the block in its resource.")
    kind: Literal["block"] = Field(default="block", description="Constant kind.")
    content: str = Field(description="Joined fragment contents.")
    fragments: tuple[ModelFragment, ...] = Field(
        min_length=1,
        description="Fragments in emission order.",
    )
    metadata: MetadataMap = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_content_round_trip(self) -> ModelBlock:
        """Block content must be exactly its fragments joined by the separator."""
        joined = BLOCK_SEPARATOR.join(f.content for f in self.fragments)
        if joined != self.content:
            raise ValueError(
                f"Block {self.order} content does not match its "
                f"{len(self.fragments)} fragments joined by a blank line"
            )
        return self

    @property
    def size(self) -> int:
        """Sum of fragment content lengths (separators excluded)."""
        return sum(f.length for f in self.fragments)


__all__ = ["BLOCK_SEPARATOR", "ModelBlock"]
