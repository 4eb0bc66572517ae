# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fragment model: the smallest segmented unit of content."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from spacecompiler.enums.enum_fragment_kind import EnumFragmentKind
from spacecompiler.models.model_metadata import MetadataMap


class ModelFragment(BaseModel):
    """A single fragment emitted by the segmenter.

    Attributes:
        content: Fragment text (normalized paragraph, or a JSON summary/value).
        kind: Fragment kind.
        order: 0-based emission index within one resource.
        parent_key: Path of the enclosing JSON container. None for text
            fragments and for the JSON root.
        metadata: Segmenter metadata, later enriched with ``semantic_`` keys.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    content: str = Field(description="Fragment text.")
    kind: EnumFragmentKind = Field(
        default=EnumFragmentKind.PARAGRAPH,
        description="Fragment kind.",
    )
    order: int = Field(ge=0, description="0-based emission index.")
    parent_key: str | None = Field(
        default=None,
        description="Path of the enclosing JSON container, if any.",
    )
    metadata: MetadataMap = Field(
        default_factory=dict,
        description="Open metadata map (JSON values only).",
    )

    @property
    def length(self) -> int:
        """Character length of the fragment content."""
        return len(self.content)


__all__ = ["ModelFragment"]
