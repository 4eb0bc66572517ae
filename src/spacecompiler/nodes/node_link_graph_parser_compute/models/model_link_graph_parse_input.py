# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Input model for LinkGraphParserCompute."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ModelLinkGraphParseInput(BaseModel):
    """Link-notation text to parse.

    Attributes:
        content: Project description, one ``name: value`` entry per line.
        parsed_at: Timestamp recorded in graph metadata (defaults to now, UTC).
    """

    model_config = {"frozen": True, "extra": "forbid"}

    content: str = Field(description="Link-notation source text.")
    parsed_at: datetime | None = Field(default=None)


__all__ = ["ModelLinkGraphParseInput"]
