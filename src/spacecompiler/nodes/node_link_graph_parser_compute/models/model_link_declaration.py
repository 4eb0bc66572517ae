# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Deferred link declaration recorded during the line pass."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelLinkDeclaration(BaseModel):
    """``parent: (child ...)`` or ``parent: child`` awaiting resolution.

    Children may name nodes declared on later lines, so declarations are
    resolved only after every line has been read.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    parent_name: str = Field(description="Parent name as written.")
    child_names: tuple[str, ...] = Field(default=(), description="Child names in order.")
    line_number: int = Field(ge=1, description="1-based source line.")


__all__ = ["ModelLinkDeclaration"]
