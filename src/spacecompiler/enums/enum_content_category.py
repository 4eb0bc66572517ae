# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Content category enum produced by the heuristic analyzer."""

from __future__ import annotations

from enum import Enum


class EnumContentCategory(str, Enum):
    """Coarse content category, detected from top keywords.

    Declaration order is not the detection precedence; see
    ``CATEGORY_KEYWORDS`` in the analyzer handler.
    """

    TECHNICAL = "technical"
    BUSINESS = "business"
    ACADEMIC = "academic"
    NEWS = "news"
    NARRATIVE = "narrative"
    GENERAL = "general"


__all__ = ["EnumContentCategory"]
