# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Readability level buckets."""

from __future__ import annotations

from enum import Enum


class EnumReadabilityLevel(str, Enum):
    """Qualitative readability level derived from the readability score.

    Buckets (upper bounds exclusive):
        score < 10  -> VERY_EASY
        score < 15  -> EASY
        score < 20  -> MODERATE
        score < 25  -> DIFFICULT
        otherwise   -> VERY_DIFFICULT
    """

    VERY_EASY = "very_easy"
    EASY = "easy"
    MODERATE = "moderate"
    DIFFICULT = "difficult"
    VERY_DIFFICULT = "very_difficult"

    @classmethod
    def from_score(cls, score: float) -> EnumReadabilityLevel:
        """Bucket a readability score."""
        if score < 10:
            return cls.VERY_EASY
        if score < 15:
            return cls.EASY
        if score < 20:
            return cls.MODERATE
        if score < 25:
            return cls.DIFFICULT
        return cls.VERY_DIFFICULT


__all__ = ["EnumReadabilityLevel"]
