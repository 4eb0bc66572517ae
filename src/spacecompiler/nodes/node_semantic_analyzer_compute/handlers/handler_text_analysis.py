# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Heuristic text analysis: word statistics, category and readability.

All features are deterministic functions of the input text:

1. Words are ASCII letter runs longer than two characters, lower-cased.
2. ``top_keywords`` holds the 10 most frequent words outside the stop-word
   list. Equal counts keep first-seen order.
3. Sentences are pieces between ``.``, ``!`` or ``?`` runs followed by
   whitespace.
4. The category is the first keyword table that intersects the top
   keywords, then a narrative phrase check, else ``general``.
5. ``readability_score`` is avg_sentence_length * 0.5 + avg_word_length * 2.0.
   Lower is easier.

Rounding uses ``round`` (half-to-even).
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from operator import itemgetter

from spacecompiler.enums.enum_content_category import EnumContentCategory
from spacecompiler.enums.enum_readability_level import EnumReadabilityLevel
from spacecompiler.models.model_metadata import MetadataMap
from spacecompiler.nodes.node_semantic_analyzer_compute.models.model_text_analysis import (
    ModelTextAnalysis,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Word tables
# =============================================================================

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "up", "about", "into", "through", "during",
        "before", "after", "above", "below", "between", "under", "again",
        "further", "then", "once", "here", "there", "when", "where", "why",
        "how", "all", "both", "each", "few", "more", "most", "other", "some",
        "such", "no", "nor", "not", "only", "own", "same", "so", "than", "too",
        "very", "can", "will", "just", "should", "now", "is", "are", "was",
        "were", "be", "been", "being", "have", "has", "had", "do", "does",
        "did", "doing",
    }
)  # fmt: skip

# Checked in order; "data" appears twice, so technical wins over academic.
CATEGORY_KEYWORDS: tuple[tuple[EnumContentCategory, frozenset[str]], ...] = (
    (
        EnumContentCategory.TECHNICAL,
        frozenset({"function", "class", "method", "code", "data", "api", "system"}),
    ),
    (
        EnumContentCategory.BUSINESS,
        frozenset({"company", "business", "market", "customer", "product", "service"}),
    ),
    (
        EnumContentCategory.ACADEMIC,
        frozenset({"research", "study", "analysis", "theory", "hypothesis", "data"}),
    ),
    (
        EnumContentCategory.NEWS,
        frozenset({"reported", "announced", "according", "said", "stated"}),
    ),
)

TOP_KEYWORD_LIMIT = 10
MIN_WORD_LENGTH = 3
SENTENCE_LENGTH_WEIGHT = 0.5
WORD_LENGTH_WEIGHT = 2.0

# =============================================================================
# Patterns
# =============================================================================

_WORD = re.compile(r"\b[a-zA-Z]+\b")
_SENTENCE_BREAK = re.compile(r"[.!?]+\s+")
_NARRATIVE = re.compile(r"\b(once|there was|story|tale|character)\b")
_LIST_ITEM = re.compile(r"^\s*[-*•]\s+", re.MULTILINE)
_DIGITS = re.compile(r"\d+")
_URL = re.compile(r"https?://")


# =============================================================================
# Feature helpers
# =============================================================================


def extract_words(text: str) -> list[str]:
    return [
        match.lower()
        for match in _WORD.findall(text)
        if len(match) >= MIN_WORD_LENGTH
    ]


def extract_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_BREAK.split(text) if s.strip()]


def top_keywords(frequency: Counter[str]) -> dict[str, int]:
    """Most frequent non-stop words; ``sorted`` keeps ties in first-seen order."""
    ranked = sorted(frequency.items(), key=itemgetter(1), reverse=True)
    kept = [(word, count) for word, count in ranked if word not in STOP_WORDS]
    return dict(kept[:TOP_KEYWORD_LIMIT])


def detect_category(text: str, keywords: dict[str, int]) -> EnumContentCategory:
    for category, table in CATEGORY_KEYWORDS:
        if table.intersection(keywords):
            return category
    if _NARRATIVE.search(text.lower()):
        return EnumContentCategory.NARRATIVE
    return EnumContentCategory.GENERAL


def readability_score(avg_sentence_length: float, avg_word_length: float) -> float:
    return round(
        avg_sentence_length * SENTENCE_LENGTH_WEIGHT
        + avg_word_length * WORD_LENGTH_WEIGHT,
        1,
    )


# =============================================================================
# Entry points
# =============================================================================


def compute_text_analysis(text: str) -> ModelTextAnalysis:
    """Compute all heuristic features of ``text``."""
    words = extract_words(text)
    frequency = Counter(words)
    keywords = top_keywords(frequency)
    sentences = extract_sentences(text)

    lexical_diversity = round(len(frequency) / len(words), 3) if words else 0.0
    avg_sentence_length = round(len(words) / len(sentences), 1) if sentences else 0.0
    avg_word_length = (
        round(sum(len(w) for w in words) / len(words), 1) if words else 0.0
    )
    score = readability_score(avg_sentence_length, avg_word_length)

    return ModelTextAnalysis(
        top_keywords=keywords,
        unique_word_count=len(frequency),
        total_word_count=len(words),
        lexical_diversity=lexical_diversity,
        sentence_count=len(sentences),
        avg_sentence_length=avg_sentence_length,
        content_category=detect_category(text, keywords),
        has_questions="?" in text,
        has_lists=_LIST_ITEM.search(text) is not None,
        has_numbers=_DIGITS.search(text) is not None,
        has_urls=_URL.search(text) is not None,
        avg_word_length=avg_word_length,
        readability_score=score,
        readability_level=EnumReadabilityLevel.from_score(score),
    )


def analyze_text(text: str) -> MetadataMap:
    """Analyze text and return the features as an unprefixed metadata map."""
    return compute_text_analysis(text).to_metadata()


__all__ = [
    "CATEGORY_KEYWORDS",
    "STOP_WORDS",
    "analyze_text",
    "compute_text_analysis",
    "detect_category",
    "extract_sentences",
    "extract_words",
    "top_keywords",
]
