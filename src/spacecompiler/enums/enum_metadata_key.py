# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumeration of metadata keys written by each component.

Metadata maps are open-ended JSON values, but the keys a component may
write are fixed here so downstream consumers can inspect them without
guessing. Analyzer keys are written with the ``semantic_`` prefix.
"""

from __future__ import annotations

from enum import StrEnum

SEMANTIC_PREFIX = "semantic_"


class EnumMetadataKey(StrEnum):
    """Known metadata keys."""

    # Segmenter (text)
    LENGTH = "length"
    WORD_COUNT = "word_count"

    # Segmenter (JSON)
    PATH = "path"
    VALUE_TYPE = "value_type"
    PROPERTY_COUNT = "property_count"
    ARRAY_LENGTH = "array_length"
    DEPTH = "depth"

    # TreeBuilder
    FRAGMENT_COUNT = "fragment_count"
    SIZE = "size"
    PARSED_AT = "parsed_at"
    TOTAL_FRAGMENTS = "total_fragments"
    TOTAL_BLOCKS = "total_blocks"

    # Analyzer (unprefixed names)
    TOP_KEYWORDS = "top_keywords"
    UNIQUE_WORD_COUNT = "unique_word_count"
    TOTAL_WORD_COUNT = "total_word_count"
    LEXICAL_DIVERSITY = "lexical_diversity"
    SENTENCE_COUNT = "sentence_count"
    AVG_SENTENCE_LENGTH = "avg_sentence_length"
    CONTENT_CATEGORY = "content_category"
    HAS_QUESTIONS = "has_questions"
    HAS_LISTS = "has_lists"
    HAS_NUMBERS = "has_numbers"
    HAS_URLS = "has_urls"
    AVG_WORD_LENGTH = "avg_word_length"
    READABILITY_SCORE = "readability_score"
    READABILITY_LEVEL = "readability_level"

    # LinkGraphParser
    PLACEHOLDER = "placeholder"
    NODE_COUNT = "node_count"
    ROOT_COUNT = "root_count"
    PLACEHOLDER_COUNT = "placeholder_count"
    WARNINGS = "warnings"

    # Orchestrator
    MISSING_FILE = "missing_file"
    FILE_COUNT = "file_count"

    def semantic(self) -> str:
        """Return the key as written by the analyzer (``semantic_`` prefix)."""
        return f"{SEMANTIC_PREFIX}{self.value}"


TEXT_FRAGMENT_KEYS: frozenset[EnumMetadataKey] = frozenset(
    {EnumMetadataKey.LENGTH, EnumMetadataKey.WORD_COUNT}
)
JSON_VALUE_KEYS: frozenset[EnumMetadataKey] = frozenset(
    {EnumMetadataKey.PATH, EnumMetadataKey.VALUE_TYPE, EnumMetadataKey.LENGTH}
)
JSON_OBJECT_KEYS: frozenset[EnumMetadataKey] = frozenset(
    {EnumMetadataKey.PATH, EnumMetadataKey.PROPERTY_COUNT, EnumMetadataKey.DEPTH}
)
JSON_ARRAY_KEYS: frozenset[EnumMetadataKey] = frozenset(
    {EnumMetadataKey.PATH, EnumMetadataKey.ARRAY_LENGTH, EnumMetadataKey.DEPTH}
)
BLOCK_KEYS: frozenset[EnumMetadataKey] = frozenset(
    {EnumMetadataKey.FRAGMENT_COUNT, EnumMetadataKey.SIZE}
)
RESOURCE_KEYS: frozenset[EnumMetadataKey] = frozenset(
    {
        EnumMetadataKey.PARSED_AT,
        EnumMetadataKey.TOTAL_FRAGMENTS,
        EnumMetadataKey.TOTAL_BLOCKS,
    }
)
ANALYSIS_KEYS: tuple[EnumMetadataKey, ...] = (
    EnumMetadataKey.TOP_KEYWORDS,
    EnumMetadataKey.UNIQUE_WORD_COUNT,
    EnumMetadataKey.TOTAL_WORD_COUNT,
    EnumMetadataKey.LEXICAL_DIVERSITY,
    EnumMetadataKey.SENTENCE_COUNT,
    EnumMetadataKey.AVG_SENTENCE_LENGTH,
    EnumMetadataKey.CONTENT_CATEGORY,
    EnumMetadataKey.HAS_QUESTIONS,
    EnumMetadataKey.HAS_LISTS,
    EnumMetadataKey.HAS_NUMBERS,
    EnumMetadataKey.HAS_URLS,
    EnumMetadataKey.AVG_WORD_LENGTH,
    EnumMetadataKey.READABILITY_SCORE,
    EnumMetadataKey.READABILITY_LEVEL,
)


__all__ = [
    "ANALYSIS_KEYS",
    "BLOCK_KEYS",
    "EnumMetadataKey",
    "JSON_ARRAY_KEYS",
    "JSON_OBJECT_KEYS",
    "JSON_VALUE_KEYS",
    "RESOURCE_KEYS",
    "SEMANTIC_PREFIX",
    "TEXT_FRAGMENT_KEYS",
]
