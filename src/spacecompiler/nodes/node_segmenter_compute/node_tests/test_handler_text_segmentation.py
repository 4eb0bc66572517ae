# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for plain-text segmentation.

Covers:
  - Short paragraphs merged through the paragraph buffer
  - Long paragraphs emitted one per fragment
  - Buffer flush before a long paragraph
  - Sentence splitting of over-long units
  - Whitespace normalization and fragment metadata
"""

from __future__ import annotations

import pytest

from spacecompiler.enums import EnumFragmentKind, EnumMetadataKey
from spacecompiler.enums.enum_metadata_key import TEXT_FRAGMENT_KEYS
from spacecompiler.nodes.node_segmenter_compute.handlers.handler_text_segmentation import (
    count_words,
    segment_text,
    split_long_paragraph,
    split_paragraphs,
)

pytestmark = pytest.mark.unit


def _segment(content: str, min_length: int = 50, max_length: int = 2000):
    return segment_text(content, min_length=min_length, max_length=max_length)


# ---------------------------------------------------------------------------
# Paragraph splitting
# ---------------------------------------------------------------------------


class TestSplitParagraphs:
    def test_blank_lines_separate_paragraphs(self) -> None:
        assert split_paragraphs("one\n\ntwo\n   \nthree") == ["one", "two", "three"]

    def test_whitespace_is_collapsed(self) -> None:
        assert split_paragraphs("  a   b\tc\nd  ") == ["a b c d"]

    def test_crlf_blank_lines(self) -> None:
        assert split_paragraphs("one\r\n\r\ntwo") == ["one", "two"]

    def test_empty_content(self) -> None:
        assert split_paragraphs("") == []
        assert split_paragraphs("\n\n  \n\n") == []


# ---------------------------------------------------------------------------
# Short-paragraph buffer
# ---------------------------------------------------------------------------


class TestShortParagraphMerging:
    def test_short_paragraphs_merge_into_one_fragment(self) -> None:
        fragments = _segment("Short one.\n\nShort two.\n\nShort three.")

        assert len(fragments) == 1
        assert fragments[0].content == "Short one.\n\nShort two.\n\nShort three."
        assert fragments[0].order == 0

    def test_buffer_emits_once_min_length_reached(self) -> None:
        first = "a" * 30
        second = "b" * 30
        third = "c" * 10

        fragments = _segment(f"{first}\n\n{second}\n\n{third}")

        assert [f.content for f in fragments] == [f"{first}\n\n{second}", third]

    def test_pending_buffer_flushed_before_long_paragraph(self) -> None:
        long_paragraph = "x" * 60

        fragments = _segment(f"tiny\n\n{long_paragraph}")

        assert [f.content for f in fragments] == ["tiny", long_paragraph]
        assert [f.order for f in fragments] == [0, 1]


class TestLongParagraphs:
    def test_three_long_paragraphs(self, long_paragraphs: list[str]) -> None:
        fragments = _segment("\n\n".join(long_paragraphs))

        assert [f.content for f in fragments] == long_paragraphs
        assert [f.order for f in fragments] == [0, 1, 2]
        assert all(f.kind is EnumFragmentKind.PARAGRAPH for f in fragments)
        assert all(f.parent_key is None for f in fragments)

    def test_over_long_paragraph_split_at_sentences(self) -> None:
        paragraph = "This is sentence one. This is sentence two. Third."

        fragments = _segment(paragraph, min_length=10, max_length=40)

        assert [f.content for f in fragments] == [
            "This is sentence one.",
            "This is sentence two. Third.",
        ]
        assert all(len(f.content) <= 40 for f in fragments)


# ---------------------------------------------------------------------------
# Sentence packing
# ---------------------------------------------------------------------------


class TestSplitLongParagraph:
    def test_oversized_sentence_stays_alone(self) -> None:
        giant = "A" * 60 + "."

        chunks = split_long_paragraph(f"Hi. {giant} Bye.", max_length=40)

        assert chunks == ["Hi.", giant, "Bye."]

    def test_separator_counts_toward_chunk_length(self) -> None:
        # "aaaa. bbbb." is 11 characters, one more than the limit.
        chunks = split_long_paragraph("aaaa. bbbb.", max_length=10)

        assert chunks == ["aaaa.", "bbbb."]

    def test_exact_fit_is_kept_together(self) -> None:
        chunks = split_long_paragraph("aaaa. bbbb.", max_length=11)

        assert chunks == ["aaaa. bbbb."]

    def test_question_and_exclamation_marks_end_sentences(self) -> None:
        chunks = split_long_paragraph("Why? Because! Yes.", max_length=5)

        assert chunks == ["Why?", "Because!", "Yes."]


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


class TestFragmentMetadata:
    def test_length_and_word_count(self) -> None:
        fragments = _segment("Short one.\n\nShort two.")

        metadata = fragments[0].metadata
        assert metadata[EnumMetadataKey.LENGTH] == len("Short one.\n\nShort two.")
        # Splitting on single spaces keeps "one.\n\nShort" together.
        assert metadata[EnumMetadataKey.WORD_COUNT] == 3

    def test_keys_are_the_text_fragment_keys(self, long_paragraphs: list[str]) -> None:
        for fragment in _segment("\n\n".join(long_paragraphs)):
            assert set(fragment.metadata) == TEXT_FRAGMENT_KEYS

    def test_count_words_ignores_empty_pieces(self) -> None:
        assert count_words("") == 0
        assert count_words("one two") == 2

    def test_empty_input_yields_no_fragments(self) -> None:
        assert _segment("") == []
