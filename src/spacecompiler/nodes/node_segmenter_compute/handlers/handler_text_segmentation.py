# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Plain-text segmentation into paragraph fragments.

Algorithm:
  1. Split raw text at blank lines.
  2. Collapse whitespace runs inside each paragraph to one space, trim,
     and drop empty paragraphs.
  3. Feed paragraphs through a short-paragraph buffer:
       - short paragraphs (< min_length) accumulate, joined by a blank
         line, until the joined text reaches min_length
       - a long paragraph first flushes any pending buffer unsplit
       - whatever is left in the buffer at end of input is flushed
  4. Any unit longer than max_length is split at sentence ends and the
     sentences are packed greedily into chunks of at most max_length
     characters (single-space joins included). A sentence that is longer
     than max_length on its own becomes its own chunk. Because the joins
     count, a chunk can hold one sentence fewer than packing by sentence
     lengths alone would allow.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from spacecompiler.enums.enum_fragment_kind import EnumFragmentKind
from spacecompiler.enums.enum_metadata_key import EnumMetadataKey
from spacecompiler.models.model_fragment import ModelFragment

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n|\r\n\s*\r\n")
_WHITESPACE_RUN = re.compile(r"\s+")
_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")

PARAGRAPH_JOINER = "\n\n"
SENTENCE_JOINER = " "


# ---------------------------------------------------------------------------
# Short-paragraph buffer
# ---------------------------------------------------------------------------


class _BufferState(str, Enum):
    IDLE = "idle"
    BUFFERING = "buffering"


@dataclass
class _ParagraphBuffer:
    """Two-state accumulator for paragraphs shorter than ``min_length``.

    ``push`` returns the joined text once it reaches ``min_length`` and
    goes back to IDLE. ``flush`` drains whatever is pending.
    """

    min_length: int
    parts: list[str] = field(default_factory=list)

    @property
    def state(self) -> _BufferState:
        return _BufferState.BUFFERING if self.parts else _BufferState.IDLE

    def push(self, paragraph: str) -> str | None:
        self.parts.append(paragraph)
        joined = PARAGRAPH_JOINER.join(self.parts)
        if len(joined) < self.min_length:
            return None
        self.parts.clear()
        return joined

    def flush(self) -> str | None:
        if self.state is _BufferState.IDLE:
            return None
        joined = PARAGRAPH_JOINER.join(self.parts)
        logger.debug("Flushing %d buffered short paragraphs", len(self.parts))
        self.parts.clear()
        return joined


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def normalize_paragraph(text: str) -> str:
    """Collapse whitespace runs to one space and trim."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def split_paragraphs(content: str) -> list[str]:
    """Split at blank lines and return the non-empty normalized paragraphs."""
    normalized = (normalize_paragraph(p) for p in _PARAGRAPH_BREAK.split(content))
    return [p for p in normalized if p]


def split_long_paragraph(paragraph: str, max_length: int) -> list[str]:
    """Split text at sentence ends and pack sentences into chunks.

    Each chunk is a run of sentences joined by a single space whose total
    length does not exceed ``max_length``, unless it holds a single
    sentence that is longer than ``max_length`` by itself.
    """
    sentences = [s for s in _SENTENCE_END.split(paragraph) if s.strip()]

    chunks: list[str] = []
    current: list[str] = []
    current_length = 0

    for sentence in sentences:
        added = len(sentence) + (len(SENTENCE_JOINER) if current else 0)
        if current and current_length + added > max_length:
            chunks.append(SENTENCE_JOINER.join(current))
            current = []
            current_length = 0
            added = len(sentence)
        current.append(sentence)
        current_length += added

    if current:
        chunks.append(SENTENCE_JOINER.join(current))

    return chunks


def count_words(text: str) -> int:
    """Number of non-empty pieces when splitting on a single space."""
    return sum(1 for piece in text.split(" ") if piece)


def make_paragraph_fragment(content: str, order: int) -> ModelFragment:
    return ModelFragment(
        content=content,
        kind=EnumFragmentKind.PARAGRAPH,
        order=order,
        metadata={
            EnumMetadataKey.LENGTH: len(content),
            EnumMetadataKey.WORD_COUNT: count_words(content),
        },
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def segment_text(
    content: str,
    *,
    min_length: int,
    max_length: int,
) -> list[ModelFragment]:
    """Segment plain text into ordered paragraph fragments."""
    units: list[str] = []
    buffer = _ParagraphBuffer(min_length=min_length)

    def emit(unit: str) -> None:
        if len(unit) > max_length:
            units.extend(split_long_paragraph(unit, max_length))
        else:
            units.append(unit)

    for paragraph in split_paragraphs(content):
        if len(paragraph) < min_length:
            logger.debug("Buffering short paragraph (%d chars)", len(paragraph))
            ready = buffer.push(paragraph)
            if ready is not None:
                emit(ready)
            continue

        pending = buffer.flush()
        if pending is not None:
            units.append(pending)
        emit(paragraph)

    pending = buffer.flush()
    if pending is not None:
        units.append(pending)

    fragments = [make_paragraph_fragment(unit, order) for order, unit in enumerate(units)]
    logger.info("Segmented text into %d fragments", len(fragments))
    return fragments


__all__ = [
    "count_words",
    "normalize_paragraph",
    "segment_text",
    "split_long_paragraph",
    "split_paragraphs",
]
