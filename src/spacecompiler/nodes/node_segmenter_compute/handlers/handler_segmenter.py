# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handler for SegmenterCompute: strategy dispatch and JSON fallback.

JSON content that fails to parse is segmented as plain text. The
fallback is logged as a warning and reported on the output model; it is
never raised.
"""

from __future__ import annotations

import json
import logging

from spacecompiler.config.model_compiler_limits import (
    DEFAULT_MAX_PARAGRAPH_LENGTH,
    DEFAULT_MIN_PARAGRAPH_LENGTH,
)
from spacecompiler.enums.enum_content_kind import EnumContentKind
from spacecompiler.models.model_fragment import ModelFragment
from spacecompiler.nodes.node_segmenter_compute.handlers.handler_json_segmentation import (
    segment_json,
)
from spacecompiler.nodes.node_segmenter_compute.handlers.handler_text_segmentation import (
    segment_text,
)
from spacecompiler.nodes.node_segmenter_compute.models.model_segment_input import (
    ModelSegmentInput,
)
from spacecompiler.nodes.node_segmenter_compute.models.model_segment_output import (
    ModelSegmentOutput,
)

logger = logging.getLogger(__name__)


def handle_segment(input_data: ModelSegmentInput) -> ModelSegmentOutput:
    """Segment raw content into ordered fragments."""
    logger.info(
        "Segmenting %s content (%d chars)",
        input_data.kind.value,
        len(input_data.content),
    )

    if input_data.kind is EnumContentKind.JSON:
        try:
            fragments = segment_json(input_data.content)
        except json.JSONDecodeError as exc:
            logger.warning(
                "Malformed JSON content, falling back to text segmentation: %s",
                exc.msg,
                extra={"line": exc.lineno, "column": exc.colno},
            )
        else:
            return ModelSegmentOutput(
                fragments=tuple(fragments),
                kind=EnumContentKind.JSON,
            )

        return ModelSegmentOutput(
            fragments=tuple(_segment_as_text(input_data)),
            kind=EnumContentKind.TEXT,
            fell_back_to_text=True,
        )

    return ModelSegmentOutput(
        fragments=tuple(_segment_as_text(input_data)),
        kind=EnumContentKind.TEXT,
    )


def _segment_as_text(input_data: ModelSegmentInput) -> list[ModelFragment]:
    return segment_text(
        input_data.content,
        min_length=input_data.min_length,
        max_length=input_data.max_length,
    )


def segment(
    content: str,
    kind: str | EnumContentKind = EnumContentKind.TEXT,
    min_length: int = DEFAULT_MIN_PARAGRAPH_LENGTH,
    max_length: int = DEFAULT_MAX_PARAGRAPH_LENGTH,
) -> list[ModelFragment]:
    """Segment content and return the fragments as a list.

    Raises:
        pydantic.ValidationError: If the length bounds are invalid.
    """
    output = handle_segment(
        ModelSegmentInput(
            content=content,
            kind=kind,
            min_length=min_length,
            max_length=max_length,
        )
    )
    return list(output.fragments)


__all__ = ["handle_segment", "segment"]
