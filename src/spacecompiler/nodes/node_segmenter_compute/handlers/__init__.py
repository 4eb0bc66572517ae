# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_segmenter_compute."""

from __future__ import annotations

from spacecompiler.nodes.node_segmenter_compute.handlers.handler_json_segmentation import (
    segment_json,
)
from spacecompiler.nodes.node_segmenter_compute.handlers.handler_segmenter import (
    handle_segment,
    segment,
)
from spacecompiler.nodes.node_segmenter_compute.handlers.handler_text_segmentation import (
    segment_text,
)

__all__ = ["handle_segment", "segment", "segment_json", "segment_text"]
