# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Segmenter compute node: raw text or JSON to ordered fragments."""

from spacecompiler.nodes.node_segmenter_compute.handlers import (
    handle_segment,
    segment,
)
from spacecompiler.nodes.node_segmenter_compute.models import (
    ModelSegmentInput,
    ModelSegmentOutput,
)
from spacecompiler.nodes.node_segmenter_compute.node import NodeSegmenterCompute

__all__ = [
    "ModelSegmentInput",
    "ModelSegmentOutput",
    "NodeSegmenterCompute",
    "handle_segment",
    "segment",
]
