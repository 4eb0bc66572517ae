# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for node_segmenter_compute."""

from __future__ import annotations

from spacecompiler.nodes.node_segmenter_compute.models.model_segment_input import (
    ModelSegmentInput,
)
from spacecompiler.nodes.node_segmenter_compute.models.model_segment_output import (
    ModelSegmentOutput,
)

__all__ = ["ModelSegmentInput", "ModelSegmentOutput"]
