# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handler for TreeBuilderCompute: greedy packing of fragments into blocks.

A block is closed when adding the next fragment would push its size
past ``max_block_size``. Size counts fragment content only, not the
blank-line separators in ``block.content``. A fragment larger than the
budget by itself gets a block of its own.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

from spacecompiler.config.model_compiler_limits import DEFAULT_MAX_BLOCK_SIZE
from spacecompiler.enums.enum_metadata_key import EnumMetadataKey
from spacecompiler.models.model_block import BLOCK_SEPARATOR, ModelBlock
from spacecompiler.models.model_fragment import ModelFragment
from spacecompiler.models.model_parsed_resource import ModelParsedResource
from spacecompiler.nodes.node_tree_builder_compute.models.model_tree_build_input import (
    ModelTreeBuildInput,
)
from spacecompiler.nodes.node_tree_builder_compute.models.model_tree_build_output import (
    ModelTreeBuildOutput,
)

logger = logging.getLogger(__name__)


def _make_block(order: int, fragments: Sequence[ModelFragment], size: int) -> ModelBlock:
    return ModelBlock(
        order=order,
        content=BLOCK_SEPARATOR.join(f.content for f in fragments),
        fragments=tuple(fragments),
        metadata={
            EnumMetadataKey.FRAGMENT_COUNT: len(fragments),
            EnumMetadataKey.SIZE: size,
        },
    )


def pack_blocks(
    fragments: Iterable[ModelFragment], max_block_size: int
) -> list[ModelBlock]:
    """Group consecutive fragments into size-bounded blocks."""
    blocks: list[ModelBlock] = []
    current: list[ModelFragment] = []
    current_size = 0

    for fragment in fragments:
        fragment_size = len(fragment.content)
        if current and current_size + fragment_size > max_block_size:
            blocks.append(_make_block(len(blocks), current, current_size))
            current = []
            current_size = 0
        current.append(fragment)
        current_size += fragment_size

    if current:
        blocks.append(_make_block(len(blocks), current, current_size))

    return blocks


def handle_tree_build(input_data: ModelTreeBuildInput) -> ModelTreeBuildOutput:
    """Build a parsed resource from ordered fragments."""
    logger.info(
        "Building tree for resource %s from %d fragments",
        input_data.resource_id,
        len(input_data.fragments),
    )
    parsed_at = input_data.parsed_at or datetime.now(UTC)
    blocks = pack_blocks(input_data.fragments, input_data.max_block_size)

    resource = ModelParsedResource(
        resource_id=input_data.resource_id,
        resource_type=input_data.resource_type,
        metadata={
            EnumMetadataKey.PARSED_AT: parsed_at.isoformat(),
            EnumMetadataKey.TOTAL_FRAGMENTS: len(input_data.fragments),
            EnumMetadataKey.TOTAL_BLOCKS: len(blocks),
        },
        blocks=tuple(blocks),
    )
    logger.info(
        "Built %d blocks for resource %s",
        len(blocks),
        input_data.resource_id,
    )
    return ModelTreeBuildOutput(resource=resource)


def build(
    fragments: Iterable[ModelFragment],
    resource_id: str,
    resource_type: str = "text",
    max_block_size: int = DEFAULT_MAX_BLOCK_SIZE,
) -> ModelParsedResource:
    """Pack fragments into blocks and return the parsed resource.

    Raises:
        pydantic.ValidationError: If ``max_block_size`` is not positive.
    """
    output = handle_tree_build(
        ModelTreeBuildInput(
            fragments=tuple(fragments),
            resource_id=resource_id,
            resource_type=resource_type,
            max_block_size=max_block_size,
        )
    )
    return output.resource


__all__ = ["build", "handle_tree_build", "pack_blocks"]
