# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handler for SemanticAnalyzerCompute: bottom-up tree enrichment.

Every fragment, every block and the resource itself receive the
``semantic_``-prefixed features of their own text. The resource text is
the block contents joined by single spaces. The input resource is not
modified; an enriched copy is returned.
"""

from __future__ import annotations

import logging

from spacecompiler.models.model_block import ModelBlock
from spacecompiler.models.model_fragment import ModelFragment
from spacecompiler.models.model_metadata import MetadataMap
from spacecompiler.models.model_parsed_resource import ModelParsedResource
from spacecompiler.nodes.node_semantic_analyzer_compute.handlers.handler_text_analysis import (
    compute_text_analysis,
)
from spacecompiler.nodes.node_semantic_analyzer_compute.models.model_semantic_analysis_input import (
    ModelSemanticAnalysisInput,
)
from spacecompiler.nodes.node_semantic_analyzer_compute.models.model_semantic_analysis_output import (
    ModelSemanticAnalysisOutput,
)

logger = logging.getLogger(__name__)

RESOURCE_TEXT_JOINER = " "


def _enriched(metadata: MetadataMap, text: str) -> MetadataMap:
    return {**metadata, **compute_text_analysis(text).to_semantic_metadata()}


def _analyze_fragment(fragment: ModelFragment) -> ModelFragment:
    return fragment.model_copy(
        update={"metadata": _enriched(fragment.metadata, fragment.content)}
    )


def _analyze_block(block: ModelBlock) -> ModelBlock:
    return block.model_copy(
        update={
            "fragments": tuple(_analyze_fragment(f) for f in block.fragments),
            "metadata": _enriched(block.metadata, block.content),
        }
    )


def handle_semantic_analysis(
    input_data: ModelSemanticAnalysisInput,
) -> ModelSemanticAnalysisOutput:
    """Attach semantic metadata at every level of a resource tree."""
    resource = input_data.resource
    logger.info("Analyzing semantic patterns for resource %s", resource.resource_id)

    blocks = tuple(_analyze_block(block) for block in resource.blocks)
    resource_text = RESOURCE_TEXT_JOINER.join(block.content for block in resource.blocks)
    enriched = resource.model_copy(
        update={
            "blocks": blocks,
            "metadata": _enriched(resource.metadata, resource_text),
        }
    )

    logger.debug(
        "Analyzed %d blocks for resource %s", len(blocks), resource.resource_id
    )
    return ModelSemanticAnalysisOutput(resource=enriched)


def analyze(parsed_resource: ModelParsedResource) -> ModelParsedResource:
    """Return an enriched copy of ``parsed_resource``."""
    output = handle_semantic_analysis(
        ModelSemanticAnalysisInput(resource=parsed_resource)
    )
    return output.resource


__all__ = ["analyze", "handle_semantic_analysis"]
