# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for bottom-up resource enrichment and the node shell."""

from __future__ import annotations

import pytest

from spacecompiler.enums import ANALYSIS_KEYS, EnumMetadataKey
from spacecompiler.models import ModelParsedResource
from spacecompiler.nodes.node_segmenter_compute import segment
from spacecompiler.nodes.node_semantic_analyzer_compute import (
    ModelSemanticAnalysisInput,
    NodeSemanticAnalyzerCompute,
    analyze,
    analyze_text,
    handle_semantic_analysis,
)
from spacecompiler.nodes.node_tree_builder_compute import build

pytestmark = pytest.mark.unit

SEMANTIC_KEYS = {key.semantic() for key in ANALYSIS_KEYS}


@pytest.fixture
def resource() -> ModelParsedResource:
    text = "\n\n".join(
        [
            "The company announced a new product for every customer in the market.",
            "Research into the theory continues, according to the study authors.",
            "Is the system api stable? The code says yes, and the data agrees.",
        ]
    )
    return build(segment(text), "report.txt", max_block_size=140)


class TestEnrichment:
    def test_every_level_gets_semantic_keys(self, resource: ModelParsedResource) -> None:
        enriched = analyze(resource)

        assert SEMANTIC_KEYS <= enriched.metadata.keys()
        for block in enriched.blocks:
            assert SEMANTIC_KEYS <= block.metadata.keys()
            for fragment in block.fragments:
                assert SEMANTIC_KEYS <= fragment.metadata.keys()

    def test_existing_metadata_is_kept(self, resource: ModelParsedResource) -> None:
        enriched = analyze(resource)

        assert enriched.metadata[EnumMetadataKey.TOTAL_BLOCKS] == len(resource.blocks)
        fragment = enriched.blocks[0].fragments[0]
        assert fragment.metadata[EnumMetadataKey.LENGTH] == len(fragment.content)

    def test_values_match_text_analysis(self, resource: ModelParsedResource) -> None:
        enriched = analyze(resource)

        block = enriched.blocks[0]
        fragment = block.fragments[0]
        resource_text = " ".join(b.content for b in resource.blocks)
        for key, value in analyze_text(fragment.content).items():
            assert fragment.metadata[f"semantic_{key}"] == value
        for key, value in analyze_text(block.content).items():
            assert block.metadata[f"semantic_{key}"] == value
        for key, value in analyze_text(resource_text).items():
            assert enriched.metadata[f"semantic_{key}"] == value

    def test_input_is_not_modified(self, resource: ModelParsedResource) -> None:
        before = resource.model_dump()

        analyze(resource)

        assert resource.model_dump() == before
        assert not SEMANTIC_KEYS & resource.metadata.keys()

    def test_structure_is_unchanged(self, resource: ModelParsedResource) -> None:
        enriched = analyze(resource)

        assert [b.content for b in enriched.blocks] == [b.content for b in resource.blocks]
        assert [f.content for f in enriched.iter_fragments()] == [
            f.content for f in resource.iter_fragments()
        ]

    def test_empty_resource(self) -> None:
        enriched = analyze(ModelParsedResource(resource_id="empty"))

        assert enriched.blocks == ()
        assert enriched.metadata["semantic_total_word_count"] == 0


@pytest.mark.asyncio
async def test_node_compute_delegates_to_handler(resource: ModelParsedResource) -> None:
    input_data = ModelSemanticAnalysisInput(resource=resource)

    output = await NodeSemanticAnalyzerCompute().compute(input_data)

    assert output == handle_semantic_analysis(input_data)
