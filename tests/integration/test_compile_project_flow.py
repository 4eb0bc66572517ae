# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""End-to-end compilation flows through the public API.

Runs every node in sequence (link graph, segmentation, tree building,
semantic analysis) on in-memory projects and checks the assembled result.
"""

from __future__ import annotations

import pytest

from spacecompiler import (
    ModelCompilerLimits,
    NodeCompilationOrchestrator,
    compile_file,
    compile_files,
    compile_project,
)
from spacecompiler.enums import EnumFragmentKind, EnumMetadataKey
from spacecompiler.models import BLOCK_SEPARATOR
from spacecompiler.nodes.node_compilation_orchestrator import (
    EnumCompilationOperation,
    ModelCompilationRequest,
)

pytestmark = pytest.mark.integration


class TestProjectFlow:
    def test_graph_shape(self, sample_project: dict[str, str]) -> None:
        graph = compile_project(sample_project).graph

        assert graph is not None
        assert [node.name for node in graph.roots] == ["Archive"]
        assert [n.name for n in graph.children_of("archive")] == ["Library"]
        assert [n.name for n in graph.children_of("Library")] == [
            "Fiction",
            "Reference",
        ]
        assert graph.metadata[EnumMetadataKey.NODE_COUNT] == 4
        assert graph.metadata[EnumMetadataKey.PLACEHOLDER_COUNT] == 0

    def test_file_nodes_carry_analyzed_content(
        self, sample_project: dict[str, str]
    ) -> None:
        result = compile_project(sample_project)
        graph = result.graph
        assert graph is not None

        fiction = graph.get_node("fiction")
        reference = graph.get_node("REFERENCE")
        assert fiction.parsed_content.resource_type == "text"
        assert reference.parsed_content.resource_type == "json"
        assert fiction.parsed_content == result.get_resource("books/fiction.txt")

        for node in (fiction, reference):
            metadata = node.parsed_content.metadata
            assert EnumMetadataKey.TOP_KEYWORDS.semantic() in metadata
            assert EnumMetadataKey.READABILITY_LEVEL.semantic() in metadata

    def test_description_is_not_compiled(self, sample_project: dict[str, str]) -> None:
        result = compile_project(sample_project)

        assert [r.resource_id for r in result.resources] == [
            "books/fiction.txt",
            "data/reference.json",
        ]
        assert result.metadata[EnumMetadataKey.FILE_COUNT] == 2

    def test_json_resource_fragments(self, sample_project: dict[str, str]) -> None:
        resource = compile_project(sample_project).get_resource("data/reference.json")
        kinds = [f.kind for f in resource.iter_fragments()]

        assert kinds == [EnumFragmentKind.JSON_ARRAY, EnumFragmentKind.JSON_OBJECT]
        assert resource.iter_fragments()[-1].metadata[EnumMetadataKey.PATH] == "root"

    @pytest.mark.asyncio
    async def test_orchestrator_node(self, sample_project: dict[str, str]) -> None:
        node = NodeCompilationOrchestrator()
        request = ModelCompilationRequest(
            operation=EnumCompilationOperation.COMPILE_PROJECT,
            files=sample_project,
        )

        result = await node.compute(request)

        assert result.metadata[EnumMetadataKey.FILE_COUNT] == 2
        assert result.graph is not None
        assert result.graph.get_node("Archive") is not None


class TestFileFlow:
    def test_blocks_respect_limits(
        self, sample_text: str, small_limits: ModelCompilerLimits
    ) -> None:
        resource = compile_file(sample_text, "notes.txt", limits=small_limits).resources[0]

        for block in resource.blocks:
            assert block.content == BLOCK_SEPARATOR.join(
                f.content for f in block.fragments
            )
            fragment_total = sum(len(f.content) for f in block.fragments)
            assert (
                fragment_total <= small_limits.max_block_size
                or len(block.fragments) == 1
            )

    def test_fragment_order_is_global(
        self, sample_text: str, small_limits: ModelCompilerLimits
    ) -> None:
        resource = compile_file(sample_text, "notes.txt", limits=small_limits).resources[0]
        orders = [f.order for f in resource.iter_fragments()]
        assert orders == list(range(len(orders)))

    def test_every_level_is_analyzed(self, sample_json: str) -> None:
        resource = compile_file(sample_json, "config.json").resources[0]
        key = EnumMetadataKey.CONTENT_CATEGORY.semantic()

        assert key in resource.metadata
        for block in resource.blocks:
            assert key in block.metadata
            for fragment in block.fragments:
                assert key in fragment.metadata

    def test_mixed_file_kinds(self, sample_text: str, sample_json: str) -> None:
        result = compile_files({"a.txt": sample_text, "b.json": sample_json})

        assert [r.resource_type for r in result.resources] == ["text", "json"]
        assert result.metadata[EnumMetadataKey.TOTAL_BLOCKS] == sum(
            len(r.blocks) for r in result.resources
        )
