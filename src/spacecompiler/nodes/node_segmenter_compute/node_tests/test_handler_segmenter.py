# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for segmentation dispatch, JSON fallback and the node shell."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from spacecompiler.enums import EnumContentKind, EnumFragmentKind
from spacecompiler.nodes.node_segmenter_compute import (
    ModelSegmentInput,
    NodeSegmenterCompute,
    handle_segment,
    segment,
)

pytestmark = pytest.mark.unit


class TestDispatch:
    def test_json_kind_uses_json_strategy(self, sample_json: str) -> None:
        output = handle_segment(ModelSegmentInput(content=sample_json, kind="json"))

        assert output.kind is EnumContentKind.JSON
        assert not output.fell_back_to_text
        assert any(f.kind is EnumFragmentKind.JSON_OBJECT for f in output.fragments)

    @pytest.mark.parametrize("label", ["text", "txt", "TXT", "markdown", None])
    def test_other_labels_use_text_strategy(self, label: str | None) -> None:
        output = handle_segment(ModelSegmentInput(content="Hello.", kind=label))

        assert output.kind is EnumContentKind.TEXT
        assert [f.content for f in output.fragments] == ["Hello."]

    def test_label_is_case_insensitive(self, sample_json: str) -> None:
        output = handle_segment(ModelSegmentInput(content=sample_json, kind=" JSON "))

        assert output.kind is EnumContentKind.JSON


class TestJsonFallback:
    def test_malformed_json_is_segmented_as_text(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("WARNING"):
            output = handle_segment(ModelSegmentInput(content="{not json", kind="json"))

        assert output.fell_back_to_text
        assert output.kind is EnumContentKind.TEXT
        assert [f.content for f in output.fragments] == ["{not json"]
        assert "falling back to text" in caplog.text

    @pytest.mark.parametrize(
        "content",
        ["[" * 3000 + "]" * 3000, "[" * 3000],
        ids=["closed", "unclosed"],
    )
    def test_nesting_beyond_decoder_depth_falls_back(self, content: str) -> None:
        output = handle_segment(ModelSegmentInput(content=content, kind="json"))

        assert output.fell_back_to_text
        assert output.kind is EnumContentKind.TEXT
        assert [f.content for f in output.fragments] == [content]
        assert segment(content, "json") == list(output.fragments)

    def test_empty_json_content_falls_back(self) -> None:
        output = handle_segment(ModelSegmentInput(content="", kind="json"))

        assert output.fell_back_to_text
        assert output.fragments == ()


class TestInputValidation:
    def test_non_positive_lengths_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelSegmentInput(content="x", min_length=0)
        with pytest.raises(ValidationError):
            ModelSegmentInput(content="x", max_length=-1)

    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(ValidationError):
            segment("x", min_length=100, max_length=10)


class TestSegmentFunction:
    def test_returns_list_of_fragments(self) -> None:
        fragments = segment("Short one.\n\nShort two.\n\nShort three.")

        assert isinstance(fragments, list)
        assert len(fragments) == 1

    def test_is_deterministic(self, sample_json: str) -> None:
        assert segment(sample_json, "json") == segment(sample_json, "json")


@pytest.mark.asyncio
async def test_node_compute_delegates_to_handler(sample_json: str) -> None:
    node = NodeSegmenterCompute()
    input_data = ModelSegmentInput(content=sample_json, kind=EnumContentKind.JSON)

    output = await node.compute(input_data)

    assert output == handle_segment(input_data)
