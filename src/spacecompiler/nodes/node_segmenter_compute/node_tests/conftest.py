# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared fixtures for segmenter node tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def long_paragraphs() -> list[str]:
    """Three paragraphs that are each at least 50 characters long."""
    return [
        "The first paragraph is long enough to stand on its own as a fragment.",
        "The second paragraph is also long enough to become a separate fragment.",
        "The third paragraph closes the document and is long enough as well.",
    ]


@pytest.fixture
def sample_json() -> str:
    return '{"name":"Test","value":123,"items":[1,2,3]}'
