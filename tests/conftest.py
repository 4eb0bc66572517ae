"""
Pytest configuration and fixtures for spacecompiler tests.

Shared sample documents used by the package-level unit and integration tests.
Node-specific fixtures live in each node's ``node_tests/conftest.py``.
"""

import pytest

from spacecompiler.config import ModelCompilerLimits

# =========================================================================
# Basic Sample Data Fixtures
# =========================================================================


@pytest.fixture
def sample_text() -> str:
    """Plain text with one short and two long paragraphs."""
    return (
        "Intro.\n\n"
        "The compiler splits documents into paragraphs and packs them into "
        "blocks that respect a size budget.\n\n"
        "Every resource is then annotated with keywords, a category and a "
        "readability score computed from simple heuristics."
    )


@pytest.fixture
def sample_json() -> str:
    """Small JSON document with a nested object and an array."""
    return (
        '{"title": "Configuration reference for the compiler", '
        '"limits": {"min": 50, "max": 2000}, '
        '"tags": ["text", "json"]}'
    )


@pytest.fixture
def sample_project() -> dict[str, str]:
    """A project description plus the files it maps to."""
    return {
        "library.spaceproj": (
            "# Library layout\n"
            "Library: (Fiction Reference)\n"
            "Fiction: books/fiction.txt\n"
            "Reference: data/reference.json\n"
            "Archive: Library\n"
        ),
        "books/fiction.txt": (
            "Stories about travellers and distant places fill this shelf.\n\n"
            "Each story is short enough to read in one evening."
        ),
        "data/reference.json": '{"entries": ["atlas", "dictionary"], "count": 2}',
    }


@pytest.fixture
def small_limits() -> ModelCompilerLimits:
    """Limits small enough to force merging, splitting and block packing."""
    return ModelCompilerLimits(
        min_paragraph_length=20,
        max_paragraph_length=80,
        max_block_size=120,
    )
