# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared fixtures for compilation orchestrator tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def project_files() -> dict[str, str]:
    """An in-memory project: description, two text files and one JSON file."""
    return {
        "zoo.spaceproj": (
            "# Zoo project\n"
            "Собаки: Files/dogs.txt\n"
            "Кошки: .\\Files\\cats.txt\n"
            "Животные: catalog.json\n"
            "Животные: (Собаки Кошки Птицы)\n"
            "Рыбы: Files/fish.txt\n"
        ),
        "Files/dogs.txt": "Dogs are loyal companions that love long walks in the park.",
        "Files/cats.txt": "Cats are independent animals that enjoy sleeping in the sun.",
        "catalog.json": '{"animals": ["dog", "cat"], "count": 2}',
    }
