# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Content kind enum selecting the segmentation strategy."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath


class EnumContentKind(str, Enum):
    """Raw content kind accepted by the segmenter.

    Unknown labels resolve to TEXT, so callers may pass arbitrary
    content-type strings without failing.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_label(cls, label: str | EnumContentKind | None) -> EnumContentKind:
        """Resolve a free-form content-type label ("txt", "JSON", ...)."""
        if isinstance(label, EnumContentKind):
            return label
        if label is None:
            return cls.TEXT
        if label.strip().lower() == cls.JSON.value:
            return cls.JSON
        return cls.TEXT

    @classmethod
    def from_file_name(cls, file_name: str) -> EnumContentKind:
        """Detect the content kind from a file name extension."""
        suffix = PurePosixPath(file_name.replace("\\", "/")).suffix.lower()
        if suffix == ".json":
            return cls.JSON
        return cls.TEXT


__all__ = ["EnumContentKind"]
