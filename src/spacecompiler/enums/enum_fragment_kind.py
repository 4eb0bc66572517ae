# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fragment kind enum for segmented content."""

from __future__ import annotations

from enum import Enum


class EnumFragmentKind(str, Enum):
    """Kind of a segmented fragment.

    Attributes:
        PARAGRAPH: A normalized text paragraph (or a sentence-packed chunk
            of an over-long paragraph).
        JSON_VALUE: A long JSON string value emitted on its own.
        JSON_OBJECT: Summary of a JSON object (property previews).
        JSON_ARRAY: Summary of a JSON array (element previews).
    """

    PARAGRAPH = "paragraph"
    JSON_VALUE = "json_value"
    JSON_OBJECT = "json_object"
    JSON_ARRAY = "json_array"


__all__ = ["EnumFragmentKind"]
