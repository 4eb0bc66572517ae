# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations shared by the spacecompiler nodes."""

from spacecompiler.enums.enum_content_category import EnumContentCategory
from spacecompiler.enums.enum_content_kind import EnumContentKind
from spacecompiler.enums.enum_fragment_kind import EnumFragmentKind
from spacecompiler.enums.enum_log_level import EnumLogLevel
from spacecompiler.enums.enum_metadata_key import (
    ANALYSIS_KEYS,
    SEMANTIC_PREFIX,
    EnumMetadataKey,
)
from spacecompiler.enums.enum_readability_level import EnumReadabilityLevel

__all__ = [
    "ANALYSIS_KEYS",
    "EnumContentCategory",
    "EnumContentKind",
    "EnumFragmentKind",
    "EnumLogLevel",
    "EnumMetadataKey",
    "EnumReadabilityLevel",
    "SEMANTIC_PREFIX",
]
