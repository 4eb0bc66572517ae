# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Metadata value type shared by all models.

Metadata values are restricted to JSON values (string, number, bool,
null, list, nested mapping) so every metadata map stays serializable
and inspectable. The keys each component writes are enumerated in
``spacecompiler.enums.EnumMetadataKey``.
"""

from __future__ import annotations

from typing import TypeAlias

from pydantic import JsonValue

MetadataValue: TypeAlias = JsonValue
MetadataMap: TypeAlias = dict[str, JsonValue]


__all__ = ["MetadataMap", "MetadataValue"]
