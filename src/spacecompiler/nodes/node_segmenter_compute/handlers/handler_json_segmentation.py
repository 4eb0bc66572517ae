# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""JSON segmentation into hierarchical summary fragments.

The document is walked depth-first from the path ``root``. Containers
are summarized after their children, so a container's fragment always
follows the fragments of its descendants. Strings longer than 20
characters are emitted verbatim. Other scalars only appear inside their
container's summary.

Objects are decoded as tuples of ``(name, value)`` pairs so that
repeated property names and document order are kept, and numbers keep
their source text.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from spacecompiler.enums.enum_fragment_kind import EnumFragmentKind
from spacecompiler.enums.enum_metadata_key import EnumMetadataKey
from spacecompiler.models.model_fragment import ModelFragment
from spacecompiler.models.model_metadata import MetadataMap

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ROOT_PATH = "root"
MAX_DEPTH = 10
LONG_STRING_THRESHOLD = 20
PREVIEW_MAX_LENGTH = 50
OBJECT_PREVIEW_COUNT = 5
ARRAY_PREVIEW_COUNT = 3


class _NumberLiteral(str):
    """A JSON number, kept as written in the source."""


JsonObjectPairs = tuple[tuple[str, Any], ...]


def load_json(content: str) -> Any:
    """Decode JSON, keeping property order, duplicates and number text.

    Raises:
        json.JSONDecodeError: If the content is not valid JSON. The
            non-standard constants NaN and Infinity are rejected too, and
            so is nesting too deep for the decoder.
    """

    def reject_constant(name: str) -> Any:
        raise json.JSONDecodeError(f"Invalid JSON constant {name}", content, 0)

    try:
        return json.loads(
            content,
            object_pairs_hook=tuple,
            parse_int=_NumberLiteral,
            parse_float=_NumberLiteral,
            parse_constant=reject_constant,
        )
    except RecursionError:
        raise json.JSONDecodeError(
            "Maximum nesting depth exceeded", content, 0
        ) from None


# ---------------------------------------------------------------------------
# Value previews
# ---------------------------------------------------------------------------


def value_text(value: Any) -> str:
    """Render a decoded JSON value as preview text (before truncation)."""
    if isinstance(value, _NumberLiteral):
        return str(value)
    if isinstance(value, str):
        return value
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, tuple):
        return "{...}"
    return f"[{len(value)} items]"


def value_preview(value: Any) -> str:
    text = value_text(value)
    if len(text) > PREVIEW_MAX_LENGTH:
        return text[:PREVIEW_MAX_LENGTH] + "..."
    return text


def _is_long_string(value: Any) -> bool:
    return (
        isinstance(value, str)
        and not isinstance(value, _NumberLiteral)
        and len(value) > LONG_STRING_THRESHOLD
    )


def _should_descend(value: Any) -> bool:
    return isinstance(value, (tuple, list)) or _is_long_string(value)


# ---------------------------------------------------------------------------
# Walk
# ---------------------------------------------------------------------------


@dataclass
class _JsonWalk:
    """Accumulates fragments; ``order`` is the emission index."""

    fragments: list[ModelFragment] = field(default_factory=list)

    def emit(
        self,
        content: str,
        kind: EnumFragmentKind,
        parent_key: str | None,
        metadata: MetadataMap,
    ) -> None:
        self.fragments.append(
            ModelFragment(
                content=content,
                kind=kind,
                order=len(self.fragments),
                parent_key=parent_key,
                metadata=metadata,
            )
        )

    def visit(self, value: Any, path: str, depth: int, parent_key: str | None) -> None:
        if depth > MAX_DEPTH:
            logger.debug("Max JSON depth reached at path %s", path)
            return

        if isinstance(value, tuple):
            self.visit_object(value, path, depth, parent_key)
        elif isinstance(value, list):
            self.visit_array(value, path, depth, parent_key)
        elif _is_long_string(value):
            self.emit(
                value,
                EnumFragmentKind.JSON_VALUE,
                parent_key,
                {
                    EnumMetadataKey.PATH: path,
                    EnumMetadataKey.VALUE_TYPE: "string",
                    EnumMetadataKey.LENGTH: len(value),
                },
            )

    def visit_object(
        self,
        pairs: JsonObjectPairs,
        path: str,
        depth: int,
        parent_key: str | None,
    ) -> None:
        previews: list[str] = []
        for name, child in pairs:
            previews.append(f"{name}: {value_preview(child)}")
            if _should_descend(child):
                self.visit(child, f"{path}.{name}", depth + 1, path)

        if not previews:
            return

        summary = f"Object with {len(previews)} properties: " + ", ".join(
            previews[:OBJECT_PREVIEW_COUNT]
        )
        if len(previews) > OBJECT_PREVIEW_COUNT:
            summary += f", ... ({len(previews) - OBJECT_PREVIEW_COUNT} more)"

        self.emit(
            summary,
            EnumFragmentKind.JSON_OBJECT,
            parent_key,
            {
                EnumMetadataKey.PATH: path,
                EnumMetadataKey.PROPERTY_COUNT: len(previews),
                EnumMetadataKey.DEPTH: depth,
            },
        )

    def visit_array(
        self,
        items: list[Any],
        path: str,
        depth: int,
        parent_key: str | None,
    ) -> None:
        previews: list[str] = []
        for index, item in enumerate(items):
            previews.append(value_preview(item))
            if _should_descend(item):
                self.visit(item, f"{path}[{index}]", depth + 1, path)

        summary = f"Array with {len(items)} items"
        if previews:
            summary += ": " + ", ".join(previews[:ARRAY_PREVIEW_COUNT])
            if len(previews) > ARRAY_PREVIEW_COUNT:
                summary += f", ... ({len(previews) - ARRAY_PREVIEW_COUNT} more)"

        self.emit(
            summary,
            EnumFragmentKind.JSON_ARRAY,
            parent_key,
            {
                EnumMetadataKey.PATH: path,
                EnumMetadataKey.ARRAY_LENGTH: len(items),
                EnumMetadataKey.DEPTH: depth,
            },
        )


def segment_json(content: str) -> list[ModelFragment]:
    """Segment a JSON document into ordered fragments.

    Raises:
        json.JSONDecodeError: If the content is not valid JSON.
    """
    document = load_json(content)
    walk = _JsonWalk()
    walk.visit(document, ROOT_PATH, 0, None)
    logger.info("Segmented JSON into %d fragments", len(walk.fragments))
    return walk.fragments


__all__ = [
    "MAX_DEPTH",
    "ROOT_PATH",
    "load_json",
    "segment_json",
    "value_preview",
]
