# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handler for LinkGraphParserCompute: link notation to a project graph.

Grammar (one entry per line, blank lines and ``#`` comments ignored)::

    Dogs: Files/dogs.doc      file mapping
    Animals: (Dogs Cats)      link list, children split on whitespace
    Pets: Animals             bare link (no separator, no extension)

Parsing runs in two passes. The line pass creates nodes, records file
mappings and defers link declarations. The resolve pass attaches
children, synthesizing placeholder nodes for names that were never
declared. Names compare case-insensitively.

Malformed lines are skipped with a warning that is both logged and
recorded in the graph metadata.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime

from spacecompiler.enums.enum_metadata_key import EnumMetadataKey
from spacecompiler.models.model_project_graph import ModelProjectGraph
from spacecompiler.nodes.node_link_graph_parser_compute.models.model_link_declaration import (
    ModelLinkDeclaration,
)
from spacecompiler.nodes.node_link_graph_parser_compute.models.model_link_graph_parse_input import (
    ModelLinkGraphParseInput,
)
from spacecompiler.nodes.node_link_graph_parser_compute.models.model_link_graph_parse_output import (
    ModelLinkGraphParseOutput,
)
from spacecompiler.nodes.node_link_graph_parser_compute.models.model_link_graph_state import (
    ModelLinkGraphState,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

COMMENT_PREFIX = "#"
NAME_SEPARATOR = ":"
LINK_LIST_OPEN = "("
LINK_LIST_CLOSE = ")"

_LINE_BREAK = re.compile(r"\r\n|[\r\n]")
_TOKEN = re.compile(r"[^\s]+")


# ---------------------------------------------------------------------------
# Value classification
# ---------------------------------------------------------------------------


def has_extension(value: str) -> bool:
    """True when the last path component has a dot that is not its last character.

    A leading dot counts, so dotfiles such as ``.env`` are file mappings.
    """
    name = re.split(r"[/\\]", value)[-1]
    dot = name.rfind(".")
    return dot != -1 and dot < len(name) - 1


def is_link_list(value: str) -> bool:
    return value.startswith(LINK_LIST_OPEN) and value.endswith(LINK_LIST_CLOSE)


def is_bare_link(value: str) -> bool:
    return "/" not in value and "\\" not in value and not has_extension(value)


def parse_link_list(value: str) -> tuple[str, ...]:
    """Children of a ``( ... )`` value."""
    return tuple(_TOKEN.findall(value[1:-1]))


# ---------------------------------------------------------------------------
# Pass 1: lines
# ---------------------------------------------------------------------------


def _warn(state: ModelLinkGraphState, message: str) -> None:
    logger.warning("%s", message)
    state.warnings.append(message)


def _read_line(state: ModelLinkGraphState, line: str, line_number: int) -> None:
    name, separator, value = line.partition(NAME_SEPARATOR)
    if not separator:
        _warn(state, f"Line {line_number}: no colon, skipped: {line!r}")
        return

    name = name.strip()
    value = value.strip()
    if not name:
        _warn(state, f"Line {line_number}: empty node name, skipped: {line!r}")
        return

    node = state.ensure(name)

    if not value:
        logger.debug("Line %d: node %s declared without a value", line_number, name)
        return

    if is_link_list(value):
        children = parse_link_list(value)
        logger.debug("Line %d: link %s -> (%s)", line_number, name, ", ".join(children))
    elif is_bare_link(value):
        children = (value,)
        logger.debug("Line %d: node reference %s -> %s", line_number, name, value)
    else:
        node.file_path = value
        logger.debug("Line %d: file mapping %s -> %s", line_number, name, value)
        return

    state.declarations.append(
        ModelLinkDeclaration(
            parent_name=name,
            child_names=children,
            line_number=line_number,
        )
    )


# ---------------------------------------------------------------------------
# Pass 2: declarations
# ---------------------------------------------------------------------------


def _resolve(state: ModelLinkGraphState) -> None:
    for declaration in state.declarations:
        parent = state.find(declaration.parent_name)
        if parent is None:
            _warn(
                state,
                f"Line {declaration.line_number}: parent node "
                f"{declaration.parent_name!r} not found",
            )
            continue

        for child_name in declaration.child_names:
            child = state.find(child_name)
            if child is None:
                child = state.ensure(child_name, placeholder=True)
                logger.debug("Created placeholder node %s", child_name)
            parent.add_child(child.key)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def handle_link_graph_parse(
    input_data: ModelLinkGraphParseInput,
) -> ModelLinkGraphParseOutput:
    """Parse link notation into a resolved project graph."""
    parsed_at = input_data.parsed_at or datetime.now(UTC)
    state = ModelLinkGraphState()

    for line_number, raw_line in enumerate(_LINE_BREAK.split(input_data.content), start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        _read_line(state, line, line_number)

    _resolve(state)
    graph = state.freeze({EnumMetadataKey.PARSED_AT: parsed_at.isoformat()})

    logger.info(
        "Parsed project graph with %d nodes and %d roots",
        len(graph.nodes),
        len(graph.root_keys),
    )
    return ModelLinkGraphParseOutput(graph=graph)


def parse_links(content: str) -> ModelProjectGraph:
    """Parse link notation and return the project graph."""
    return handle_link_graph_parse(ModelLinkGraphParseInput(content=content)).graph


__all__ = [
    "handle_link_graph_parse",
    "has_extension",
    "is_bare_link",
    "parse_link_list",
    "parse_links",
]
