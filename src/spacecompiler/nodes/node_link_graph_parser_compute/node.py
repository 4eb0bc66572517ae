# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Node LinkGraphParserCompute: link notation to a rooted project graph.

Pure compute, zero I/O. Forward references are allowed; unknown children
become placeholder nodes instead of errors.
"""

from __future__ import annotations

from spacecompiler.nodes.node_link_graph_parser_compute.handlers.handler_link_graph import (
    handle_link_graph_parse,
)
from spacecompiler.nodes.node_link_graph_parser_compute.models.model_link_graph_parse_input import (
    ModelLinkGraphParseInput,
)
from spacecompiler.nodes.node_link_graph_parser_compute.models.model_link_graph_parse_output import (
    ModelLinkGraphParseOutput,
)


class NodeLinkGraphParserCompute:
    """Thin shell delegating to ``handle_link_graph_parse``.

    Example:
        ```python
        output = await NodeLinkGraphParserCompute().compute(
            ModelLinkGraphParseInput(content="Animals: (Dogs Cats)")
        )
        output.graph.children_of("animals")
        ```
    """

    async def compute(
        self, input_data: ModelLinkGraphParseInput
    ) -> ModelLinkGraphParseOutput:
        """Parse the project description by delegating to handler function."""
        return handle_link_graph_parse(input_data)


__all__ = ["NodeLinkGraphParserCompute"]
