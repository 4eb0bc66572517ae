# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""SpaceCompiler compute nodes.

Each node is a package with pure handlers, frozen models and a thin
async shell:

    node_segmenter_compute          raw content -> fragments
    node_tree_builder_compute       fragments -> blocks -> resource
    node_semantic_analyzer_compute  resource -> enriched resource
    node_link_graph_parser_compute  link notation -> project graph
    node_compilation_orchestrator   all of the above, per file or project
"""
