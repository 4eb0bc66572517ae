# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""SpaceCompiler - documents to annotated fragment/block trees.

Raw text, JSON or a small multi-file project is segmented into
fragments, packed into size-bounded blocks, annotated with heuristic
semantic metadata and, for projects, wired into a link graph.

Quick Start:
    >>> from spacecompiler import compile_file
    >>> result = compile_file("Short one.\\n\\nShort two.", "notes.txt")
    >>> len(result.resources[0].blocks)
    1
    >>> from spacecompiler import parse_links
    >>> graph = parse_links("Animals: (Dogs Cats)")
    >>> [node.name for node in graph.roots]
    ['Animals']
"""

from spacecompiler.config import CompilerSettings, ModelCompilerLimits, configure_logging
from spacecompiler.models import (
    ModelBlock,
    ModelFragment,
    ModelGraphNode,
    ModelParsedResource,
    ModelProjectGraph,
)
from spacecompiler.nodes.node_compilation_orchestrator import (
    CompilationError,
    CompilationValidationError,
    ModelCompilationResult,
    NodeCompilationOrchestrator,
    ProjectDescriptionNotFoundError,
    compile_file,
    compile_files,
    compile_project,
)
from spacecompiler.nodes.node_link_graph_parser_compute import (
    NodeLinkGraphParserCompute,
    parse_links,
)
from spacecompiler.nodes.node_segmenter_compute import NodeSegmenterCompute, segment
from spacecompiler.nodes.node_semantic_analyzer_compute import (
    NodeSemanticAnalyzerCompute,
    analyze,
    analyze_text,
)
from spacecompiler.nodes.node_tree_builder_compute import NodeTreeBuilderCompute, build

__version__ = "0.1.0"

__all__ = [
    # Main API
    "analyze",
    "analyze_text",
    "build",
    "compile_file",
    "compile_files",
    "compile_project",
    "parse_links",
    "segment",
    # Nodes
    "NodeCompilationOrchestrator",
    "NodeLinkGraphParserCompute",
    "NodeSegmenterCompute",
    "NodeSemanticAnalyzerCompute",
    "NodeTreeBuilderCompute",
    # Types
    "ModelBlock",
    "ModelCompilationResult",
    "ModelFragment",
    "ModelGraphNode",
    "ModelParsedResource",
    "ModelProjectGraph",
    # Configuration
    "CompilerSettings",
    "ModelCompilerLimits",
    "configure_logging",
    # Exceptions
    "CompilationError",
    "CompilationValidationError",
    "ProjectDescriptionNotFoundError",
]
