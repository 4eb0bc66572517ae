# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handler for NodeCompilationOrchestrator.

Composes the compute nodes into the three compilation entry points:

    compile_file     segment -> build -> analyze for one file
    compile_files    compile_file for every entry of a file mapping
    compile_project  parse a ``.spaceproj`` description, then compile the
                     file each graph node maps to

Everything happens in memory. Callers hand in file contents; nothing is
read from disk or extracted from archives here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from spacecompiler.config.model_compiler_limits import ModelCompilerLimits
from spacecompiler.enums.enum_content_kind import EnumContentKind
from spacecompiler.enums.enum_metadata_key import EnumMetadataKey
from spacecompiler.models.model_graph_node import ModelGraphNode
from spacecompiler.models.model_metadata import MetadataMap
from spacecompiler.models.model_parsed_resource import ModelParsedResource
from spacecompiler.models.model_project_graph import ModelProjectGraph
from spacecompiler.nodes.node_compilation_orchestrator.handlers.exceptions import (
    CompilationValidationError,
    ProjectDescriptionNotFoundError,
)
from spacecompiler.nodes.node_compilation_orchestrator.models.enum_compilation_operation import (
    EnumCompilationOperation,
)
from spacecompiler.nodes.node_compilation_orchestrator.models.model_compilation_request import (
    ModelCompilationRequest,
)
from spacecompiler.nodes.node_compilation_orchestrator.models.model_compilation_result import (
    ModelCompilationResult,
)
from spacecompiler.nodes.node_link_graph_parser_compute.handlers.handler_link_graph import (
    parse_links,
)
from spacecompiler.nodes.node_segmenter_compute.handlers.handler_segmenter import (
    segment,
)
from spacecompiler.nodes.node_semantic_analyzer_compute.handlers.handler_resource_analysis import (
    analyze,
)
from spacecompiler.nodes.node_tree_builder_compute.handlers.handler_tree_builder import (
    build,
)

logger = logging.getLogger(__name__)

PROJECT_FILE_SUFFIX = ".spaceproj"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _validate_file(content: str, file_name: str) -> None:
    if not file_name or not file_name.strip():
        raise CompilationValidationError("File name is required")
    if not content or not content.strip():
        raise CompilationValidationError(f"Content is required for file {file_name!r}")


def _compile_resource(
    content: str,
    file_name: str,
    content_type: str | EnumContentKind | None,
    limits: ModelCompilerLimits,
) -> ModelParsedResource:
    if content_type is None:
        kind = EnumContentKind.from_file_name(file_name)
    else:
        kind = EnumContentKind.from_label(content_type)

    fragments = segment(
        content,
        kind,
        min_length=limits.min_paragraph_length,
        max_length=limits.max_paragraph_length,
    )
    resource = build(
        fragments,
        file_name,
        resource_type=kind.value,
        max_block_size=limits.max_block_size,
    )
    return analyze(resource)


def _summary(resources: tuple[ModelParsedResource, ...]) -> MetadataMap:
    return {
        EnumMetadataKey.FILE_COUNT: len(resources),
        EnumMetadataKey.TOTAL_BLOCKS: sum(len(r.blocks) for r in resources),
        EnumMetadataKey.TOTAL_FRAGMENTS: sum(
            len(r.iter_fragments()) for r in resources
        ),
    }


def normalize_file_path(path: str) -> str:
    """Use forward slashes and drop a leading ``./``."""
    normalized = path.strip().replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized


def _match_file(files: Mapping[str, str], file_path: str) -> str | None:
    """Find the mapping key for a node's file path, exact match first."""
    if file_path in files:
        return file_path
    wanted = normalize_file_path(file_path)
    for name in files:
        if normalize_file_path(name) == wanted:
            return name
    return None


def _find_project_file(files: Mapping[str, str], project_file: str | None) -> str:
    if project_file is not None:
        if project_file not in files:
            raise ProjectDescriptionNotFoundError(
                f"Project description {project_file!r} is not among the files"
            )
        return project_file
    for name in files:
        if name.lower().endswith(PROJECT_FILE_SUFFIX):
            return name
    raise ProjectDescriptionNotFoundError(
        f"No {PROJECT_FILE_SUFFIX} file found among {len(files)} files"
    )


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def compile_file(
    content: str,
    file_name: str,
    content_type: str | EnumContentKind | None = None,
    limits: ModelCompilerLimits | None = None,
) -> ModelCompilationResult:
    """Compile one file into an analyzed resource.

    Raises:
        CompilationValidationError: If the content or file name is empty.
    """
    _validate_file(content, file_name)
    logger.info("Compiling file %s", file_name)

    resource = _compile_resource(
        content, file_name, content_type, limits or ModelCompilerLimits()
    )
    resources = (resource,)
    return ModelCompilationResult(resources=resources, metadata=_summary(resources))


def compile_files(
    files: Mapping[str, str],
    limits: ModelCompilerLimits | None = None,
) -> ModelCompilationResult:
    """Compile every file of a mapping, in mapping order.

    Content kinds are detected from file extensions.

    Raises:
        CompilationValidationError: If the mapping is empty or holds an
            empty file name or content.
    """
    if not files:
        raise CompilationValidationError("At least one file is required")

    limits = limits or ModelCompilerLimits()
    logger.info("Compiling %d files", len(files))

    for file_name, content in files.items():
        _validate_file(content, file_name)

    resources = tuple(
        _compile_resource(content, file_name, None, limits)
        for file_name, content in files.items()
    )
    return ModelCompilationResult(resources=resources, metadata=_summary(resources))


def compile_project(
    files: Mapping[str, str],
    project_file: str | None = None,
    limits: ModelCompilerLimits | None = None,
) -> ModelCompilationResult:
    """Compile a project described by a link-notation file.

    Each graph node that maps to a file present in ``files`` gets the
    analyzed resource as ``parsed_content``. Nodes whose file is absent are
    marked with ``missing_file`` instead of failing the compilation. A file
    referenced by several nodes is compiled once.

    Raises:
        CompilationValidationError: If ``files`` is empty.
        ProjectDescriptionNotFoundError: If no project description exists.
    """
    if not files:
        raise CompilationValidationError("At least one file is required")

    limits = limits or ModelCompilerLimits()
    description_name = _find_project_file(files, project_file)
    logger.info("Compiling project %s (%d files)", description_name, len(files))

    graph = parse_links(files[description_name])

    compiled: dict[str, ModelParsedResource] = {}
    nodes: dict[str, ModelGraphNode] = {}
    for key, node in graph.nodes.items():
        if node.file_path is None:
            nodes[key] = node
            continue

        file_name = _match_file(files, node.file_path)
        if file_name is None:
            logger.warning(
                "File %s referenced by node %s is missing", node.file_path, node.name
            )
            nodes[key] = node.model_copy(
                update={"metadata": {**node.metadata, EnumMetadataKey.MISSING_FILE: True}}
            )
            continue

        if file_name not in compiled:
            compiled[file_name] = _compile_resource(
                files[file_name], file_name, None, limits
            )
        nodes[key] = node.model_copy(update={"parsed_content": compiled[file_name]})

    resources = tuple(compiled.values())
    compiled_graph = ModelProjectGraph(
        nodes=nodes,
        root_keys=graph.root_keys,
        metadata=graph.metadata,
    )
    logger.info(
        "Compiled project %s: %d resources, %d nodes",
        description_name,
        len(resources),
        len(nodes),
    )
    return ModelCompilationResult(
        resources=resources,
        graph=compiled_graph,
        metadata=_summary(resources),
    )


def handle_compilation(request: ModelCompilationRequest) -> ModelCompilationResult:
    """Route a compilation request to its operation.

    Raises:
        CompilationValidationError: If the request does not fit its operation.
        ProjectDescriptionNotFoundError: For projects without a description.
    """
    if request.operation is EnumCompilationOperation.COMPILE_FILE:
        if len(request.files) != 1:
            raise CompilationValidationError(
                f"compile_file expects exactly one file, got {len(request.files)}"
            )
        ((file_name, content),) = request.files.items()
        return compile_file(content, file_name, request.content_type, request.limits)

    if request.operation is EnumCompilationOperation.COMPILE_FILES:
        return compile_files(request.files, request.limits)

    return compile_project(request.files, request.project_file, request.limits)


__all__ = [
    "compile_file",
    "compile_files",
    "compile_project",
    "handle_compilation",
    "normalize_file_path",
]
