# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Operations supported by the compilation orchestrator."""

from __future__ import annotations

from enum import Enum


class EnumCompilationOperation(str, Enum):
    """Compilation entry point selected by a request."""

    COMPILE_FILE = "compile_file"
    COMPILE_FILES = "compile_files"
    COMPILE_PROJECT = "compile_project"


__all__ = ["EnumCompilationOperation"]
