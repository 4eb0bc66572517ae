# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exceptions for compilation orchestration handlers.

Error Codes:
    - COMPILE_001: Input validation failed (empty content, file name or file set)
    - COMPILE_002: Project description (``.spaceproj``) not found
"""

from __future__ import annotations


class CompilationError(Exception):
    """Base exception for compilation errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., COMPILE_001).

    Example:
        >>> try:
        ...     raise CompilationError("Something failed", code="COMPILE_999")
        ... except CompilationError as e:
        ...     print(f"Error {e.code}: {e.message}")
        Error COMPILE_999: Something failed
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class CompilationValidationError(CompilationError):
    """Raised when compilation input is invalid.

    Error Code: COMPILE_001
    Recoverable: False (the input must be fixed before retrying)
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code="COMPILE_001")


class ProjectDescriptionNotFoundError(CompilationError):
    """Raised when a project has no link-notation description file.

    Error Code: COMPILE_002
    Recoverable: False
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code="COMPILE_002")


__all__ = [
    "CompilationError",
    "CompilationValidationError",
    "ProjectDescriptionNotFoundError",
]
