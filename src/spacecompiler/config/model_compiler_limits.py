# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Compilation limits model.

Holds the numeric thresholds used by the segmenter and the tree builder.
Instances are frozen; load them from YAML with ``from_yaml`` or from the
environment through ``CompilerSettings.to_limits()``.

Example YAML::

    min_paragraph_length: 50
    max_paragraph_length: ${SPACECOMPILER_MAX_PARAGRAPH}
    max_block_size: 8000
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_MIN_PARAGRAPH_LENGTH = 50
DEFAULT_MAX_PARAGRAPH_LENGTH = 2000
DEFAULT_MAX_BLOCK_SIZE = 8000

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)\}")


class ModelCompilerLimits(BaseModel):
    """Frozen size thresholds for one compilation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_paragraph_length: int = Field(
        default=DEFAULT_MIN_PARAGRAPH_LENGTH,
        gt=0,
        description="Paragraphs shorter than this are merged with neighbours",
    )
    max_paragraph_length: int = Field(
        default=DEFAULT_MAX_PARAGRAPH_LENGTH,
        gt=0,
        description="Paragraphs longer than this are split on sentence ends",
    )
    max_block_size: int = Field(
        default=DEFAULT_MAX_BLOCK_SIZE,
        gt=0,
        description="Character budget of one block (separators excluded)",
    )

    @model_validator(mode="after")
    def validate_paragraph_bounds(self) -> ModelCompilerLimits:
        """Ensure min_paragraph_length <= max_paragraph_length."""
        if self.min_paragraph_length > self.max_paragraph_length:
            raise ValueError(
                f"min_paragraph_length ({self.min_paragraph_length}) must not "
                f"exceed max_paragraph_length ({self.max_paragraph_length})"
            )
        return self

    # ==========================================
    # YAML loading
    # ==========================================

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        *,
        interpolate_env: bool = True,
    ) -> ModelCompilerLimits:
        """Load limits from a YAML mapping.

        Keys missing from the file keep their defaults; an empty file gives
        the default limits. String values may reference environment
        variables as ``${NAME}``.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            ValueError: If a referenced environment variable is unset.
            pydantic.ValidationError: If a limit is out of range.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Limits file not found: {path}")

        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if interpolate_env:
            raw = expand_env_references(raw)
        return cls.model_validate(raw)


def _expand_string(text: str) -> str:
    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in os.environ:
            raise ValueError(f"Environment variable {name!r} is not set ({text!r})")
        return os.environ[name]

    return _ENV_VAR_PATTERN.sub(substitute, text)


def expand_env_references(value: Any) -> Any:
    """Replace ``${NAME}`` references in every string of a YAML tree.

    Raises:
        ValueError: If a referenced environment variable is not set.
    """
    if isinstance(value, str):
        return _expand_string(value)
    if isinstance(value, dict):
        return {key: expand_env_references(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_references(item) for item in value]
    return value


__all__ = [
    "DEFAULT_MAX_BLOCK_SIZE",
    "DEFAULT_MAX_PARAGRAPH_LENGTH",
    "DEFAULT_MIN_PARAGRAPH_LENGTH",
    "ModelCompilerLimits",
    "expand_env_references",
]
