# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Environment-driven compiler settings."""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from spacecompiler.config.model_compiler_limits import (
    DEFAULT_MAX_BLOCK_SIZE,
    DEFAULT_MAX_PARAGRAPH_LENGTH,
    DEFAULT_MIN_PARAGRAPH_LENGTH,
    ModelCompilerLimits,
)
from spacecompiler.enums.enum_log_level import EnumLogLevel


class CompilerSettings(BaseSettings):
    """Pydantic Settings for the compiler, loaded from environment.

    Environment variables:
        SPACECOMPILER_MIN_PARAGRAPH_LENGTH: int (default 50)
        SPACECOMPILER_MAX_PARAGRAPH_LENGTH: int (default 2000)
        SPACECOMPILER_MAX_BLOCK_SIZE: int (default 8000)
        SPACECOMPILER_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR|CRITICAL (default INFO)
    """

    model_config = SettingsConfigDict(
        env_prefix="SPACECOMPILER_",
        extra="ignore",
    )

    min_paragraph_length: int = Field(default=DEFAULT_MIN_PARAGRAPH_LENGTH, gt=0)
    max_paragraph_length: int = Field(default=DEFAULT_MAX_PARAGRAPH_LENGTH, gt=0)
    max_block_size: int = Field(default=DEFAULT_MAX_BLOCK_SIZE, gt=0)
    log_level: EnumLogLevel = Field(
        default=EnumLogLevel.INFO,
        description="Root log level applied by configure_logging",
    )

    def to_limits(self) -> ModelCompilerLimits:
        """Convert settings to a frozen ModelCompilerLimits instance."""
        return ModelCompilerLimits(
            min_paragraph_length=self.min_paragraph_length,
            max_paragraph_length=self.max_paragraph_length,
            max_block_size=self.max_block_size,
        )


def configure_logging(level: EnumLogLevel | str = EnumLogLevel.INFO) -> None:
    """Apply a basic logging configuration and set the root level.

    The root level is set even when handlers are already installed.
    """
    numeric_level = EnumLogLevel.parse(level).numeric
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(numeric_level)


__all__ = ["CompilerSettings", "configure_logging"]
