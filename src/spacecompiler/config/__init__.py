# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Compiler configuration: limits, environment settings and logging setup."""

from spacecompiler.config.compiler_settings import CompilerSettings, configure_logging
from spacecompiler.config.model_compiler_limits import ModelCompilerLimits

__all__ = ["CompilerSettings", "ModelCompilerLimits", "configure_logging"]
