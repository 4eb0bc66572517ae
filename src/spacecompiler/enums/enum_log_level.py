# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Log levels accepted by ``CompilerSettings`` and ``configure_logging``."""

from __future__ import annotations

import logging
from enum import StrEnum


class EnumLogLevel(StrEnum):
    """Root log level for a compiler process."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def parse(cls, value: str | EnumLogLevel) -> EnumLogLevel:
        """Case-insensitive lookup.

        Raises:
            ValueError: If ``value`` is not a known level name.
        """
        return cls(str(value).strip().upper())

    @property
    def numeric(self) -> int:
        """The matching ``logging`` module constant."""
        return logging.getLevelNamesMapping()[self.value]


__all__ = ["EnumLogLevel"]
