# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Log level enum for validator configuration."""

from enum import StrEnum


class EnumLogLevel(StrEnum):
    """Log level enumeration for validator configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


__all__ = ["EnumLogLevel"]
