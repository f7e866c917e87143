# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exception hierarchy for patternlint.

Structural findings are never raised; they are collected into a
ModelValidationResult. Exceptions are reserved for conditions that abort a
run (exit code 2 at the CLI).
"""

from __future__ import annotations

from pathlib import Path


class PatternLintError(Exception):
    """Base class for all patternlint errors."""


class ConfigError(PatternLintError):
    """Configuration file is malformed or fails validation."""


class CorpusReadError(PatternLintError):
    """A corpus file could not be read.

    Attributes:
        path: The offending path.
        reason: Human-readable cause (permission denied, bad encoding, ...).
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path}: {reason}")


class ValidationCancelledError(PatternLintError):
    """The stop signal was set before validation completed."""


class TemplateError(PatternLintError):
    """A template could not be instantiated."""


__all__ = [
    "ConfigError",
    "CorpusReadError",
    "PatternLintError",
    "TemplateError",
    "ValidationCancelledError",
]
