# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelTaxonomyFinding - single taxonomy validation finding."""

from __future__ import annotations

from dataclasses import dataclass

from patternlint.taxonomy.enum_taxonomy_rule import EnumTaxonomyRule


@dataclass(frozen=True)
class ModelTaxonomyFinding:
    """Represents a single taxonomy validation finding.

    Attributes:
        path: File path relative to the corpus root, POSIX separators.
        rule: The rule that was violated.
        reason: One-line human-readable reason.
    """

    path: str
    rule: EnumTaxonomyRule
    reason: str

    @property
    def sort_key(self) -> tuple[str, int]:
        """Report order: file path, then rule number."""
        return (self.path, self.rule.number)

    def to_dict(self) -> dict[str, str]:
        """Convert finding to dictionary representation."""
        return {"path": self.path, "rule": self.rule.value, "reason": self.reason}

    def __str__(self) -> str:
        """Format as path: rule: reason."""
        return f"{self.path}: {self.rule.value}: {self.reason}"
