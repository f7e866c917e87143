# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelValidationResult - result of a validation run."""

from __future__ import annotations

from dataclasses import dataclass

from patternlint.taxonomy.model_taxonomy_finding import ModelTaxonomyFinding
from patternlint.taxonomy.model_validation_metrics import ModelValidationMetrics


@dataclass
class ModelValidationResult:
    """Result of a validation run.

    Attributes:
        findings: Findings stable-sorted by (path, rule number).
        files_scanned: Number of Markdown files scanned.
        metrics: Optional detailed metrics about the run.
    """

    findings: list[ModelTaxonomyFinding]
    files_scanned: int
    metrics: ModelValidationMetrics | None = None

    @property
    def is_clean(self) -> bool:
        """Return True if no findings."""
        return len(self.findings) == 0
