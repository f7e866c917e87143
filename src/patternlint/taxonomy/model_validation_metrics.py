# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelValidationMetrics - metrics about a validation run."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ModelValidationMetrics:
    """Metrics about a validation run.

    Attributes:
        duration_ms: Time taken for the run in milliseconds.
        categories_scanned: Number of category folders.
        patterns_scanned: Number of pattern files.
        exemplar_language: Exemplar fence tag used for V8 (None if the corpus
            has no tagged code blocks).
        findings_by_rule: Breakdown of findings by rule ID.
    """

    duration_ms: int = 0
    categories_scanned: int = 0
    patterns_scanned: int = 0
    exemplar_language: str | None = None
    findings_by_rule: dict[str, int] = field(default_factory=dict)
