# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Taxonomy validator: rules V1-V8 over a pattern corpus.

Usage:
    from patternlint.taxonomy import run_validation

    result = run_validation("path/to/patterns")
    for finding in result.findings:
        print(finding)
"""

from patternlint.taxonomy.enum_taxonomy_rule import EnumTaxonomyRule
from patternlint.taxonomy.model_taxonomy_finding import ModelTaxonomyFinding
from patternlint.taxonomy.model_validation_metrics import ModelValidationMetrics
from patternlint.taxonomy.model_validation_result import ModelValidationResult
from patternlint.taxonomy.rule_exemplar_language import (
    detect_exemplar_language,
    is_diagram,
)
from patternlint.taxonomy.rule_skeleton import (
    check_pattern_skeleton,
    normalize_heading,
)
from patternlint.taxonomy.taxonomy_validator import (
    RULE_CHECKS,
    run_validation,
    sort_findings,
    validate_corpus,
)

__all__ = [
    "RULE_CHECKS",
    "EnumTaxonomyRule",
    "ModelTaxonomyFinding",
    "ModelValidationMetrics",
    "ModelValidationResult",
    "check_pattern_skeleton",
    "detect_exemplar_language",
    "is_diagram",
    "normalize_heading",
    "run_validation",
    "sort_findings",
    "validate_corpus",
]
