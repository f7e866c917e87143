# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Taxonomy validator: run every rule over a loaded corpus.

Rules are pure functions of ``(corpus, config)``. Findings are accumulated,
never raised; only unreadable files, bad configuration and cancellation
abort a run. Output is deterministic: findings are de-duplicated and
stable-sorted by (path, rule number), with each rule's own order kept within
a (path, rule) group.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterable
from pathlib import Path

from patternlint.config.model_validator_config import ModelValidatorConfig, load_config
from patternlint.corpus.corpus_loader import load_corpus
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.errors import ValidationCancelledError
from patternlint.taxonomy.enum_taxonomy_rule import EnumTaxonomyRule
from patternlint.taxonomy.model_taxonomy_finding import ModelTaxonomyFinding
from patternlint.taxonomy.model_validation_metrics import ModelValidationMetrics
from patternlint.taxonomy.model_validation_result import ModelValidationResult
from patternlint.taxonomy.rule_category_counts import check_category_counts
from patternlint.taxonomy.rule_dto_tags import check_dto_tags
from patternlint.taxonomy.rule_exemplar_language import (
    check_exemplar_language,
    detect_exemplar_language,
)
from patternlint.taxonomy.rule_links import check_links
from patternlint.taxonomy.rule_orphans import check_orphans
from patternlint.taxonomy.rule_related_patterns import check_related_patterns
from patternlint.taxonomy.rule_skeleton import check_skeleton
from patternlint.taxonomy.rule_slugs import check_slugs

logger = logging.getLogger(__name__)

RuleCheck = Callable[[ModelCorpus, ModelValidatorConfig], list[ModelTaxonomyFinding]]

RULE_CHECKS: tuple[tuple[EnumTaxonomyRule, RuleCheck], ...] = (
    (EnumTaxonomyRule.CATEGORY_COUNT, check_category_counts),
    (EnumTaxonomyRule.ORPHAN_PATTERN, check_orphans),
    (EnumTaxonomyRule.LINK_RESOLVABILITY, check_links),
    (EnumTaxonomyRule.RELATED_CLOSURE, check_related_patterns),
    (EnumTaxonomyRule.SLUG_UNIQUENESS, check_slugs),
    (EnumTaxonomyRule.SKELETON, check_skeleton),
    (EnumTaxonomyRule.DTO_TAG, check_dto_tags),
    (EnumTaxonomyRule.EXEMPLAR_LANGUAGE, check_exemplar_language),
)


def sort_findings(findings: Iterable[ModelTaxonomyFinding]) -> list[ModelTaxonomyFinding]:
    """De-duplicate and stable-sort findings by (path, rule number)."""
    unique = dict.fromkeys(findings)
    return sorted(unique, key=lambda f: f.sort_key)


def _check_cancelled(stop_event: threading.Event | None) -> None:
    if stop_event is not None and stop_event.is_set():
        raise ValidationCancelledError("validation cancelled")


def validate_corpus(
    corpus: ModelCorpus,
    config: ModelValidatorConfig,
    *,
    rules: Iterable[EnumTaxonomyRule] | None = None,
    stop_event: threading.Event | None = None,
) -> list[ModelTaxonomyFinding]:
    """Run the selected rules over an already loaded corpus.

    Args:
        corpus: Loaded corpus.
        config: Validator configuration.
        rules: Rules to run. Defaults to all of them.
        stop_event: Cooperative cancellation signal, polled between rules.

    Returns:
        Sorted findings.

    Raises:
        ValidationCancelledError: If the stop signal is set.
    """
    selected = set(rules) if rules is not None else None
    findings: list[ModelTaxonomyFinding] = []
    for rule, check in RULE_CHECKS:
        if selected is not None and rule not in selected:
            continue
        _check_cancelled(stop_event)
        rule_findings = check(corpus, config)
        logger.debug("%s: %d findings", rule.value, len(rule_findings))
        findings.extend(rule_findings)
    _check_cancelled(stop_event)
    return sort_findings(findings)


def run_validation(
    root: str | Path,
    config: ModelValidatorConfig | None = None,
    *,
    rules: Iterable[EnumTaxonomyRule] | None = None,
    stop_event: threading.Event | None = None,
    collect_metrics: bool = False,
) -> ModelValidationResult:
    """Load the corpus at ``root`` and validate it.

    Args:
        root: Corpus root directory.
        config: Validator configuration. Loaded from
            ``<root>/.patternlint.yaml`` (or defaults) when None.
        rules: Rules to run. Defaults to all of them.
        stop_event: Cooperative cancellation signal.
        collect_metrics: If True, collect detailed metrics about the run.

    Returns:
        Validation result with sorted findings.

    Raises:
        CorpusReadError: If the root or a corpus file cannot be read.
        ConfigError: If the configuration file is invalid.
        ValidationCancelledError: If the stop signal is set.
    """
    start_time = time.perf_counter() if collect_metrics else 0

    root = Path(root)
    if config is None:
        config = load_config(root)

    corpus = load_corpus(root, config, stop_event=stop_event)
    findings = validate_corpus(corpus, config, rules=rules, stop_event=stop_event)

    metrics = None
    if collect_metrics:
        findings_by_rule: dict[str, int] = {}
        for finding in findings:
            key = finding.rule.value
            findings_by_rule[key] = findings_by_rule.get(key, 0) + 1
        metrics = ModelValidationMetrics(
            duration_ms=int((time.perf_counter() - start_time) * 1000),
            categories_scanned=len(corpus.categories),
            patterns_scanned=len(corpus.patterns),
            exemplar_language=detect_exemplar_language(corpus, config),
            findings_by_rule=findings_by_rule,
        )

    return ModelValidationResult(
        findings=findings,
        files_scanned=len(corpus.markdown_files),
        metrics=metrics,
    )


__all__ = [
    "RULE_CHECKS",
    "run_validation",
    "sort_findings",
    "validate_corpus",
]
