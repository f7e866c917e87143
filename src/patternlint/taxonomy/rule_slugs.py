# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""V5 - slug uniqueness.

Slugs are corpus-wide identifiers, not per-category ones. A collision yields
one finding per file, each quoting the paths of the other files.
"""

from __future__ import annotations

from collections import defaultdict

from patternlint.config.model_validator_config import ModelValidatorConfig
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.corpus.model_corpus_file import ModelPatternFile
from patternlint.taxonomy.enum_taxonomy_rule import EnumTaxonomyRule
from patternlint.taxonomy.model_taxonomy_finding import ModelTaxonomyFinding

_RULE = EnumTaxonomyRule.SLUG_UNIQUENESS


def check_slugs(
    corpus: ModelCorpus, config: ModelValidatorConfig
) -> list[ModelTaxonomyFinding]:
    """Report duplicate and non-kebab-case slugs."""
    findings: list[ModelTaxonomyFinding] = []
    by_slug: dict[str, list[ModelPatternFile]] = defaultdict(list)

    for pattern in corpus.patterns:
        by_slug[pattern.slug].append(pattern)
        if not pattern.has_valid_slug:
            findings.append(
                ModelTaxonomyFinding(
                    pattern.rel_path,
                    _RULE,
                    f"slug '{pattern.slug}' is not lowercase kebab-case",
                )
            )

    for slug, files in by_slug.items():
        if len(files) < 2:
            continue
        for file in files:
            others = ", ".join(f.rel_path for f in files if f is not file)
            findings.append(
                ModelTaxonomyFinding(
                    file.rel_path, _RULE, f"slug '{slug}' also used by {others}"
                )
            )

    return findings


__all__ = ["check_slugs"]
