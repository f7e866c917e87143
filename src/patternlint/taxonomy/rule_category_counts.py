# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""V1 - category count accuracy.

The root index must declare every category folder with its exact number of
pattern files, must not list folders that do not exist, and any ``Total``
row must equal the corpus size. Each category README must state its own
count on a recognised statement line ("This category holds 8 patterns.",
"> 8 patterns ...", "## Patterns (8)") and the count must be right.
"""

from __future__ import annotations

from patternlint.config.model_validator_config import ModelValidatorConfig
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.corpus.model_root_index import ROOT_INDEX_NAME
from patternlint.taxonomy.enum_taxonomy_rule import EnumTaxonomyRule
from patternlint.taxonomy.model_taxonomy_finding import ModelTaxonomyFinding

_RULE = EnumTaxonomyRule.CATEGORY_COUNT


def _check_readme_statements(
    corpus: ModelCorpus, config: ModelValidatorConfig
) -> list[ModelTaxonomyFinding]:
    """Every category README states its pattern count, and states it right."""
    patterns = config.count_statement_patterns()
    findings: list[ModelTaxonomyFinding] = []
    for category in corpus.categories:
        if category.readme is None:
            continue
        found = len(category.patterns)
        statements = category.stated_counts(patterns)
        if not statements:
            findings.append(
                ModelTaxonomyFinding(
                    category.readme_rel_path,
                    _RULE,
                    "README does not state its pattern count",
                )
            )
        for count, _line in statements:
            if count != found:
                findings.append(
                    ModelTaxonomyFinding(
                        category.readme_rel_path,
                        _RULE,
                        f"README states {count} patterns, found {found}",
                    )
                )
    return findings


def check_category_counts(
    corpus: ModelCorpus, config: ModelValidatorConfig
) -> list[ModelTaxonomyFinding]:
    """Compare declared category counts against the folders on disk."""
    index = corpus.root_index
    if index is None:
        return [ModelTaxonomyFinding(ROOT_INDEX_NAME, _RULE, "root index README.md not found")]

    findings: list[ModelTaxonomyFinding] = []
    actual = {c.name: len(c.patterns) for c in corpus.categories}

    counted: set[str] = set()
    for declaration in index.categories:
        name = declaration.name
        if name not in actual:
            findings.append(
                ModelTaxonomyFinding(
                    index.rel_path,
                    _RULE,
                    f"category '{name}' listed in root index but folder "
                    f"'{name}/' does not exist",
                )
            )
            continue
        if declaration.count is None:
            continue
        counted.add(name)
        if declaration.count != actual[name]:
            findings.append(
                ModelTaxonomyFinding(
                    index.rel_path,
                    _RULE,
                    f"category '{name}' declared {declaration.count}, "
                    f"found {actual[name]}",
                )
            )

    listed = index.declared_names()
    for name in sorted(actual):
        if name not in listed:
            findings.append(
                ModelTaxonomyFinding(
                    index.rel_path, _RULE, f"category '{name}' not declared in root index"
                )
            )
        elif name not in counted:
            findings.append(
                ModelTaxonomyFinding(
                    index.rel_path,
                    _RULE,
                    f"category '{name}' has no declared file count in root index",
                )
            )

    total = sum(actual.values())
    for declaration in index.totals:
        if declaration.count != total:
            findings.append(
                ModelTaxonomyFinding(
                    index.rel_path,
                    _RULE,
                    f"root index declares total {declaration.count}, found {total}",
                )
            )

    if config.check_readme_counts:
        findings.extend(_check_readme_statements(corpus, config))

    return findings


__all__ = ["check_category_counts"]
