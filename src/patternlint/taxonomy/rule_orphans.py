# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""V2 - no orphan patterns.

Every pattern file must be reachable from both indexes: its category README
pattern index table and the root alphabetical index. Index rows that carry
no pattern link, or that link outside their own folder, are reported against
the category README.
"""

from __future__ import annotations

from pathlib import Path

from patternlint.config.model_validator_config import ModelValidatorConfig
from patternlint.corpus.model_category import ModelCategory
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.markdown.markdown_parser import extract_links
from patternlint.taxonomy.enum_taxonomy_rule import EnumTaxonomyRule
from patternlint.taxonomy.link_resolution import (
    is_external,
    is_markdown_target,
    resolve_relative,
)
from patternlint.taxonomy.model_taxonomy_finding import ModelTaxonomyFinding

_RULE = EnumTaxonomyRule.ORPHAN_PATTERN


def _category_index_members(
    corpus: ModelCorpus, category: ModelCategory, readme_path: Path
) -> tuple[set[Path] | None, list[ModelTaxonomyFinding]]:
    """Resolve the pattern files listed in a category README index table.

    Returns None for the members when the README has no index table.
    """
    readme_rel = category.readme_rel_path
    table = category.index_table()
    if table is None:
        return None, [
            ModelTaxonomyFinding(
                readme_rel, _RULE, "pattern index table (File, Content, Usage) not found"
            )
        ]

    column = table.column_index("file") or 0
    members: set[Path] = set()
    findings: list[ModelTaxonomyFinding] = []
    for row in table.rows:
        cell = row.cells[column] if column < len(row.cells) else ""
        targets = [
            target
            for _text, target, is_image in extract_links(cell)
            if not is_image and not is_external(target) and is_markdown_target(target)
        ]
        if not targets:
            findings.append(
                ModelTaxonomyFinding(
                    readme_rel,
                    _RULE,
                    f"index table row at line {row.line} has no pattern link",
                )
            )
            continue
        for target in targets:
            resolved = resolve_relative(readme_path, target, corpus.root)
            if resolved is None or resolved.parent != category.path:
                findings.append(
                    ModelTaxonomyFinding(
                        readme_rel,
                        _RULE,
                        f"index table row at line {row.line} links outside "
                        f"the category: {target}",
                    )
                )
                continue
            members.add(resolved)
    return members, findings


def _alphabetical_members(corpus: ModelCorpus) -> set[Path]:
    index = corpus.root_index
    if index is None:
        return set()
    members: set[Path] = set()
    for link in index.alphabetical_links:
        if link.is_image or is_external(link.target):
            continue
        resolved = resolve_relative(index.file.path, link.target, corpus.root)
        if resolved is not None:
            members.add(resolved)
    return members


def check_orphans(
    corpus: ModelCorpus, config: ModelValidatorConfig
) -> list[ModelTaxonomyFinding]:
    """Report patterns missing from either index and malformed index rows."""
    findings: list[ModelTaxonomyFinding] = []
    alphabetical = _alphabetical_members(corpus)

    for category in corpus.categories:
        if category.readme is None:
            findings.append(
                ModelTaxonomyFinding(category.readme_rel_path, _RULE, "category README missing")
            )
            listed: set[Path] | None = None
        else:
            listed, row_findings = _category_index_members(
                corpus, category, category.readme.path
            )
            findings.extend(row_findings)

        for pattern in category.patterns:
            if listed is not None and pattern.path not in listed:
                findings.append(
                    ModelTaxonomyFinding(
                        pattern.rel_path,
                        _RULE,
                        f"not listed in {category.readme_rel_path} index table",
                    )
                )
            # V1 already reports a missing root README
            if corpus.root_index is not None and pattern.path not in alphabetical:
                findings.append(
                    ModelTaxonomyFinding(
                        pattern.rel_path,
                        _RULE,
                        "not listed in root index alphabetical list",
                    )
                )

    return findings


__all__ = ["check_orphans"]
