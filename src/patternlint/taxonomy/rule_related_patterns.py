# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""V4 - related-pattern closure.

Each row of a pattern's Related Patterns table must reference another
pattern by slug link. Targets that do not exist are reported once, by V3;
this rule reports rows without a slug link and links that resolve to
something other than a pattern file. Symmetry is not required and cycles
are allowed.
"""

from __future__ import annotations

from patternlint.config.model_validator_config import ModelValidatorConfig
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.corpus.model_corpus_file import ModelPatternFile
from patternlint.markdown.markdown_parser import extract_links, strip_inline_markup
from patternlint.taxonomy.enum_taxonomy_rule import EnumTaxonomyRule
from patternlint.taxonomy.link_resolution import (
    is_external,
    is_markdown_target,
    resolve_relative,
)
from patternlint.taxonomy.model_taxonomy_finding import ModelTaxonomyFinding

_RULE = EnumTaxonomyRule.RELATED_CLOSURE

RELATED_SECTION_NEEDLE = "related"


def _check_pattern(
    corpus: ModelCorpus, pattern: ModelPatternFile
) -> list[ModelTaxonomyFinding]:
    document = pattern.document
    has_section = any(
        RELATED_SECTION_NEEDLE in h.text.lower() for h in document.section_headings()
    )
    if not has_section:
        # A missing section is a skeleton finding (V6)
        return []

    tables = document.tables_in_section(RELATED_SECTION_NEEDLE)
    if not tables:
        return [
            ModelTaxonomyFinding(
                pattern.rel_path, _RULE, "related patterns section has no table"
            )
        ]

    findings: list[ModelTaxonomyFinding] = []
    for table in tables:
        column = table.column_index("pattern") or 0
        for row in table.rows:
            cell = row.cells[column] if column < len(row.cells) else ""
            targets = [
                target
                for _text, target, is_image in extract_links(cell)
                if not is_image and not is_external(target)
            ]
            slug_targets = [t for t in targets if is_markdown_target(t)]
            if not slug_targets:
                label = strip_inline_markup(cell) or f"row at line {row.line}"
                findings.append(
                    ModelTaxonomyFinding(
                        pattern.rel_path,
                        _RULE,
                        f"related pattern '{label}' has no slug link",
                    )
                )
                continue
            for target in slug_targets:
                resolved = resolve_relative(pattern.path, target, corpus.root)
                if resolved is None or not resolved.exists():
                    continue
                if corpus.pattern_at(resolved) is None:
                    findings.append(
                        ModelTaxonomyFinding(
                            pattern.rel_path,
                            _RULE,
                            f"related pattern link {target} does not target "
                            "a pattern file",
                        )
                    )
    return findings


def check_related_patterns(
    corpus: ModelCorpus, config: ModelValidatorConfig
) -> list[ModelTaxonomyFinding]:
    """Check the Related Patterns table of every pattern file."""
    findings: list[ModelTaxonomyFinding] = []
    for pattern in corpus.patterns:
        findings.extend(_check_pattern(corpus, pattern))
    return findings


__all__ = ["RELATED_SECTION_NEEDLE", "check_related_patterns"]
