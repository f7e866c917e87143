# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""V6 - skeleton compliance.

A pattern file opens with a level-1 title and a one-line intent, followed by
the configured level-2 sections in order. Optional sections may be absent
but never misordered; headings that match no section are ignored. One
heading may satisfy several adjacent sections (``When to Use / When Not to
Use``).
"""

from __future__ import annotations

import re

from patternlint.config.model_section_spec import ModelSectionSpec
from patternlint.config.model_validator_config import ModelValidatorConfig
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.corpus.model_corpus_file import ModelPatternFile
from patternlint.markdown.markdown_parser import strip_inline_markup
from patternlint.taxonomy.enum_taxonomy_rule import EnumTaxonomyRule
from patternlint.taxonomy.model_taxonomy_finding import ModelTaxonomyFinding

_RULE = EnumTaxonomyRule.SKELETON

_EDGE_SYMBOLS = re.compile(r"^[\W_]+|[\W_]+$")
_NUMBERING = re.compile(r"^\d+(?:\.\d+)*[.)]?\s+")
_WHITESPACE = re.compile(r"\s+")


def normalize_heading(text: str) -> str:
    """Reduce a heading to the form compared against section aliases.

    ``"## 3. Problem Solved:"`` and ``"## 🎯 problem solved"`` both become
    ``"problem solved"``.
    """
    text = strip_inline_markup(text)
    text = _EDGE_SYMBOLS.sub("", text)
    text = _NUMBERING.sub("", text)
    text = _EDGE_SYMBOLS.sub("", text)
    return _WHITESPACE.sub(" ", text).lower()


def match_sections(heading: str, sections: list[ModelSectionSpec]) -> list[int]:
    """Indices of every skeleton section a heading satisfies."""
    normalized = normalize_heading(heading)
    return [i for i, spec in enumerate(sections) if spec.matches(normalized)]


def _check_title(pattern: ModelPatternFile) -> list[ModelTaxonomyFinding]:
    headings = pattern.document.headings
    titles = [h for h in headings if h.level == 1]
    findings: list[ModelTaxonomyFinding] = []

    if not titles:
        findings.append(ModelTaxonomyFinding(pattern.rel_path, _RULE, "missing level-1 title"))
        return findings
    if headings[0].level != 1:
        findings.append(
            ModelTaxonomyFinding(
                pattern.rel_path,
                _RULE,
                f"first heading '{headings[0].text}' is not a level-1 title",
            )
        )
    for extra in titles[1:]:
        findings.append(
            ModelTaxonomyFinding(
                pattern.rel_path,
                _RULE,
                f"extra level-1 heading '{extra.text}' at line {extra.line}",
            )
        )
    if headings[0].level == 1 and pattern.intent is None:
        findings.append(
            ModelTaxonomyFinding(
                pattern.rel_path, _RULE, "one-line intent missing below title"
            )
        )
    return findings


def _check_sections(
    pattern: ModelPatternFile, sections: list[ModelSectionSpec]
) -> list[ModelTaxonomyFinding]:
    findings: list[ModelTaxonomyFinding] = []
    found: set[int] = set()
    position = -1

    for heading in pattern.document.section_headings():
        matched = match_sections(heading.text, sections)
        if not matched or found.issuperset(matched):
            continue
        first, last = min(matched), max(matched)
        if first < position:
            findings.append(
                ModelTaxonomyFinding(
                    pattern.rel_path,
                    _RULE,
                    f"section '{sections[first].name}' out of order "
                    f"(appears after '{sections[position].name}')",
                )
            )
        found.update(matched)
        position = max(position, last)

    for i, spec in enumerate(sections):
        if spec.required and i not in found:
            findings.append(
                ModelTaxonomyFinding(
                    pattern.rel_path, _RULE, f"required section '{spec.name}' missing"
                )
            )
    return findings


def _check_tables(pattern: ModelPatternFile) -> list[ModelTaxonomyFinding]:
    return [
        ModelTaxonomyFinding(
            pattern.rel_path,
            _RULE,
            f"table at line {table.line} has no header row separator",
        )
        for table in pattern.document.tables
        if not table.has_separator
    ]


def check_pattern_skeleton(
    pattern: ModelPatternFile, config: ModelValidatorConfig
) -> list[ModelTaxonomyFinding]:
    """Skeleton findings for a single pattern file."""
    return [
        *_check_title(pattern),
        *_check_sections(pattern, config.sections),
        *_check_tables(pattern),
    ]


def check_skeleton(
    corpus: ModelCorpus, config: ModelValidatorConfig
) -> list[ModelTaxonomyFinding]:
    """Check the anatomy of every pattern file."""
    findings: list[ModelTaxonomyFinding] = []
    for pattern in corpus.patterns:
        findings.extend(check_pattern_skeleton(pattern, config))
    return findings


__all__ = [
    "check_pattern_skeleton",
    "check_skeleton",
    "match_sections",
    "normalize_heading",
]
