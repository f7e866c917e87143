# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""V8 - exemplar-language uniformity.

All code examples share one fence tag. ASCII diagrams are exempt: blocks
tagged with a configured diagram language, and untagged blocks whose body
is box-drawing or arrow art.
"""

from __future__ import annotations

import re
from collections import Counter

from patternlint.config.model_validator_config import ModelValidatorConfig
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.markdown.model_markdown_document import MarkdownFence
from patternlint.taxonomy.enum_taxonomy_rule import EnumTaxonomyRule
from patternlint.taxonomy.model_taxonomy_finding import ModelTaxonomyFinding

_RULE = EnumTaxonomyRule.EXEMPLAR_LANGUAGE

# Box drawing (U+2500-U+257F), block elements, arrows (U+2190-U+21FF), or
# ASCII box corners and arrows
_DIAGRAM_ART = re.compile(r"[─-▟←-⇿]|\+--|--\+|-->|<--")


def is_diagram(fence: MarkdownFence, config: ModelValidatorConfig) -> bool:
    """True if the block is a diagram rather than a code example."""
    if fence.language in config.diagram_languages:
        return True
    return not fence.language and _DIAGRAM_ART.search(fence.body) is not None


def detect_exemplar_language(
    corpus: ModelCorpus, config: ModelValidatorConfig
) -> str | None:
    """Return the configured exemplar, or the most common code-block tag.

    Ties go to the alphabetically first tag. None if no block is tagged.
    """
    if config.exemplar_language is not None:
        return config.exemplar_language
    counts: Counter[str] = Counter(
        fence.language
        for file in corpus.markdown_files
        for fence in file.document.fences
        if fence.language and not is_diagram(fence, config)
    )
    if not counts:
        return None
    return min(counts.items(), key=lambda item: (-item[1], item[0]))[0]


def check_exemplar_language(
    corpus: ModelCorpus, config: ModelValidatorConfig
) -> list[ModelTaxonomyFinding]:
    """Report code blocks that are untagged or tagged with another language."""
    exemplar = detect_exemplar_language(corpus, config)
    accepted = config.accepted_languages(exemplar) if exemplar else frozenset()
    expected = f" (expected '{exemplar}')" if exemplar else ""

    findings: list[ModelTaxonomyFinding] = []
    for file in corpus.markdown_files:
        for fence in file.document.fences:
            if is_diagram(fence, config):
                continue
            if not fence.language:
                findings.append(
                    ModelTaxonomyFinding(
                        file.rel_path,
                        _RULE,
                        f"code block at line {fence.line} has no language tag{expected}",
                    )
                )
            elif exemplar and fence.language not in accepted:
                findings.append(
                    ModelTaxonomyFinding(
                        file.rel_path,
                        _RULE,
                        f"code block at line {fence.line} tagged '{fence.language}', "
                        f"expected '{exemplar}'",
                    )
                )
    return findings


__all__ = ["check_exemplar_language", "detect_exemplar_language", "is_diagram"]
