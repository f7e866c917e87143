# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""V7 - DTO-tag grammar.

Applies to the code examples of the configured categories (default
``enterprise``): the tags live on struct fields inside fenced blocks. Prose,
inline code spans and diagram blocks are not examples, so a README or
pattern may describe the ``dto:"direction,context,security"`` convention
itself without tripping the rule.
"""

from __future__ import annotations

from patternlint.config.model_validator_config import ModelValidatorConfig
from patternlint.conventions.dto_tag import dto_tag_errors, find_dto_tags
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.corpus.model_corpus_file import ModelCorpusFile
from patternlint.taxonomy.enum_taxonomy_rule import EnumTaxonomyRule
from patternlint.taxonomy.model_taxonomy_finding import ModelTaxonomyFinding
from patternlint.taxonomy.rule_exemplar_language import is_diagram

_RULE = EnumTaxonomyRule.DTO_TAG


def check_dto_tags(
    corpus: ModelCorpus, config: ModelValidatorConfig
) -> list[ModelTaxonomyFinding]:
    """One finding per malformed tag, listing every invalid token."""
    findings: list[ModelTaxonomyFinding] = []
    for name in config.dto_tag_categories:
        category = corpus.category(name)
        if category is None:
            continue
        files: list[ModelCorpusFile] = list(category.patterns)
        if category.readme is not None:
            files.append(category.readme)
        for file in files:
            for fence in file.document.fences:
                if is_diagram(fence, config):
                    continue
                for occurrence in find_dto_tags(fence.body):
                    errors = dto_tag_errors(occurrence.value)
                    if errors:
                        findings.append(
                            ModelTaxonomyFinding(
                                file.rel_path, _RULE, "; ".join(errors)
                            )
                        )
    return findings


__all__ = ["check_dto_tags"]
