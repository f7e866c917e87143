# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""V3 - link resolvability.

Every relative link outside code must resolve to an existing file or folder.
Fragments and queries are stripped; pure ``#anchor`` links are skipped.
External links only need to be well-formed: the network is never touched.
"""

from __future__ import annotations

from patternlint.config.model_validator_config import ModelValidatorConfig
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.corpus.model_corpus_file import ModelCorpusFile
from patternlint.taxonomy.enum_taxonomy_rule import EnumTaxonomyRule
from patternlint.taxonomy.link_resolution import (
    is_external,
    is_fragment_only,
    is_well_formed_url,
    resolve_relative,
)
from patternlint.taxonomy.model_taxonomy_finding import ModelTaxonomyFinding

_RULE = EnumTaxonomyRule.LINK_RESOLVABILITY


def _check_file(corpus: ModelCorpus, file: ModelCorpusFile) -> list[ModelTaxonomyFinding]:
    findings: list[ModelTaxonomyFinding] = []
    for link in file.document.links:
        target = link.target
        if not target or is_fragment_only(target):
            continue
        if is_external(target):
            if not is_well_formed_url(target):
                findings.append(
                    ModelTaxonomyFinding(file.rel_path, _RULE, f"malformed URL {target}")
                )
            continue
        if target.startswith("/"):
            findings.append(
                ModelTaxonomyFinding(file.rel_path, _RULE, f"absolute path link {target}")
            )
            continue
        resolved = resolve_relative(file.path, target, corpus.root)
        if resolved is None or not resolved.exists():
            findings.append(
                ModelTaxonomyFinding(file.rel_path, _RULE, f"broken relative link {target}")
            )
    return findings


def check_links(
    corpus: ModelCorpus, config: ModelValidatorConfig
) -> list[ModelTaxonomyFinding]:
    """Check every link in every corpus Markdown file."""
    findings: list[ModelTaxonomyFinding] = []
    for file in corpus.markdown_files:
        findings.extend(_check_file(corpus, file))
    return findings


__all__ = ["check_links"]
