# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Corpus model: root index, category folders and pattern files."""

from patternlint.corpus.corpus_loader import (
    discover_categories,
    discover_pattern_files,
    load_corpus,
    read_markdown,
)
from patternlint.corpus.model_category import ModelCategory
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.corpus.model_corpus_file import (
    SLUG_PATTERN,
    ModelCorpusFile,
    ModelPatternFile,
)
from patternlint.corpus.model_root_index import (
    ModelCategoryDeclaration,
    ModelRootIndex,
    ModelTotalDeclaration,
)

__all__ = [
    "SLUG_PATTERN",
    "ModelCategory",
    "ModelCategoryDeclaration",
    "ModelCorpus",
    "ModelCorpusFile",
    "ModelPatternFile",
    "ModelRootIndex",
    "ModelTotalDeclaration",
    "discover_categories",
    "discover_pattern_files",
    "load_corpus",
    "read_markdown",
]
