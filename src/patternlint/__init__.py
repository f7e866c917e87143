# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""patternlint - editorial contract checks for a design-pattern corpus.

The corpus is a tree of Markdown files: a root index, one folder per
category with its own README, and one file per pattern. patternlint checks
the tree against rules V1-V8 and ships authoring and index tools that keep
it compliant.

Quick Start:
    >>> from patternlint import run_validation
    >>> result = run_validation("path/to/patterns")
    >>> result.is_clean
    True
"""

from patternlint.authoring import instantiate_category, instantiate_pattern, slugify
from patternlint.config import ModelValidatorConfig, load_config
from patternlint.corpus import ModelCorpus, load_corpus
from patternlint.errors import (
    ConfigError,
    CorpusReadError,
    PatternLintError,
    TemplateError,
    ValidationCancelledError,
)
from patternlint.index import regenerate_indexes
from patternlint.taxonomy import (
    EnumTaxonomyRule,
    ModelTaxonomyFinding,
    ModelValidationResult,
    run_validation,
    validate_corpus,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "CorpusReadError",
    "EnumTaxonomyRule",
    "ModelCorpus",
    "ModelTaxonomyFinding",
    "ModelValidationResult",
    "ModelValidatorConfig",
    "PatternLintError",
    "TemplateError",
    "ValidationCancelledError",
    "__version__",
    "instantiate_category",
    "instantiate_pattern",
    "load_config",
    "load_corpus",
    "regenerate_indexes",
    "run_validation",
    "slugify",
    "validate_corpus",
]
