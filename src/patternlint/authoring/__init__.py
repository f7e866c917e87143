# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Authoring helpers: new pattern files and category folders from templates."""

from patternlint.authoring.template_instantiator import (
    PLACEHOLDER_PATTERN,
    instantiate_category,
    instantiate_pattern,
    load_template,
    slugify,
    substitute_placeholders,
)

__all__ = [
    "PLACEHOLDER_PATTERN",
    "instantiate_category",
    "instantiate_pattern",
    "load_template",
    "slugify",
    "substitute_placeholders",
]
