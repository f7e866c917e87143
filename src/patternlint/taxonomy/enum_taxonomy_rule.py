# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""EnumTaxonomyRule - taxonomy validation rule identifiers."""

from __future__ import annotations

from enum import Enum


class EnumTaxonomyRule(Enum):
    """Taxonomy rule identifiers.

    These are the canonical rule IDs used in findings and JSON output.
    """

    CATEGORY_COUNT = "V1"
    ORPHAN_PATTERN = "V2"
    LINK_RESOLVABILITY = "V3"
    RELATED_CLOSURE = "V4"
    SLUG_UNIQUENESS = "V5"
    SKELETON = "V6"
    DTO_TAG = "V7"
    EXEMPLAR_LANGUAGE = "V8"

    @property
    def number(self) -> int:
        """Numeric part of the rule ID, used for stable sorting."""
        return int(self.value[1:])


__all__ = ["EnumTaxonomyRule"]
