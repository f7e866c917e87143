# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Index generation for the root and category READMEs."""

from patternlint.index.index_generator import (
    ALPHABETICAL_INDEX_BLOCK,
    CATEGORY_TABLE_BLOCK,
    PATTERN_INDEX_BLOCK,
    generated_blocks,
    regenerate_indexes,
    render_alphabetical_index,
    render_category_table,
    render_pattern_index,
    update_generated_blocks,
)

__all__ = [
    "ALPHABETICAL_INDEX_BLOCK",
    "CATEGORY_TABLE_BLOCK",
    "PATTERN_INDEX_BLOCK",
    "generated_blocks",
    "regenerate_indexes",
    "render_alphabetical_index",
    "render_category_table",
    "render_pattern_index",
    "update_generated_blocks",
]
