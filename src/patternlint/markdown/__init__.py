# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Markdown structure extraction for corpus files."""

from patternlint.markdown.markdown_parser import (
    extract_links,
    parse_markdown,
    split_table_cells,
    strip_inline_markup,
)
from patternlint.markdown.model_markdown_document import (
    MarkdownFence,
    MarkdownHeading,
    MarkdownLink,
    MarkdownTable,
    MarkdownTableRow,
    ModelMarkdownDocument,
)

__all__ = [
    "MarkdownFence",
    "MarkdownHeading",
    "MarkdownLink",
    "MarkdownTable",
    "MarkdownTableRow",
    "ModelMarkdownDocument",
    "extract_links",
    "parse_markdown",
    "split_table_cells",
    "strip_inline_markup",
]
