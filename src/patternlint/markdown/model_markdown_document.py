# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Parsed Markdown document structures.

All line numbers are 1-indexed. ``section`` is the text of the nearest
preceding level-2 heading, or None before the first one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class MarkdownHeading:
    """An ATX heading outside code fences."""

    level: int
    text: str
    line: int


@dataclass(frozen=True)
class MarkdownFence:
    """A fenced code block.

    Attributes:
        language: Lowercased first word of the info string ("" if untagged).
        line: Line of the opening fence.
        end_line: Line of the closing fence (last line if unterminated).
        body: Block content without the fence lines.
    """

    language: str
    line: int
    end_line: int
    body: str


@dataclass(frozen=True)
class MarkdownLink:
    """An inline, reference-definition, or autolink target."""

    text: str
    target: str
    line: int
    section: str | None = None
    is_image: bool = False


@dataclass(frozen=True)
class MarkdownTableRow:
    """One body row of a pipe table."""

    cells: tuple[str, ...]
    line: int


@dataclass(frozen=True)
class MarkdownTable:
    """A pipe table.

    Attributes:
        header: Header cells (the first row, whether or not a separator follows).
        rows: Body rows.
        line: Line of the header row.
        section: Enclosing level-2 section.
        has_separator: True if the second row is a ``|---|`` delimiter row.
    """

    header: tuple[str, ...]
    rows: tuple[MarkdownTableRow, ...]
    line: int
    section: str | None
    has_separator: bool

    def column_index(self, name: str) -> int | None:
        """Return the index of the first header cell naming ``name``.

        ``name`` must appear as a whole word, optionally plural, so "file"
        matches "File" or "**Files**" but not "Profile".
        """
        word = re.compile(rf"(?<![\w-]){re.escape(name)}s?(?![\w-])", re.IGNORECASE)
        for i, cell in enumerate(self.header):
            if word.search(cell):
                return i
        return None


@dataclass(frozen=True)
class ModelMarkdownDocument:
    """Structural view of one Markdown file."""

    source: str
    headings: tuple[MarkdownHeading, ...] = field(default_factory=tuple)
    fences: tuple[MarkdownFence, ...] = field(default_factory=tuple)
    links: tuple[MarkdownLink, ...] = field(default_factory=tuple)
    tables: tuple[MarkdownTable, ...] = field(default_factory=tuple)

    @property
    def title(self) -> str | None:
        """Text of the first heading if it is level 1."""
        if self.headings and self.headings[0].level == 1:
            return self.headings[0].text
        return None

    @property
    def lines(self) -> list[str]:
        """Source split into lines."""
        return self.source.splitlines()

    def section_headings(self) -> list[MarkdownHeading]:
        """Level-2 headings in document order."""
        return [h for h in self.headings if h.level == 2]

    def tables_in_section(self, predicate: str) -> list[MarkdownTable]:
        """Tables whose enclosing section heading contains ``predicate``."""
        needle = predicate.lower()
        return [
            t for t in self.tables if t.section is not None and needle in t.section.lower()
        ]


__all__ = [
    "MarkdownFence",
    "MarkdownHeading",
    "MarkdownLink",
    "MarkdownTable",
    "MarkdownTableRow",
    "ModelMarkdownDocument",
]
