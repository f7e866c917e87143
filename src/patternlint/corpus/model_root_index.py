# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelRootIndex - the top-level README of the corpus.

A category declaration is any table row whose first cell names a category
folder, either as text ending in ``/`` or as a link to ``<name>/`` or
``<name>/README.md``. The first integer cell after it is the declared
file count::

    | Category | Files | Description |
    |----------|-------|-------------|
    | [structural/](./structural/README.md) | 8 | Composition of objects |
    | **Total** | 170 | |
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from patternlint.corpus.model_corpus_file import ModelCorpusFile
from patternlint.markdown.markdown_parser import extract_links, strip_inline_markup
from patternlint.markdown.model_markdown_document import MarkdownLink

ROOT_INDEX_NAME = "README.md"

_CATEGORY_TEXT_PATTERN = re.compile(r"^([A-Za-z0-9][\w.-]*)/$")
_CATEGORY_TARGET_PATTERN = re.compile(r"^(?:\./)?([A-Za-z0-9][\w.-]*)/(?:README\.md)?$")
_INTEGER_PATTERN = re.compile(r"^\d+$")
_TOTAL_PATTERN = re.compile(r"^total\b", re.IGNORECASE)


@dataclass(frozen=True)
class ModelCategoryDeclaration:
    """A category row in the root index.

    Attributes:
        name: Category folder name.
        count: Declared number of pattern files, None if the row has none.
        line: Line of the table row.
    """

    name: str
    count: int | None
    line: int


@dataclass(frozen=True)
class ModelTotalDeclaration:
    """A ``Total`` row in the root index."""

    count: int
    line: int


def _category_from_cell(cell: str) -> str | None:
    for _text, target, _is_image in extract_links(cell):
        m = _CATEGORY_TARGET_PATTERN.match(target.split("#", 1)[0])
        if m:
            return m.group(1)
    m = _CATEGORY_TEXT_PATTERN.match(strip_inline_markup(cell))
    return m.group(1) if m else None


def _first_integer(cells: tuple[str, ...]) -> int | None:
    for cell in cells:
        visible = strip_inline_markup(cell)
        if _INTEGER_PATTERN.match(visible):
            return int(visible)
    return None


@dataclass(frozen=True)
class ModelRootIndex:
    """Structural view of the root README.

    Attributes:
        file: The parsed README.
        categories: Category rows in document order.
        totals: Total rows in document order.
        alphabetical_links: Links in the alphabetical index section, or every
            link in the file when no such section exists.
    """

    file: ModelCorpusFile
    categories: tuple[ModelCategoryDeclaration, ...] = field(default_factory=tuple)
    totals: tuple[ModelTotalDeclaration, ...] = field(default_factory=tuple)
    alphabetical_links: tuple[MarkdownLink, ...] = field(default_factory=tuple)

    @property
    def rel_path(self) -> str:
        return self.file.rel_path

    def declared_names(self) -> set[str]:
        """Every category name listed anywhere in the root index."""
        return {d.name for d in self.categories}

    @classmethod
    def from_file(
        cls, file: ModelCorpusFile, alphabetical_heading: str
    ) -> ModelRootIndex:
        """Extract declarations and the alphabetical index from the README.

        Args:
            file: Parsed root README.
            alphabetical_heading: Case-insensitive substring of the heading
                that opens the alphabetical index.
        """
        categories: list[ModelCategoryDeclaration] = []
        totals: list[ModelTotalDeclaration] = []

        for table in file.document.tables:
            for row in table.rows:
                if not row.cells:
                    continue
                first = row.cells[0]
                name = _category_from_cell(first)
                if name is not None:
                    categories.append(
                        ModelCategoryDeclaration(
                            name=name,
                            count=_first_integer(row.cells[1:]),
                            line=row.line,
                        )
                    )
                    continue
                if _TOTAL_PATTERN.match(strip_inline_markup(first)):
                    count = _first_integer(row.cells[1:])
                    if count is not None:
                        totals.append(ModelTotalDeclaration(count=count, line=row.line))

        return cls(
            file=file,
            categories=tuple(categories),
            totals=tuple(totals),
            alphabetical_links=tuple(_alphabetical_links(file, alphabetical_heading)),
        )


def _alphabetical_links(file: ModelCorpusFile, heading_text: str) -> list[MarkdownLink]:
    document = file.document
    needle = heading_text.lower()
    start: int | None = None
    end: int | None = None
    level = 0
    for heading in document.headings:
        if start is None:
            if needle in heading.text.lower():
                start = heading.line
                level = heading.level
        elif heading.level <= level:
            end = heading.line
            break

    if start is None:
        return list(document.links)
    return [
        link
        for link in document.links
        if link.line > start and (end is None or link.line < end)
    ]


__all__ = [
    "ROOT_INDEX_NAME",
    "ModelCategoryDeclaration",
    "ModelRootIndex",
    "ModelTotalDeclaration",
]
