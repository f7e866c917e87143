# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelCategory - one category folder and its members."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from patternlint.corpus.model_corpus_file import ModelCorpusFile, ModelPatternFile
from patternlint.markdown.model_markdown_document import MarkdownTable

CATEGORY_README_NAME = "README.md"


@dataclass(frozen=True)
class ModelCategory:
    """A category folder.

    Attributes:
        name: Folder name, the canonical category name.
        path: Absolute folder path.
        readme: Parsed README.md, or None if the folder has none.
        patterns: Pattern files in the folder, sorted by slug.
    """

    name: str
    path: Path
    readme: ModelCorpusFile | None = None
    patterns: tuple[ModelPatternFile, ...] = field(default_factory=tuple)

    @property
    def description(self) -> str:
        """One-line description taken from the README intent."""
        if self.readme is None:
            return ""
        return self.readme.intent or ""

    @property
    def readme_rel_path(self) -> str:
        """Relative path of the README, whether or not it exists."""
        return f"{self.name}/{CATEGORY_README_NAME}"

    def index_table(self) -> MarkdownTable | None:
        """The README pattern index table (first table with a File column)."""
        if self.readme is None:
            return None
        for table in self.readme.document.tables:
            if table.column_index("file") is not None:
                return table
        return None

    def stated_counts(
        self, patterns: Sequence[re.Pattern[str]]
    ) -> list[tuple[int, int]]:
        """``(count, line)`` for every README line that states the folder size.

        A line counts as a statement only if one of ``patterns`` matches it,
        so incidental numbers in prose ("the 23 patterns of the GoF book")
        are ignored. Code fences and table rows are never statements.
        """
        if self.readme is None:
            return []
        document = self.readme.document
        skip = {n for f in document.fences for n in range(f.line, f.end_line + 1)}
        found: list[tuple[int, int]] = []
        for lineno, line in enumerate(document.lines, start=1):
            if lineno in skip or line.lstrip().startswith("|"):
                continue
            for pattern in patterns:
                m = pattern.search(line)
                if m:
                    found.append((int(m.group(1)), lineno))
                    break
        return found


__all__ = ["CATEGORY_README_NAME", "ModelCategory"]
