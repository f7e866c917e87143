# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelCorpus - a loaded repository snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path

from patternlint.corpus.model_category import ModelCategory
from patternlint.corpus.model_corpus_file import ModelCorpusFile, ModelPatternFile
from patternlint.corpus.model_root_index import ModelRootIndex


@dataclass(frozen=True)
class ModelCorpus:
    """Read-only view of the whole corpus, built once per run.

    Attributes:
        root: Absolute corpus root.
        categories: Category folders sorted by name.
        root_index: Parsed root README, None if absent.
    """

    root: Path
    categories: tuple[ModelCategory, ...] = field(default_factory=tuple)
    root_index: ModelRootIndex | None = None

    @cached_property
    def patterns(self) -> list[ModelPatternFile]:
        """Every pattern file, sorted by relative path."""
        return sorted(
            (p for c in self.categories for p in c.patterns),
            key=lambda p: p.rel_path,
        )

    @property
    def markdown_files(self) -> list[ModelCorpusFile]:
        """Root README, category READMEs and patterns, sorted by relative path."""
        files: list[ModelCorpusFile] = []
        if self.root_index is not None:
            files.append(self.root_index.file)
        for category in self.categories:
            if category.readme is not None:
                files.append(category.readme)
            files.extend(category.patterns)
        return sorted(files, key=lambda f: f.rel_path)

    @property
    def category_names(self) -> set[str]:
        return {c.name for c in self.categories}

    def category(self, name: str) -> ModelCategory | None:
        """Look up a category by folder name."""
        for category in self.categories:
            if category.name == name:
                return category
        return None

    @cached_property
    def _patterns_by_path(self) -> dict[Path, ModelPatternFile]:
        return {p.path: p for p in self.patterns}

    def pattern_at(self, path: Path) -> ModelPatternFile | None:
        """Return the pattern file at a resolved absolute path, if any."""
        return self._patterns_by_path.get(path)

    def relative(self, path: Path) -> str:
        """POSIX path relative to the root."""
        return path.relative_to(self.root).as_posix()


__all__ = ["ModelCorpus"]
