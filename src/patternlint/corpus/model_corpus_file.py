# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelCorpusFile and ModelPatternFile - parsed corpus documents."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from patternlint.markdown.markdown_parser import strip_inline_markup
from patternlint.markdown.model_markdown_document import ModelMarkdownDocument

# Lowercase kebab-case: "adapter", "circuit-breaker", "cqrs-2"
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@dataclass(frozen=True)
class ModelCorpusFile:
    """Any Markdown file that belongs to the corpus.

    Attributes:
        path: Absolute path on disk.
        rel_path: Path relative to the corpus root, POSIX separators.
        document: Parsed Markdown structure.
    """

    path: Path
    rel_path: str
    document: ModelMarkdownDocument

    @property
    def title(self) -> str | None:
        """First level-1 heading, if it is the first heading."""
        return self.document.title

    @property
    def intent(self) -> str | None:
        """First text line between the title and the next heading of any level.

        Blockquote markers and inline markup are stripped.
        """
        headings = self.document.headings
        if not headings or headings[0].level != 1:
            return None
        lines = self.document.lines
        start = headings[0].line
        end = headings[1].line if len(headings) > 1 else len(lines) + 1
        fence_lines = {
            n for f in self.document.fences for n in range(f.line, f.end_line + 1)
        }
        for lineno in range(start + 1, end):
            if lineno in fence_lines:
                continue
            line = lines[lineno - 1].strip()
            line = line.lstrip(">").strip()
            if line and not line.startswith(("|", "<!--")):
                return strip_inline_markup(line)
        return None


@dataclass(frozen=True)
class ModelPatternFile(ModelCorpusFile):
    """A pattern document at ``<root>/<category>/<slug>.md``.

    Attributes:
        category: Containing folder name.
        slug: Filename stem.
    """

    category: str = ""
    slug: str = ""

    @property
    def has_valid_slug(self) -> bool:
        """True if the slug is lowercase kebab-case."""
        return SLUG_PATTERN.match(self.slug) is not None


__all__ = ["SLUG_PATTERN", "ModelCorpusFile", "ModelPatternFile"]
