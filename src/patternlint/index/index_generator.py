# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Generated index tables for the root and category READMEs.

Generated content lives between marker comments, so hand-written prose
around it is never touched::

    <!-- patternlint:begin category-table -->
    | Category | Files | Description |
    ...
    <!-- patternlint:end category-table -->

Root README blocks: ``category-table`` and ``alphabetical-index``.
Category README block: ``pattern-index``. Files without markers are left
unchanged. Regeneration is idempotent: a second run changes nothing.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path

from patternlint.config.model_validator_config import ModelValidatorConfig, load_config
from patternlint.corpus.corpus_loader import load_corpus
from patternlint.corpus.model_category import CATEGORY_README_NAME, ModelCategory
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.corpus.model_root_index import ROOT_INDEX_NAME
from patternlint.markdown.markdown_parser import extract_links
from patternlint.taxonomy.link_resolution import target_path
from patternlint.utils.atomic_write import atomic_write_text

logger = logging.getLogger(__name__)

CATEGORY_TABLE_BLOCK = "category-table"
ALPHABETICAL_INDEX_BLOCK = "alphabetical-index"
PATTERN_INDEX_BLOCK = "pattern-index"

_BLOCK_PATTERN = re.compile(
    r"(<!--\s*patternlint:begin\s+(?P<name>[\w-]+)\s*-->)"
    r"(?P<body>.*?)"
    r"(<!--\s*patternlint:end\s+(?P=name)\s*-->)",
    re.DOTALL,
)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _cell(text: str) -> str:
    """Escape a value for use inside a pipe-table cell."""
    return " ".join(text.split()).replace("|", "\\|")


def _table(header: list[str], rows: list[list[str]]) -> str:
    lines = [
        "| " + " | ".join(header) + " |",
        "|" + "|".join("-" * (len(h) + 2) for h in header) + "|",
    ]
    lines.extend("| " + " | ".join(row) + " |" for row in rows)
    return "\n".join(lines)


def render_category_table(corpus: ModelCorpus) -> str:
    """Root category table with a Total row."""
    rows = [
        [
            f"[{c.name}/](./{c.name}/{CATEGORY_README_NAME})",
            str(len(c.patterns)),
            _cell(c.description),
        ]
        for c in corpus.categories
    ]
    rows.append(["**Total**", str(len(corpus.patterns)), ""])
    return _table(["Category", "Files", "Description"], rows)


def render_alphabetical_index(corpus: ModelCorpus) -> str:
    """Every pattern sorted by title, then slug."""
    ordered = sorted(
        corpus.patterns, key=lambda p: ((p.title or p.slug).lower(), p.slug)
    )
    rows = [
        [f"[{_cell(p.title or p.slug)}](./{p.rel_path})", p.category]
        for p in ordered
    ]
    return _table(["Pattern", "Category"], rows)


def _existing_rows(category: ModelCategory) -> dict[str, tuple[str, str]]:
    """Content and Usage cells of the current index table, by file name."""
    table = category.index_table()
    if table is None:
        return {}
    file_col = table.column_index("file") or 0
    content_col = table.column_index("content")
    usage_col = table.column_index("usage")

    def cell(cells: tuple[str, ...], index: int | None) -> str:
        if index is None or index >= len(cells):
            return ""
        return cells[index]

    existing: dict[str, tuple[str, str]] = {}
    for row in table.rows:
        for _text, target, _is_image in extract_links(cell(row.cells, file_col)):
            name = Path(target_path(target)).name
            existing.setdefault(
                name, (cell(row.cells, content_col), cell(row.cells, usage_col))
            )
    return existing


def render_pattern_index(category: ModelCategory) -> str:
    """Category index table (File, Content, Usage).

    Content and Usage text of existing rows is kept; new rows default the
    content to the pattern intent.
    """
    existing = _existing_rows(category)
    rows: list[list[str]] = []
    for pattern in category.patterns:
        filename = pattern.path.name
        content, usage = existing.get(filename, ("", ""))
        if not content:
            content = _cell(pattern.intent or pattern.title or "")
        rows.append([f"[{filename}](./{filename})", content, usage])
    return _table(["File", "Content", "Usage"], rows)


# ---------------------------------------------------------------------------
# Block replacement
# ---------------------------------------------------------------------------


def update_generated_blocks(text: str, blocks: Mapping[str, str]) -> str:
    """Replace the content of every named marker block found in ``text``.

    Blocks whose name is not in ``blocks`` are left as they are.
    """

    def replace(match: re.Match[str]) -> str:
        name = match.group("name")
        if name not in blocks:
            return match.group(0)
        return f"{match.group(1)}\n{blocks[name].strip()}\n{match.group(4)}"

    return _BLOCK_PATTERN.sub(replace, text)


def generated_blocks(corpus: ModelCorpus) -> dict[Path, dict[str, str]]:
    """Rendered blocks for every README, keyed by absolute path."""
    blocks: dict[Path, dict[str, str]] = {
        corpus.root / ROOT_INDEX_NAME: {
            CATEGORY_TABLE_BLOCK: render_category_table(corpus),
            ALPHABETICAL_INDEX_BLOCK: render_alphabetical_index(corpus),
        }
    }
    for category in corpus.categories:
        if category.readme is not None:
            blocks[category.readme.path] = {
                PATTERN_INDEX_BLOCK: render_pattern_index(category)
            }
    return blocks


def regenerate_indexes(
    root: Path,
    config: ModelValidatorConfig | None = None,
    *,
    write: bool = False,
) -> list[Path]:
    """Refresh the generated blocks of every README under ``root``.

    Args:
        root: Corpus root directory.
        config: Validator configuration; loaded from the root when None.
        write: Write changed files atomically. When False only report them.

    Returns:
        READMEs whose generated blocks are stale, sorted by path.

    Raises:
        CorpusReadError: If the corpus cannot be read.
        OSError: If a changed file cannot be written.
    """
    root = Path(root)
    config = config or load_config(root)
    corpus = load_corpus(root, config)

    sources = {f.path: f.document.source for f in corpus.markdown_files}
    changed: list[Path] = []
    for path, blocks in sorted(generated_blocks(corpus).items()):
        if path not in sources:
            logger.warning("No %s at %s, skipping", ROOT_INDEX_NAME, path.parent)
            continue
        original = sources[path]
        updated = update_generated_blocks(original, blocks)
        if updated == original:
            continue
        changed.append(path)
        if write:
            atomic_write_text(path, updated)
            logger.info("Updated %s", corpus.relative(path))
    return changed


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
