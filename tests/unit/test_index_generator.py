# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Unit tests for README index generation."""

from __future__ import annotations

from pathlib import Path

import pytest

from patternlint.corpus import load_corpus
from patternlint.index import (
    regenerate_indexes,
    render_alphabetical_index,
    render_category_table,
    render_pattern_index,
    update_generated_blocks,
)
from patternlint.taxonomy import EnumTaxonomyRule, run_validation

pytestmark = pytest.mark.unit


@pytest.fixture
def marked_corpus(corpus_builder) -> Path:
    corpus_builder.with_markers = True
    return corpus_builder.build()


def add_bridge(root: Path, pattern_text) -> None:
    (root / "structural" / "bridge.md").write_text(pattern_text("Bridge"), encoding="utf-8")


# =========================================================================
# Test: Rendering
# =========================================================================


class TestRendering:
    """Tables rendered from the loaded corpus."""

    def test_category_table(self, clean_corpus: Path) -> None:
        table = render_category_table(load_corpus(clean_corpus))
        assert table.splitlines() == [
            "| Category | Files | Description |",
            "|----------|-------|-------------|",
            "| [concurrency/](./concurrency/README.md) | 1 | Coordinating concurrent work |",
            "| [enterprise/](./enterprise/README.md) | 1 | Enterprise application patterns |",
            "| [structural/](./structural/README.md) | 2 | Composition of objects |",
            "| **Total** | 4 |  |",
        ]

    def test_alphabetical_index(self, clean_corpus: Path) -> None:
        table = render_alphabetical_index(load_corpus(clean_corpus))
        assert table.splitlines()[2:] == [
            "| [Actor](./concurrency/actor.md) | concurrency |",
            "| [Adapter](./structural/adapter.md) | structural |",
            "| [DTO](./enterprise/dto.md) | enterprise |",
            "| [Facade](./structural/facade.md) | structural |",
        ]

    def test_pattern_index_keeps_existing_cells(
        self, clean_corpus: Path, pattern_text
    ) -> None:
        add_bridge(clean_corpus, pattern_text)
        category = load_corpus(clean_corpus).category("structural")
        assert category is not None
        assert render_pattern_index(category).splitlines() == [
            "| File | Content | Usage |",
            "|------|---------|-------|",
            "| [adapter.md](./adapter.md) | Adapter overview | Use for adapter |",
            "| [bridge.md](./bridge.md) | Bridge in one line. |  |",
            "| [facade.md](./facade.md) | Facade overview | Use for facade |",
        ]


# =========================================================================
# Test: Block Replacement
# =========================================================================


class TestUpdateGeneratedBlocks:
    """Only the content between markers changes."""

    def test_replaces_named_block(self) -> None:
        text = (
            "Intro\n"
            "<!-- patternlint:begin pattern-index -->\nold\n"
            "<!-- patternlint:end pattern-index -->\n"
            "Outro\n"
        )
        assert update_generated_blocks(text, {"pattern-index": "new\n"}) == (
            "Intro\n"
            "<!-- patternlint:begin pattern-index -->\nnew\n"
            "<!-- patternlint:end pattern-index -->\n"
            "Outro\n"
        )

    def test_unknown_block_untouched(self) -> None:
        text = "<!-- patternlint:begin other -->\nkeep\n<!-- patternlint:end other -->"
        assert update_generated_blocks(text, {"pattern-index": "new"}) == text

    def test_text_without_markers_untouched(self) -> None:
        text = "| File | Content | Usage |\n"
        assert update_generated_blocks(text, {"pattern-index": "new"}) == text


# =========================================================================
# Test: Regeneration
# =========================================================================


class TestRegenerateIndexes:
    """Check and write modes over a corpus on disk."""

    def test_fresh_corpus_is_up_to_date(self, marked_corpus: Path) -> None:
        assert regenerate_indexes(marked_corpus) == []

    def test_reports_stale_readmes_without_writing(
        self, marked_corpus: Path, pattern_text
    ) -> None:
        add_bridge(marked_corpus, pattern_text)
        root_readme = marked_corpus / "README.md"
        before = root_readme.read_text(encoding="utf-8")

        stale = regenerate_indexes(marked_corpus)

        resolved = marked_corpus.resolve()
        assert stale == [resolved / "README.md", resolved / "structural" / "README.md"]
        assert root_readme.read_text(encoding="utf-8") == before

    def test_write_then_idempotent(self, marked_corpus: Path, pattern_text) -> None:
        add_bridge(marked_corpus, pattern_text)

        assert len(regenerate_indexes(marked_corpus, write=True)) == 2
        assert regenerate_indexes(marked_corpus, write=True) == []

        root_text = (marked_corpus / "README.md").read_text(encoding="utf-8")
        assert "| [structural/](./structural/README.md) | 3 |" in root_text
        assert "| **Total** | 5 |  |" in root_text
        assert "| [Bridge](./structural/bridge.md) | structural |" in root_text
        result = run_validation(marked_corpus, rules=[EnumTaxonomyRule.ORPHAN_PATTERN])
        assert result.is_clean

    def test_prose_outside_markers_preserved(
        self, marked_corpus: Path, pattern_text
    ) -> None:
        readme = marked_corpus / "structural" / "README.md"
        readme.write_text(
            readme.read_text(encoding="utf-8") + "\nHand-written notes.\n",
            encoding="utf-8",
        )
        add_bridge(marked_corpus, pattern_text)
        regenerate_indexes(marked_corpus, write=True)
        text = readme.read_text(encoding="utf-8")
        assert text.startswith("# Structural\n\n> Composition of objects\n")
        assert text.endswith("\nHand-written notes.\n")
        assert "| [bridge.md](./bridge.md) | Bridge in one line. |  |" in text

    def test_files_without_markers_are_left_alone(
        self, clean_corpus: Path, pattern_text
    ) -> None:
        add_bridge(clean_corpus, pattern_text)
        assert regenerate_indexes(clean_corpus, write=True) == []
