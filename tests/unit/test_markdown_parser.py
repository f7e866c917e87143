# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Unit tests for the line-oriented Markdown parser."""

from __future__ import annotations

import pytest

from patternlint.markdown import (
    extract_links,
    parse_markdown,
    split_table_cells,
    strip_inline_markup,
)

pytestmark = pytest.mark.unit

SAMPLE = """\
# Adapter

> Convert one interface into another.

## Solution

See [Facade](./facade.md) and <https://example.com/adapter>.

```go
// [NotALink](./nowhere.md)
## not a heading
```

## Related Patterns

| Pattern | Relation |
|---------|----------|
| [Facade](./facade.md) | simplifies |

### Notes

![diagram](./img/adapter.png)

[ref]: ./reference.md
"""


# =========================================================================
# Test: Headings
# =========================================================================


class TestHeadings:
    """ATX headings outside fences."""

    def test_levels_text_and_lines(self) -> None:
        document = parse_markdown(SAMPLE)
        assert [(h.level, h.text, h.line) for h in document.headings] == [
            (1, "Adapter", 1),
            (2, "Solution", 5),
            (2, "Related Patterns", 14),
            (3, "Notes", 20),
        ]

    def test_title_is_first_level_one_heading(self) -> None:
        assert parse_markdown(SAMPLE).title == "Adapter"

    def test_title_none_when_first_heading_is_not_level_one(self) -> None:
        assert parse_markdown("## Intro\n# Late title\n").title is None

    def test_closing_hashes_are_removed(self) -> None:
        document = parse_markdown("## Sources ##\n")
        assert document.headings[0].text == "Sources"

    def test_hash_without_space_is_not_a_heading(self) -> None:
        assert parse_markdown("#hashtag\n").headings == ()


# =========================================================================
# Test: Fences
# =========================================================================


class TestFences:
    """Fenced code blocks hide their content from every other structure."""

    def test_fence_language_and_lines(self) -> None:
        fence = parse_markdown(SAMPLE).fences[0]
        assert fence.language == "go"
        assert (fence.line, fence.end_line) == (9, 12)
        assert "not a heading" in fence.body

    def test_content_inside_fence_is_ignored(self) -> None:
        document = parse_markdown(SAMPLE)
        assert all(link.target != "./nowhere.md" for link in document.links)
        assert all(h.text != "not a heading" for h in document.headings)

    def test_tilde_fence_and_uppercase_tag(self) -> None:
        document = parse_markdown("~~~Python\nx = 1\n~~~\n")
        assert document.fences[0].language == "python"

    def test_untagged_fence(self) -> None:
        assert parse_markdown("```\nplain\n```\n").fences[0].language == ""

    def test_shorter_closing_fence_does_not_close(self) -> None:
        document = parse_markdown("````go\n```\nstill code\n````\n# After\n")
        assert len(document.fences) == 1
        assert document.fences[0].end_line == 4
        assert document.headings[0].text == "After"

    def test_unterminated_fence_runs_to_end(self) -> None:
        document = parse_markdown("```go\ncode\n# hidden\n")
        assert document.fences[0].end_line == 3
        assert document.headings == ()


# =========================================================================
# Test: Links
# =========================================================================


class TestLinks:
    """Inline links, images, autolinks and reference definitions."""

    def test_all_link_kinds_are_collected(self) -> None:
        targets = [link.target for link in parse_markdown(SAMPLE).links]
        assert targets == [
            "./facade.md",
            "https://example.com/adapter",
            "./facade.md",
            "./img/adapter.png",
            "./reference.md",
        ]

    def test_link_section_is_nearest_level_two_heading(self) -> None:
        document = parse_markdown(SAMPLE)
        sections = {link.target: link.section for link in document.links}
        assert sections["https://example.com/adapter"] == "Solution"
        # Level-3 headings do not open a new section
        assert sections["./img/adapter.png"] == "Related Patterns"

    def test_image_flag(self) -> None:
        images = [link for link in parse_markdown(SAMPLE).links if link.is_image]
        assert [link.target for link in images] == ["./img/adapter.png"]

    def test_code_span_hides_link(self) -> None:
        assert extract_links("Use `[x](./x.md)` literally") == []

    def test_link_with_balanced_parentheses(self) -> None:
        links = extract_links("[Wiki](https://en.wikipedia.org/wiki/Adapter_(pattern))")
        assert links == [
            ("Wiki", "https://en.wikipedia.org/wiki/Adapter_(pattern)", False)
        ]

    def test_link_title_is_not_part_of_target(self) -> None:
        assert extract_links('[A](./a.md "Adapter")') == [("A", "./a.md", False)]

    def test_footnote_definition_is_not_a_link(self) -> None:
        assert parse_markdown("[^1]: A footnote\n").links == ()


# =========================================================================
# Test: Tables
# =========================================================================


class TestTables:
    """GitHub pipe tables."""

    def test_table_header_rows_and_section(self) -> None:
        table = parse_markdown(SAMPLE).tables[0]
        assert table.header == ("Pattern", "Relation")
        assert table.has_separator is True
        assert table.section == "Related Patterns"
        assert [row.cells for row in table.rows] == [
            ("[Facade](./facade.md)", "simplifies")
        ]
        assert table.rows[0].line == 18

    def test_table_without_separator(self) -> None:
        table = parse_markdown("| A | B |\n| 1 | 2 |\n").tables[0]
        assert table.has_separator is False
        assert [row.cells for row in table.rows] == [("1", "2")]

    def test_column_index_matches_whole_words(self) -> None:
        table = parse_markdown("| File name | Content |\n|---|---|\n").tables[0]
        assert table.column_index("FILE") == 0
        assert table.column_index("usage") is None

    @pytest.mark.parametrize(
        ("header", "name", "expected"),
        [
            ("| Profile | File |", "file", 1),
            ("| Anti-pattern | Pattern |", "pattern", 1),
            ("| **File** | Usage |", "file", 0),
            ("| Files | Description |", "file", 0),
            ("| Profile | Filename |", "file", None),
        ],
    )
    def test_column_index_ignores_partial_words(
        self, header: str, name: str, expected: int | None
    ) -> None:
        table = parse_markdown(f"{header}\n|---|---|\n").tables[0]
        assert table.column_index(name) == expected

    def test_tables_in_section(self) -> None:
        document = parse_markdown(SAMPLE)
        assert len(document.tables_in_section("related")) == 1
        assert document.tables_in_section("solution") == []

    def test_split_cells_respects_escaped_pipes_and_code(self) -> None:
        assert split_table_cells(r"| a \| b | `x | y` | c |") == [
            r"a \| b",
            "`x | y`",
            "c",
        ]


# =========================================================================
# Test: Inline Markup
# =========================================================================


class TestStripInlineMarkup:
    """Visible text of headings and cells."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("**Total**", "Total"),
            ("[Adapter](./adapter.md)", "Adapter"),
            ("`structural/`", "structural/"),
            ("snake_case_name", "snake_case_name"),
            ("_Problem_ Solved", "Problem Solved"),
        ],
    )
    def test_strip(self, raw: str, expected: str) -> None:
        assert strip_inline_markup(raw) == expected
