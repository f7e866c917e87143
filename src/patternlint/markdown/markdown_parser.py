# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Line-oriented Markdown structure extraction.

Extracts the parts of a document the taxonomy rules need:

  - ATX headings (``#`` to ``######``)
  - fenced code blocks (``` and ~~~, any length >= 3, info-string language)
  - links: inline ``[text](target)``, images, reference definitions
    ``[label]: target`` and autolinks ``<https://...>``
  - GitHub pipe tables, with or without a delimiter row

Nothing inside a fence is interpreted. Inline code spans are masked before
link detection. This is not a renderer: setext headings, HTML blocks and
nested containers are not modelled.
"""

from __future__ import annotations

import re

from patternlint.markdown.model_markdown_document import (
    MarkdownFence,
    MarkdownHeading,
    MarkdownLink,
    MarkdownTable,
    MarkdownTableRow,
    ModelMarkdownDocument,
)

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_HEADING_PATTERN = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.*?)[ \t]*$")
_HEADING_CLOSING_HASHES = re.compile(r"(?:^|[ \t]+)#+$")
_FENCE_OPEN_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*([^\s`]*)")
_CODE_SPAN_PATTERN = re.compile(r"(`+)(.+?)\1")

# Link target allows one level of balanced parentheses, e.g. Wikipedia URLs
_INLINE_LINK_PATTERN = re.compile(
    r"(!?)\[((?:[^\[\]]|\[[^\[\]]*\])*)\]"
    r"\(\s*<?((?:[^()\s<>]|\([^()\s]*\))+)>?(?:\s+(?:\"[^\"]*\"|'[^']*'))?\s*\)"
)
_AUTOLINK_PATTERN = re.compile(r"<((?:https?|ftp)://[^>\s]+)>")
_REFERENCE_DEF_PATTERN = re.compile(r"^ {0,3}\[([^\]^][^\]]*)\]:\s*<?(\S+?)>?(?:\s+.*)?$")
_DELIMITER_CELL_PATTERN = re.compile(r"^:?-+:?$")
_EMPHASIS_PATTERN = re.compile(r"(?<!\w)(\*\*|__|\*|_)(\S(?:.*?\S)?)\1(?!\w)")


# ---------------------------------------------------------------------------
# Inline helpers
# ---------------------------------------------------------------------------


def mask_code_spans(line: str) -> str:
    """Replace inline code spans with spaces of equal length."""
    return _CODE_SPAN_PATTERN.sub(lambda m: " " * len(m.group(0)), line)


def extract_links(text: str) -> list[tuple[str, str, bool]]:
    """Return ``(text, target, is_image)`` for each link in one line of text.

    Inline code spans are ignored.
    """
    masked = mask_code_spans(text)
    found: list[tuple[str, str, bool]] = []
    for m in _INLINE_LINK_PATTERN.finditer(masked):
        found.append((m.group(2), m.group(3), m.group(1) == "!"))
    for m in _AUTOLINK_PATTERN.finditer(masked):
        found.append((m.group(1), m.group(1), False))
    return found


def strip_inline_markup(text: str) -> str:
    """Reduce a table cell or heading to its visible text.

    Links keep their text, emphasis and code markers are dropped.
    """
    text = _INLINE_LINK_PATTERN.sub(lambda m: m.group(2), text)
    text = text.replace("`", "")
    text = _EMPHASIS_PATTERN.sub(r"\2", text)
    return text.strip()


def split_table_cells(line: str) -> list[str]:
    """Split a pipe-table line into stripped cells.

    Pipes escaped with a backslash or inside code spans do not split.
    """
    body = line.strip()
    if body.startswith("|"):
        body = body[1:]
    if body.endswith("|") and not body.endswith("\\|"):
        body = body[:-1]

    cells: list[str] = []
    current: list[str] = []
    in_code = False
    prev = ""
    for ch in body:
        if ch == "`":
            in_code = not in_code
        if ch == "|" and not in_code and prev != "\\":
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        prev = ch
    cells.append("".join(current).strip())
    return cells


def _is_delimiter_row(cells: list[str]) -> bool:
    return bool(cells) and all(_DELIMITER_CELL_PATTERN.match(c) for c in cells)


def _heading_text(raw: str) -> str:
    return _HEADING_CLOSING_HASHES.sub("", raw).strip()


# ---------------------------------------------------------------------------
# Document parser
# ---------------------------------------------------------------------------


class _TableBuffer:
    """Consecutive pipe lines awaiting conversion into a MarkdownTable."""

    def __init__(self) -> None:
        self.lines: list[tuple[int, str]] = []
        self.section: str | None = None

    def flush(self, tables: list[MarkdownTable]) -> None:
        if not self.lines:
            return
        parsed = [(lineno, split_table_cells(raw)) for lineno, raw in self.lines]
        header_line, header = parsed[0]
        has_separator = len(parsed) >= 2 and _is_delimiter_row(parsed[1][1])
        body = parsed[2:] if has_separator else parsed[1:]
        tables.append(
            MarkdownTable(
                header=tuple(header),
                rows=tuple(
                    MarkdownTableRow(cells=tuple(cells), line=lineno)
                    for lineno, cells in body
                ),
                line=header_line,
                section=self.section,
                has_separator=has_separator,
            )
        )
        self.lines = []


def parse_markdown(text: str) -> ModelMarkdownDocument:
    """Parse Markdown source into headings, fences, links and tables.

    Args:
        text: Full document source.

    Returns:
        ModelMarkdownDocument with all structures in document order.
    """
    headings: list[MarkdownHeading] = []
    fences: list[MarkdownFence] = []
    links: list[MarkdownLink] = []
    tables: list[MarkdownTable] = []

    section: str | None = None
    table = _TableBuffer()

    fence_marker: str | None = None
    fence_language = ""
    fence_start = 0
    fence_body: list[str] = []

    lines = text.splitlines()
    for lineno, raw in enumerate(lines, start=1):
        if fence_marker is not None:
            stripped = raw.strip()
            if (
                stripped.startswith(fence_marker[0] * len(fence_marker))
                and set(stripped) == {fence_marker[0]}
            ):
                fences.append(
                    MarkdownFence(
                        language=fence_language,
                        line=fence_start,
                        end_line=lineno,
                        body="\n".join(fence_body),
                    )
                )
                fence_marker = None
            else:
                fence_body.append(raw)
            continue

        fence_match = _FENCE_OPEN_PATTERN.match(raw)
        if fence_match:
            table.flush(tables)
            fence_marker = fence_match.group(1)
            fence_language = fence_match.group(2).lower()
            fence_start = lineno
            fence_body = []
            continue

        if raw.lstrip().startswith("|"):
            if not table.lines:
                table.section = section
            table.lines.append((lineno, raw))
            _collect_links(raw, lineno, section, links)
            continue
        table.flush(tables)

        heading_match = _HEADING_PATTERN.match(raw)
        if heading_match:
            level = len(heading_match.group(1))
            heading = _heading_text(heading_match.group(2))
            headings.append(MarkdownHeading(level=level, text=heading, line=lineno))
            if level == 1:
                section = None
            elif level == 2:
                section = heading
            continue

        ref_match = _REFERENCE_DEF_PATTERN.match(raw)
        if ref_match:
            links.append(
                MarkdownLink(
                    text=ref_match.group(1),
                    target=ref_match.group(2),
                    line=lineno,
                    section=section,
                )
            )
            continue

        _collect_links(raw, lineno, section, links)

    table.flush(tables)

    # Unterminated fence runs to end of document
    if fence_marker is not None:
        fences.append(
            MarkdownFence(
                language=fence_language,
                line=fence_start,
                end_line=len(lines),
                body="\n".join(fence_body),
            )
        )

    return ModelMarkdownDocument(
        source=text,
        headings=tuple(headings),
        fences=tuple(fences),
        links=tuple(links),
        tables=tuple(tables),
    )


def _collect_links(
    raw: str, lineno: int, section: str | None, links: list[MarkdownLink]
) -> None:
    for link_text, target, is_image in extract_links(raw):
        links.append(
            MarkdownLink(
                text=link_text,
                target=target,
                line=lineno,
                section=section,
                is_image=is_image,
            )
        )


__all__ = [
    "extract_links",
    "mask_code_spans",
    "parse_markdown",
    "split_table_cells",
    "strip_inline_markup",
]
