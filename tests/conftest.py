# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Pytest configuration and fixtures for patternlint tests.

The central fixture is ``corpus_builder``: it collects categories and
patterns in memory and writes a corpus whose root index, category READMEs
and pattern files are consistent with each other. A freshly built corpus
validates cleanly; tests perturb it (before or after ``build()``) to
provoke one finding at a time.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

# =========================================================================
# Pattern File Rendering
# =========================================================================

DEFAULT_LANGUAGE = "go"

SKELETON_SECTIONS: tuple[str, ...] = (
    "Principle",
    "Problem Solved",
    "Solution",
    "When to Use",
    "When Not to Use",
    "Advantages / Disadvantages",
    "Anti-patterns",
    "Related Patterns",
    "Sources",
)


def render_pattern(
    title: str,
    *,
    intent: str | None = None,
    related: Sequence[tuple[str, str]] = (),
    code: str | None = None,
    language: str = DEFAULT_LANGUAGE,
    omit_sections: Sequence[str] = (),
) -> str:
    """Render a skeleton-compliant pattern file."""
    intent = intent if intent is not None else f"{title} in one line."
    code = code if code is not None else f"type {title.replace(' ', '')} struct{{}}"
    bodies = {
        "Principle": f"{title} keeps one responsibility per participant.",
        "Problem Solved": "Without it, callers couple to details.",
        "Solution": f"```{language}\n{code}\n```",
        "When to Use": "- The forces above apply.",
        "When Not to Use": "- A plain function is enough.",
        "Advantages / Disadvantages": (
            "| Advantages | Disadvantages |\n"
            "|------------|---------------|\n"
            "| Decoupling | Indirection |"
        ),
        "Anti-patterns": "- Applying it everywhere.",
        "Related Patterns": "\n".join(
            ["| Pattern | Relation |", "|---------|----------|"]
            + [f"| [{text}]({target}) | related |" for text, target in related]
        ),
        "Sources": "- [Pattern catalogue](https://refactoring.guru/design-patterns)",
    }
    parts = [f"# {title}", "", f"> {intent}", ""]
    for section in SKELETON_SECTIONS:
        if section in omit_sections:
            continue
        parts.extend([f"## {section}", "", bodies[section], ""])
    return "\n".join(parts)


# =========================================================================
# Corpus Builder
# =========================================================================


@dataclass
class PatternSpec:
    slug: str
    title: str
    text: str


@dataclass
class CategorySpec:
    name: str
    description: str
    patterns: list[PatternSpec] = field(default_factory=list)


class CorpusBuilder:
    """Write a consistent pattern corpus under a root directory."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.categories: dict[str, CategorySpec] = {}
        self.declared_counts: dict[str, int] = {}
        self.declared_total: int | None = None
        self.with_markers = False

    def add_category(self, name: str, description: str | None = None) -> CorpusBuilder:
        self.categories.setdefault(
            name,
            CategorySpec(name, description or f"{name.title()} patterns"),
        )
        return self

    def add_pattern(
        self,
        category: str,
        slug: str,
        title: str | None = None,
        *,
        text: str | None = None,
        **render_kwargs: object,
    ) -> CorpusBuilder:
        self.add_category(category)
        title = title or slug.replace("-", " ").title()
        if text is None:
            text = render_pattern(title, **render_kwargs)  # type: ignore[arg-type]
        self.categories[category].patterns.append(PatternSpec(slug, title, text))
        return self

    # -----------------------------------------------------------------
    # Rendering
    # -----------------------------------------------------------------

    def _block(self, name: str, table: str) -> str:
        if not self.with_markers:
            return table
        return (
            f"<!-- patternlint:begin {name} -->\n{table}\n"
            f"<!-- patternlint:end {name} -->"
        )

    def root_readme(self) -> str:
        rows = []
        for name, spec in sorted(self.categories.items()):
            count = self.declared_counts.get(name, len(spec.patterns))
            rows.append(
                f"| [{name}/](./{name}/README.md) | {count} | {spec.description} |"
            )
        total = self.declared_total
        if total is None:
            total = sum(len(c.patterns) for c in self.categories.values())
        category_table = "\n".join(
            ["| Category | Files | Description |", "|----------|-------|-------------|"]
            + rows
            + [f"| **Total** | {total} |  |"]
        )

        entries = sorted(
            (p.title, p.slug, c.name)
            for c in self.categories.values()
            for p in c.patterns
        )
        alphabetical = "\n".join(
            ["| Pattern | Category |", "|---------|----------|"]
            + [f"| [{t}](./{c}/{s}.md) | {c} |" for t, s, c in entries]
        )
        return "\n".join(
            [
                "# Design Patterns",
                "",
                "> A curated library of design patterns.",
                "",
                "## Categories",
                "",
                self._block("category-table", category_table),
                "",
                "## Alphabetical Index",
                "",
                self._block("alphabetical-index", alphabetical),
                "",
            ]
        )

    def category_readme(self, spec: CategorySpec) -> str:
        index_rows = [
            f"| [{p.slug}.md](./{p.slug}.md) | {p.title} overview | Use for {p.slug} |"
            for p in spec.patterns
        ]
        decision_rows = [
            f"| Need {p.slug} | [{p.title}](./{p.slug}.md) |" for p in spec.patterns
        ]
        index_table = "\n".join(
            ["| File | Content | Usage |", "|------|---------|-------|"] + index_rows
        )
        return "\n".join(
            [
                f"# {spec.name.title()}",
                "",
                f"> {spec.description}",
                "",
                f"This category holds {len(spec.patterns)} patterns.",
                "",
                "## Pattern Index",
                "",
                self._block("pattern-index", index_table),
                "",
                "## Decision Table",
                "",
                "| Need | Pattern |",
                "|------|---------|",
                *decision_rows,
                "",
            ]
        )

    def build(self) -> Path:
        """Write every file and return the corpus root."""
        self.root.mkdir(parents=True, exist_ok=True)
        (self.root / "README.md").write_text(self.root_readme(), encoding="utf-8")
        for spec in self.categories.values():
            folder = self.root / spec.name
            folder.mkdir(exist_ok=True)
            (folder / "README.md").write_text(
                self.category_readme(spec), encoding="utf-8"
            )
            for pattern in spec.patterns:
                (folder / f"{pattern.slug}.md").write_text(
                    pattern.text, encoding="utf-8"
                )
        return self.root


def add_default_patterns(builder: CorpusBuilder) -> CorpusBuilder:
    """Populate the builder with the small reference corpus."""
    builder.add_category("concurrency", "Coordinating concurrent work")
    builder.add_category("enterprise", "Enterprise application patterns")
    builder.add_category("structural", "Composition of objects")
    builder.add_pattern("concurrency", "actor")
    builder.add_pattern(
        "enterprise",
        "dto",
        "DTO",
        code='type UserDTO struct {\n    ID string `json:"id" dto:"out,api,pub"`\n}',
    )
    builder.add_pattern(
        "structural",
        "adapter",
        related=[("Facade", "./facade.md"), ("Actor", "../concurrency/actor.md")],
    )
    builder.add_pattern("structural", "facade", related=[("Adapter", "./adapter.md")])
    return builder


# =========================================================================
# Fixtures
# =========================================================================


@pytest.fixture
def corpus_root(tmp_path: Path) -> Path:
    """Root directory for a corpus under construction."""
    return tmp_path / "patterns"


@pytest.fixture
def corpus_builder(corpus_root: Path) -> CorpusBuilder:
    """Builder pre-populated with the reference corpus (not yet written)."""
    return add_default_patterns(CorpusBuilder(corpus_root))


@pytest.fixture
def empty_corpus_builder(corpus_root: Path) -> CorpusBuilder:
    """Builder with no categories."""
    return CorpusBuilder(corpus_root)


@pytest.fixture
def clean_corpus(corpus_builder: CorpusBuilder) -> Path:
    """A written corpus that validates without findings."""
    return corpus_builder.build()


@pytest.fixture
def pattern_text() -> Callable[..., str]:
    """Factory rendering a skeleton-compliant pattern file."""
    return render_pattern
